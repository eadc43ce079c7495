"""Engine package - Scoring for derived configuration metrics."""

from firewall_dossier.engine.scoring import ScoreCalculator

__all__ = ["ScoreCalculator"]
