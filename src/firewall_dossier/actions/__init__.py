"""Actions package - Read-only presentation of prepared configurations."""

from firewall_dossier.actions.report import ReportAction

__all__ = ["ReportAction"]
