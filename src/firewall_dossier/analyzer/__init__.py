"""Analyzer package - Analysis modules that reason about a device configuration.

IMPORTANT: Analyzers NEVER modify the configuration they are given.
They only read it and return new records.
"""

from firewall_dossier.analyzer.analysis import compute_analysis
from firewall_dossier.analyzer.resource_usage import ResourceUsageAnalyzer
from firewall_dossier.analyzer.rule_analyzer import RuleAnalyzer
from firewall_dossier.analyzer.statistics import StatisticsComputer

__all__ = [
    "ResourceUsageAnalyzer",
    "RuleAnalyzer",
    "StatisticsComputer",
    "compute_analysis",
]
