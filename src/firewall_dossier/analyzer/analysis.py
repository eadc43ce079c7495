"""Analysis pipeline - Runs every analyzer and check against one device.

Public API:
    compute_analysis(device) -> Analysis
"""

import logging

from firewall_dossier.analyzer.resource_usage import ResourceUsageAnalyzer
from firewall_dossier.analyzer.rule_analyzer import RuleAnalyzer
from firewall_dossier.checks import CheckContext, run_checks
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.enrichment import Analysis

# Importing the check modules registers them.
import firewall_dossier.checks.consistency.consistency_auditor  # noqa: F401
import firewall_dossier.checks.performance.performance_auditor  # noqa: F401
import firewall_dossier.checks.security.security_auditor  # noqa: F401

logger = logging.getLogger(__name__)


def compute_analysis(device: DeviceConfiguration) -> Analysis:
    """Build the full Analysis for a device.

    The device must be the original, unredacted configuration.
    """
    checks = run_checks(CheckContext(device=device))

    analysis = Analysis(
        dead_rules=RuleAnalyzer(device).analyze(),
        unused_interfaces=ResourceUsageAnalyzer(device).analyze(),
        security_issues=checks.get("security", []),
        performance_issues=checks.get("performance", []),
        consistency_issues=checks.get("consistency", []),
    )
    logger.debug(
        "Analysis: %d dead rule(s), %d unused interface(s), %d security, "
        "%d performance, %d consistency finding(s)",
        len(analysis.dead_rules),
        len(analysis.unused_interfaces),
        len(analysis.security_issues),
        len(analysis.performance_issues),
        len(analysis.consistency_issues),
    )
    return analysis
