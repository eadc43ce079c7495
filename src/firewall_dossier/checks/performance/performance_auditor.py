"""Performance Auditor.

Checks:
- Checksum Offloading Disabled
- Segmentation Offloading Disabled
- High Number of Firewall Rules (more than LARGE_RULE_COUNT_THRESHOLD)
"""

from firewall_dossier import constants
from firewall_dossier.checks import BaseCheck, CheckContext, register_check
from firewall_dossier.model.finding import PerformanceFinding, Severity


@register_check
class PerformanceAuditor(BaseCheck):
    """Auditor for performance settings."""

    @property
    def category(self) -> str:
        return "performance"

    def run(self, context: CheckContext) -> list[PerformanceFinding]:
        """Run performance checks."""
        findings: list[PerformanceFinding] = []
        system = context.device.system

        if system.disable_checksum_offloading:
            findings.append(PerformanceFinding(
                component="system.disablechecksumoffloading",
                issue="Checksum Offloading Disabled",
                severity=Severity.LOW,
                description="Hardware checksum offloading is disabled, which may impact performance",
                recommendation="Enable checksum offloading unless experiencing specific hardware issues",
            ))

        if system.disable_segmentation_offloading:
            findings.append(PerformanceFinding(
                component="system.disablesegmentationoffloading",
                issue="Segmentation Offloading Disabled",
                severity=Severity.LOW,
                description="Hardware segmentation offloading is disabled, which may impact performance",
                recommendation="Enable segmentation offloading unless experiencing specific hardware issues",
            ))

        rule_count = len(context.device.firewall_rules)
        if rule_count > constants.LARGE_RULE_COUNT_THRESHOLD:
            findings.append(PerformanceFinding(
                component="filter.rule",
                issue="High Number of Firewall Rules",
                severity=Severity.MEDIUM,
                description=f"Configuration contains {rule_count} firewall rules, which may impact performance",
                recommendation="Consider consolidating rules or using aliases to reduce rule count",
            ))

        return findings
