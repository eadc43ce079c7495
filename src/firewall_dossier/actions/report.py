"""Report Action - Terminal output for audits and statistics.

CONTRACT:
- read_only: True
- operates on sanitized devices only (output never carries raw secrets)
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.enrichment import Analysis
from firewall_dossier.model.finding import AnyFinding, DeadRuleFinding, Severity, UnusedInterfaceFinding

SEVERITY_ORDER = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
}

SEVERITY_COLORS = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "bright_red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
}


def finding_location(finding: AnyFinding) -> str:
    """Human-readable pointer to what a finding is about."""
    if isinstance(finding, DeadRuleFinding):
        return f"rule {finding.rule_index + 1} on {finding.interface}"
    if isinstance(finding, UnusedInterfaceFinding):
        return finding.interface_name
    return finding.component


def has_blocking_findings(analysis: Analysis) -> bool:
    """True when any critical or high finding exists."""
    return any(f.severity in (Severity.CRITICAL, Severity.HIGH) for f in analysis.all_findings())


class ReportAction:
    """Print audit findings and statistics for a prepared device.

    This action is completely read-only and produces
    formatted output for the terminal.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report_findings(self, analysis: Analysis) -> None:
        """Print all findings, most severe first."""
        findings = analysis.all_findings()
        if not findings:
            self.console.print("   [green][bold]PASS:[/] No issues found.[/]")
            return

        counts = analysis.count_by_severity()
        sum_parts = [
            f"[{SEVERITY_COLORS[severity]}]{count} {severity.value}[/]"
            for severity, count in counts.items()
            if count
        ]
        self.console.print("\n[bold]Audit Results[/]")
        self.console.print(f"   Summary: {', '.join(sum_parts)}")

        table = Table(show_header=True)
        table.add_column("Severity")
        table.add_column("Issue")
        table.add_column("Location")
        table.add_column("Description")
        table.add_column("Recommendation")

        # sorted() is stable, so findings keep their analysis order within a severity.
        for finding in sorted(findings, key=lambda f: SEVERITY_ORDER[f.severity]):
            color = SEVERITY_COLORS[finding.severity]
            table.add_row(
                f"[{color}]{finding.severity.value.upper()}[/]",
                finding.issue,
                finding_location(finding),
                finding.description,
                finding.recommendation,
            )
        self.console.print(table)

    def report_scores(self, device: DeviceConfiguration) -> None:
        stats = device.statistics
        hostname = device.system.hostname or "unnamed device"
        self.console.print(
            Panel.fit(
                f"Security score: [bold]{stats.summary.security_score}[/]/100\n"
                f"Config complexity: [bold]{stats.summary.config_complexity}[/]/100\n"
                f"Security features: {', '.join(stats.security_features) or 'none'}",
                title=f"{hostname} ({device.device_type})",
                style="bold cyan",
            )
        )

    def report_statistics(self, device: DeviceConfiguration) -> None:
        """Print the statistics summary table."""
        stats = device.statistics
        table = Table(title="Configuration Statistics", show_header=True)
        table.add_column("Category")
        table.add_column("Count", justify="right")

        rows = [
            ("Interfaces", stats.total_interfaces),
            ("Firewall rules", stats.total_firewall_rules),
            ("NAT entries", stats.nat_entries),
            ("Gateways", stats.total_gateways),
            ("Gateway groups", stats.total_gateway_groups),
            ("DHCP scopes", stats.dhcp_scopes),
            ("Users", stats.total_users),
            ("Groups", stats.total_groups),
            ("Services", stats.total_services),
            ("Sysctl tunables", stats.sysctl_settings),
            ("Load balancer monitors", stats.load_balancer_monitors),
            ("VLANs", stats.total_vlans),
            ("Bridges", stats.total_bridges),
            ("Certificates", stats.total_certificates),
            ("Certificate authorities", stats.total_cas),
            ("Total config items", stats.summary.total_config_items),
        ]
        for label, count in rows:
            table.add_row(label, str(count))
        self.console.print(table)

        if stats.enabled_services:
            self.console.print(f"   [dim]Enabled services:[/] {', '.join(stats.enabled_services)}")
