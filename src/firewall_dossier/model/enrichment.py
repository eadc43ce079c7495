"""Enrichment dataclasses - Derived data attached to exported configurations.

Field names of these records are part of the export schema consumed by
JSON/YAML readers and the Markdown report. Renaming a field is a breaking
change.
"""

from dataclasses import dataclass, field

from firewall_dossier.model.finding import (
    AnyFinding,
    ConsistencyFinding,
    DeadRuleFinding,
    PerformanceFinding,
    SecurityFinding,
    Severity,
    UnusedInterfaceFinding,
)


@dataclass
class InterfaceStatistics:
    name: str = ""
    type: str = ""
    enabled: bool = False
    has_ipv4: bool = False
    has_ipv6: bool = False
    has_dhcp: bool = False
    block_priv: bool = False
    block_bogons: bool = False


@dataclass
class DHCPScopeStatistics:
    interface: str = ""
    enabled: bool = False
    from_: str = field(default="", metadata={"key": "from"})
    to: str = ""


@dataclass
class ServiceStatistics:
    name: str = ""
    enabled: bool = False
    details: dict[str, str] = field(default_factory=dict)


@dataclass
class StatisticsSummary:
    total_config_items: int = 0
    security_score: int = 0
    config_complexity: int = 0
    has_security_features: bool = False


@dataclass
class Statistics:
    """Aggregate counts and derived facts about a configuration."""

    total_interfaces: int = 0
    interfaces_by_type: dict[str, int] = field(default_factory=dict)
    interface_details: list[InterfaceStatistics] = field(default_factory=list)

    total_firewall_rules: int = 0
    rules_by_interface: dict[str, int] = field(default_factory=dict)
    rules_by_type: dict[str, int] = field(default_factory=dict)
    nat_entries: int = 0
    nat_mode: str = ""

    total_gateways: int = 0
    total_gateway_groups: int = 0

    dhcp_scopes: int = 0
    dhcp_scope_details: list[DHCPScopeStatistics] = field(default_factory=list)

    total_users: int = 0
    users_by_scope: dict[str, int] = field(default_factory=dict)
    total_groups: int = 0
    groups_by_scope: dict[str, int] = field(default_factory=dict)

    enabled_services: list[str] = field(default_factory=list)
    total_services: int = 0
    service_details: list[ServiceStatistics] = field(default_factory=list)

    sysctl_settings: int = 0
    load_balancer_monitors: int = 0
    security_features: list[str] = field(default_factory=list)

    total_vlans: int = field(default=0, metadata={"key": "totalVLANs"})
    total_bridges: int = 0
    total_certificates: int = 0
    total_cas: int = field(default=0, metadata={"key": "totalCAs"})

    summary: StatisticsSummary = field(default_factory=StatisticsSummary)


@dataclass
class Analysis:
    """Findings grouped by kind, each list in deterministic order."""

    dead_rules: list[DeadRuleFinding] = field(default_factory=list)
    unused_interfaces: list[UnusedInterfaceFinding] = field(default_factory=list)
    security_issues: list[SecurityFinding] = field(default_factory=list)
    performance_issues: list[PerformanceFinding] = field(default_factory=list)
    consistency_issues: list[ConsistencyFinding] = field(default_factory=list)

    def all_findings(self) -> list[AnyFinding]:
        """Flatten every finding list, preserving list and in-list order."""
        return [
            *self.dead_rules,
            *self.unused_interfaces,
            *self.security_issues,
            *self.performance_issues,
            *self.consistency_issues,
        ]

    def count_by_severity(self) -> dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for finding in self.all_findings():
            counts[finding.severity] += 1
        return counts


@dataclass
class SecurityAssessment:
    overall_score: int = 0
    security_features: list[str] = field(default_factory=list)
    vulnerabilities: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass
class PerformanceMetrics:
    config_complexity: int = 0
