"""Model package - Core data structures for firewall-dossier."""

from firewall_dossier.model.device import (
    APIKey,
    Certificate,
    DeviceConfiguration,
    DHCPScope,
    FirewallRule,
    Group,
    Interface,
    RuleEndpoint,
    User,
)
from firewall_dossier.model.enrichment import (
    Analysis,
    PerformanceMetrics,
    SecurityAssessment,
    Statistics,
    StatisticsSummary,
)
from firewall_dossier.model.finding import (
    ConsistencyFinding,
    DeadRuleFinding,
    PerformanceFinding,
    SecurityFinding,
    Severity,
    UnusedInterfaceFinding,
)

__all__ = [
    "APIKey",
    "Analysis",
    "Certificate",
    "ConsistencyFinding",
    "DHCPScope",
    "DeadRuleFinding",
    "DeviceConfiguration",
    "FirewallRule",
    "Group",
    "Interface",
    "PerformanceFinding",
    "PerformanceMetrics",
    "RuleEndpoint",
    "SecurityAssessment",
    "SecurityFinding",
    "Severity",
    "Statistics",
    "StatisticsSummary",
    "UnusedInterfaceFinding",
    "User",
]
