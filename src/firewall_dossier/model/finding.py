"""Finding dataclasses - Issues detected while analyzing a configuration."""

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """Severity levels for findings."""

    CRITICAL = "critical"  # Exposes the device to direct compromise
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"  # Hygiene / tuning advice


@dataclass(frozen=True)
class DeadRuleFinding:
    """A firewall rule that can never match, or duplicates an earlier one.

    Attributes:
        rule_index: Zero-based position of the rule in the global rule list.
        interface: Interface whose rule list the finding was raised for.
    """

    rule_index: int = field(metadata={"keep": True})
    interface: str
    issue: str
    severity: Severity
    description: str
    recommendation: str


@dataclass(frozen=True)
class UnusedInterfaceFinding:
    """An enabled interface with no rules or services bound to it."""

    interface_name: str
    issue: str
    severity: Severity
    description: str
    recommendation: str


@dataclass(frozen=True)
class SecurityFinding:
    component: str
    issue: str
    severity: Severity
    description: str
    recommendation: str


@dataclass(frozen=True)
class PerformanceFinding:
    component: str
    issue: str
    severity: Severity
    description: str
    recommendation: str


@dataclass(frozen=True)
class ConsistencyFinding:
    component: str
    issue: str
    severity: Severity
    description: str
    recommendation: str


AnyFinding = (
    DeadRuleFinding
    | UnusedInterfaceFinding
    | SecurityFinding
    | PerformanceFinding
    | ConsistencyFinding
)
