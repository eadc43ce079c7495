"""Rule Analyzer - Flags unreachable and duplicate firewall rules.

Rules are grouped per interface (a rule bound to several interfaces lands in
each group) and groups are walked in sorted interface order so repeated runs
produce identical findings.
"""

from dataclasses import dataclass

from firewall_dossier import constants
from firewall_dossier.model.device import DeviceConfiguration, FirewallRule
from firewall_dossier.model.finding import DeadRuleFinding, Severity


@dataclass(frozen=True)
class IndexedRule:
    """A rule paired with its position in the global rule list."""

    index: int
    rule: FirewallRule


def rules_equivalent(a: FirewallRule, b: FirewallRule) -> bool:
    """Exact-field comparison of two rules; no semantic address matching."""
    if (
        a.type != b.type
        or a.ip_protocol != b.ip_protocol
        or ",".join(a.interfaces) != ",".join(b.interfaces)
    ):
        return False
    if (
        a.state_type != b.state_type
        or a.direction != b.direction
        or a.protocol != b.protocol
        or a.quick != b.quick
    ):
        return False
    if (
        a.source.address != b.source.address
        or a.source.port != b.source.port
        or a.source.negated != b.source.negated
    ):
        return False
    return (
        a.destination.address == b.destination.address
        and a.destination.port == b.destination.port
        and a.destination.negated == b.destination.negated
    )


def is_block_all(rule: FirewallRule) -> bool:
    return (
        rule.type == constants.RULE_TYPE_BLOCK
        and rule.source.address == constants.NETWORK_ANY
        and rule.destination.address == constants.NETWORK_ANY
    )


class RuleAnalyzer:
    """Analyzer for dead (unreachable or duplicate) firewall rules."""

    def __init__(self, device: DeviceConfiguration) -> None:
        self.device = device

    def group_by_interface(self) -> dict[str, list[IndexedRule]]:
        groups: dict[str, list[IndexedRule]] = {}
        for index, rule in enumerate(self.device.firewall_rules):
            for iface in rule.interfaces:
                groups.setdefault(iface, []).append(IndexedRule(index, rule))
        return groups

    def analyze(self) -> list[DeadRuleFinding]:
        findings: list[DeadRuleFinding] = []
        if not self.device.firewall_rules:
            return findings

        groups = self.group_by_interface()
        for iface in sorted(groups):
            findings.extend(self._check_interface(iface, groups[iface]))
        return findings

    def _check_interface(self, iface: str, rules: list[IndexedRule]) -> list[DeadRuleFinding]:
        findings: list[DeadRuleFinding] = []
        last = len(rules) - 1

        for pos, current in enumerate(rules):
            # One finding per block-all rule, attached to the blocking rule itself.
            if pos < last and is_block_all(current.rule):
                findings.append(
                    DeadRuleFinding(
                        rule_index=current.index,
                        interface=iface,
                        issue="Unreachable Rules",
                        severity=Severity.MEDIUM,
                        description=(
                            f"Rules after position {current.index + 1} on interface {iface} "
                            "are unreachable due to preceding block-all rule"
                        ),
                        recommendation="Remove unreachable rules or reorder them before the block-all rule",
                    )
                )

            for later in rules[pos + 1:]:
                if rules_equivalent(current.rule, later.rule):
                    findings.append(
                        DeadRuleFinding(
                            rule_index=later.index,
                            interface=iface,
                            issue="Duplicate Rule",
                            severity=Severity.LOW,
                            description=(
                                f"Rule at position {later.index + 1} is duplicate of rule at "
                                f"position {current.index + 1} on interface {iface}"
                            ),
                            recommendation="Remove duplicate rule to simplify configuration",
                        )
                    )
        return findings
