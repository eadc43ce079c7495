"""Security Auditor.

Checks for common appliance security misconfigurations.

Checks:
- Insecure Web GUI Protocol: management UI served over plain HTTP
- Default SNMP Community String: read-only community left at "public"
- Overly Permissive WAN Rule: pass rule from any source on WAN
"""

from firewall_dossier import constants
from firewall_dossier.checks import BaseCheck, CheckContext, register_check
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.finding import SecurityFinding, Severity


@register_check
class SecurityAuditor(BaseCheck):
    """Auditor for security settings."""

    @property
    def category(self) -> str:
        return "security"

    def run(self, context: CheckContext) -> list[SecurityFinding]:
        """Run security checks."""
        findings: list[SecurityFinding] = []
        device = context.device

        findings.extend(self._check_web_gui(device))
        findings.extend(self._check_snmp_community(device))
        findings.extend(self._check_wan_rules(device))

        return findings

    def _check_web_gui(self, device: DeviceConfiguration) -> list[SecurityFinding]:
        protocol = device.system.web_gui.protocol
        if not protocol or protocol == constants.PROTOCOL_HTTPS:
            return []
        return [SecurityFinding(
            component="system.webgui.protocol",
            issue="Insecure Web GUI Protocol",
            severity=Severity.CRITICAL,
            description="Web GUI is configured to use HTTP instead of HTTPS",
            recommendation="Change web GUI protocol to HTTPS for secure administration",
        )]

    def _check_snmp_community(self, device: DeviceConfiguration) -> list[SecurityFinding]:
        if device.snmp.ro_community != constants.DEFAULT_SNMP_COMMUNITY:
            return []
        return [SecurityFinding(
            component="snmpd.rocommunity",
            issue="Default SNMP Community String",
            severity=Severity.HIGH,
            description="SNMP is using the default 'public' community string",
            recommendation="Change SNMP community string to a secure, non-default value",
        )]

    def _check_wan_rules(self, device: DeviceConfiguration) -> list[SecurityFinding]:
        findings = []
        for i, rule in enumerate(device.firewall_rules):
            if (
                rule.type == constants.RULE_TYPE_PASS
                and rule.source.address == constants.NETWORK_ANY
                and constants.WAN_INTERFACE in rule.interfaces
            ):
                findings.append(SecurityFinding(
                    component=f"filter.rule[{i}]",
                    issue="Overly Permissive WAN Rule",
                    severity=Severity.HIGH,
                    description=f"Rule {i + 1} allows any source to pass traffic on WAN interface",
                    recommendation="Restrict source networks or add specific destination restrictions",
                ))
        return findings
