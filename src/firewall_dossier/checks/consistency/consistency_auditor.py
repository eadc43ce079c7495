"""Consistency Auditor.

Cross-checks related settings that disagree with each other.

Checks:
- Invalid Gateway Format: gateway string without a dot (weak heuristic)
- DHCP Enabled Without Interface IP: LAN DHCP range with an unaddressed LAN
- User References Non-existent Group
"""

from firewall_dossier import constants
from firewall_dossier.checks import BaseCheck, CheckContext, register_check
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.finding import ConsistencyFinding, Severity


@register_check
class ConsistencyAuditor(BaseCheck):
    """Auditor for internally inconsistent configuration."""

    @property
    def category(self) -> str:
        return "consistency"

    def run(self, context: CheckContext) -> list[ConsistencyFinding]:
        findings: list[ConsistencyFinding] = []
        device = context.device

        findings.extend(self._check_gateway_format(device))
        findings.extend(self._check_dhcp_interface_ip(device))
        findings.extend(self._check_user_groups(device))

        return findings

    def _check_gateway_format(self, device: DeviceConfiguration) -> list[ConsistencyFinding]:
        """Not IP validation: only flags gateways with no dot at all."""
        findings = []
        for iface in device.interfaces:
            if not (iface.gateway and iface.ip_address and iface.subnet):
                continue
            if "." not in iface.gateway:
                findings.append(ConsistencyFinding(
                    component=f"interfaces.{iface.name}.gateway",
                    issue="Invalid Gateway Format",
                    severity=Severity.MEDIUM,
                    description=f"Gateway {iface.gateway} for interface {iface.name} appears to be invalid",
                    recommendation="Verify gateway IP address format and reachability",
                ))
        return findings

    def _check_dhcp_interface_ip(self, device: DeviceConfiguration) -> list[ConsistencyFinding]:
        scope = device.find_dhcp_scope(constants.LAN_INTERFACE)
        if scope is None or not scope.enabled or not (scope.range.from_ and scope.range.to):
            return []

        lan = device.find_interface(constants.LAN_INTERFACE)
        if lan is None or lan.ip_address:
            return []

        return [ConsistencyFinding(
            component="dhcpd.lan",
            issue="DHCP Enabled Without Interface IP",
            severity=Severity.HIGH,
            description="DHCP is enabled on LAN interface but the interface has no IP address configured",
            recommendation="Configure LAN interface IP address or disable DHCP service",
        )]

    def _check_user_groups(self, device: DeviceConfiguration) -> list[ConsistencyFinding]:
        existing = {group.name for group in device.groups}
        findings = []
        for i, user in enumerate(device.users):
            if user.group_name and user.group_name not in existing:
                findings.append(ConsistencyFinding(
                    component=f"system.user[{i}].groupname",
                    issue="User References Non-existent Group",
                    severity=Severity.MEDIUM,
                    description=f"User {user.name} references group {user.group_name} which does not exist",
                    recommendation="Create the referenced group or update user's group assignment",
                ))
        return findings
