"""Resource Usage Analyzer - Flags enabled interfaces nothing refers to."""

from firewall_dossier import constants
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.finding import Severity, UnusedInterfaceFinding


class ResourceUsageAnalyzer:
    """Analyzer for enabled-but-unused interfaces."""

    def __init__(self, device: DeviceConfiguration) -> None:
        self.device = device

    def used_interfaces(self) -> set[str]:
        """Interfaces referenced by rules, DHCP, DNS, VPN or load balancing."""
        device = self.device
        used: set[str] = set()

        for rule in device.firewall_rules:
            used.update(rule.interfaces)
        for scope in device.dhcp:
            if scope.enabled:
                used.add(scope.interface)

        if device.dns.unbound.enabled or device.dns.dns_masq.enabled:
            used.add(constants.LAN_INTERFACE)

        for endpoint in [*device.vpn.open_vpn.servers, *device.vpn.open_vpn.clients]:
            if endpoint.interface:
                used.add(endpoint.interface)

        if device.vpn.wire_guard.enabled:
            used.add(constants.LAN_INTERFACE)
        if device.load_balancer.monitor_types:
            used.add(constants.LAN_INTERFACE)

        return used

    def analyze(self) -> list[UnusedInterfaceFinding]:
        used = self.used_interfaces()
        return [
            UnusedInterfaceFinding(
                interface_name=iface.name,
                issue="Unused Interface",
                severity=Severity.LOW,
                description=(
                    f"Interface {iface.name.upper()} is enabled but not used in any rules or services"
                ),
                recommendation="Consider disabling unused interface or add appropriate rules",
            )
            for iface in self.device.interfaces
            if iface.enabled and iface.name not in used
        ]
