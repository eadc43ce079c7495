"""Statistics Computer - Aggregate counts and derived facts in one pass."""

import logging

from firewall_dossier import constants
from firewall_dossier.engine.scoring import ScoreCalculator
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.enrichment import (
    DHCPScopeStatistics,
    InterfaceStatistics,
    ServiceStatistics,
    Statistics,
    StatisticsSummary,
)

logger = logging.getLogger(__name__)


class StatisticsComputer:
    """Builds a Statistics record from a device configuration.

    The device is only read. Minimal configurations produce zero counts and
    empty collections, never missing ones.
    """

    def __init__(self, device: DeviceConfiguration, scorer: ScoreCalculator | None = None) -> None:
        self.device = device
        self.scorer = scorer or ScoreCalculator()

    def compute(self) -> Statistics:
        stats = Statistics()

        self._interfaces(stats)
        self._infrastructure(stats)
        self._firewall(stats)
        self._dhcp(stats)
        self._users_and_groups(stats)
        self._services(stats)
        stats.sysctl_settings = len(self.device.sysctl)
        stats.load_balancer_monitors = len(self.device.load_balancer.monitor_types)
        self._security_features(stats)

        stats.summary = StatisticsSummary(
            total_config_items=self._total_config_items(stats),
            security_score=self.scorer.security_score(self.device, stats),
            config_complexity=self.scorer.config_complexity(stats),
            has_security_features=bool(stats.security_features),
        )
        logger.debug(
            "Computed statistics: %d config items, %d services",
            stats.summary.total_config_items,
            stats.total_services,
        )
        return stats

    def _interfaces(self, stats: Statistics) -> None:
        stats.total_interfaces = len(self.device.interfaces)
        for iface in self.device.interfaces:
            stats.interfaces_by_type[iface.type] = stats.interfaces_by_type.get(iface.type, 0) + 1
            scope = self.device.find_dhcp_scope(iface.name)
            stats.interface_details.append(
                InterfaceStatistics(
                    name=iface.name,
                    type=iface.type,
                    enabled=iface.enabled,
                    has_ipv4=bool(iface.ip_address),
                    has_ipv6=bool(iface.ipv6_address),
                    has_dhcp=scope is not None and scope.enabled,
                    block_priv=iface.block_private,
                    block_bogons=iface.block_bogons,
                )
            )

    def _infrastructure(self, stats: Statistics) -> None:
        stats.total_vlans = len(self.device.vlans)
        stats.total_bridges = len(self.device.bridges)
        stats.total_certificates = len(self.device.certificates)
        stats.total_cas = len(self.device.cas)
        stats.total_gateways = len(self.device.routing.gateways)
        stats.total_gateway_groups = len(self.device.routing.gateway_groups)

    def _firewall(self, stats: Statistics) -> None:
        rules = self.device.firewall_rules
        stats.total_firewall_rules = len(rules)
        for rule in rules:
            for iface in rule.interfaces:
                stats.rules_by_interface[iface] = stats.rules_by_interface.get(iface, 0) + 1
            stats.rules_by_type[rule.type] = stats.rules_by_type.get(rule.type, 0) + 1

        nat = self.device.nat
        stats.nat_mode = nat.outbound_mode
        stats.nat_entries = len(nat.outbound_rules) + len(nat.inbound_rules)

    def _dhcp(self, stats: Statistics) -> None:
        for scope in self.device.dhcp:
            if not scope.enabled:
                continue
            stats.dhcp_scopes += 1
            stats.dhcp_scope_details.append(
                DHCPScopeStatistics(
                    interface=scope.interface,
                    enabled=True,
                    from_=scope.range.from_,
                    to=scope.range.to,
                )
            )

    def _users_and_groups(self, stats: Statistics) -> None:
        stats.total_users = len(self.device.users)
        stats.total_groups = len(self.device.groups)
        for user in self.device.users:
            stats.users_by_scope[user.scope] = stats.users_by_scope.get(user.scope, 0) + 1
        for group in self.device.groups:
            stats.groups_by_scope[group.scope] = stats.groups_by_scope.get(group.scope, 0) + 1

    def _add_service(self, stats: Statistics, name: str, details: dict[str, str] | None = None) -> None:
        stats.enabled_services.append(name)
        stats.service_details.append(ServiceStatistics(name=name, enabled=True, details=details or {}))
        stats.total_services += 1

    def _services(self, stats: Statistics) -> None:
        device = self.device

        for scope in device.dhcp:
            if scope.enabled:
                self._add_service(
                    stats,
                    f"DHCP Server ({scope.interface.upper()})",
                    {"interface": scope.interface, "from": scope.range.from_, "to": scope.range.to},
                )

        if device.dns.unbound.enabled:
            self._add_service(stats, "Unbound DNS Resolver")

        if device.snmp.ro_community:
            self._add_service(
                stats,
                "SNMP Daemon",
                {
                    "location": device.snmp.sys_location,
                    "contact": device.snmp.sys_contact,
                    "community": constants.REDACTED_VALUE,
                },
            )

        if device.system.ssh.group:
            self._add_service(stats, "SSH Daemon", {"group": device.system.ssh.group})

        if device.ntp.preferred_server:
            self._add_service(stats, "NTP Daemon", {"prefer": device.ntp.preferred_server})

    def _security_features(self, stats: Statistics) -> None:
        wan = self.device.find_interface(constants.WAN_INTERFACE)
        if wan is not None:
            if wan.block_private:
                stats.security_features.append("Block Private Networks")
            if wan.block_bogons:
                stats.security_features.append("Block Bogon Networks")

        if self.device.system.web_gui.protocol == constants.PROTOCOL_HTTPS:
            stats.security_features.append("HTTPS Web GUI")

        if self.device.system.disable_nat_reflection:
            stats.security_features.append("NAT Reflection Disabled")

    @staticmethod
    def _total_config_items(stats: Statistics) -> int:
        return (
            stats.total_interfaces
            + stats.total_firewall_rules
            + stats.total_users
            + stats.total_groups
            + stats.total_services
            + stats.total_gateways
            + stats.total_gateway_groups
            + stats.sysctl_settings
            + stats.dhcp_scopes
            + stats.load_balancer_monitors
            + stats.total_vlans
            + stats.total_bridges
            + stats.total_certificates
            + stats.total_cas
        )
