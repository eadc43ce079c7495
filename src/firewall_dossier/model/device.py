"""Device model dataclasses - Normalized firewall appliance configuration.

These records are produced by an upstream parser (or loaded from an export
document) and are treated as read-only by every analyzer, check and
converter in this package.
"""

from dataclasses import dataclass, field

from firewall_dossier.model.enrichment import (
    Analysis,
    PerformanceMetrics,
    SecurityAssessment,
    Statistics,
)


@dataclass
class WebGUI:
    """Administrative web interface settings."""

    protocol: str = ""  # http, https
    port: str = ""
    ssl_cert_ref: str = ""


@dataclass
class SSH:
    """SSH daemon settings."""

    group: str = ""
    port: str = ""
    permit_root_login: bool = False
    password_auth: bool = False


@dataclass
class System:
    """System-level settings."""

    hostname: str = ""
    domain: str = ""
    timezone: str = ""
    dns_servers: list[str] = field(default_factory=list)
    web_gui: WebGUI = field(default_factory=WebGUI)
    ssh: SSH = field(default_factory=SSH)
    disable_nat_reflection: bool = False
    disable_checksum_offloading: bool = False
    disable_segmentation_offloading: bool = False
    disable_large_receive_offloading: bool = False
    ipv6_allow: bool = False


@dataclass
class Interface:
    """Logical network interface (wan, lan, opt1, ...)."""

    name: str
    physical_if: str = ""
    description: str = ""
    enabled: bool = False
    ip_address: str = ""
    ipv6_address: str = ""
    subnet: str = ""
    subnet_v6: str = ""
    gateway: str = ""
    gateway_v6: str = ""
    block_private: bool = False
    block_bogons: bool = False
    type: str = ""
    mtu: str = ""


@dataclass
class VLAN:
    vlan_if: str = ""
    physical_if: str = ""
    tag: str = ""
    description: str = ""


@dataclass
class Bridge:
    bridge_if: str = ""
    members: list[str] = field(default_factory=list)
    description: str = ""


@dataclass
class RuleEndpoint:
    """Source or destination of a firewall rule."""

    address: str = ""  # "any", an alias, a network or a host
    port: str = ""
    negated: bool = False


@dataclass
class FirewallRule:
    """Normalized firewall filter rule."""

    type: str = ""  # pass, block, reject
    description: str = ""
    interfaces: list[str] = field(default_factory=list)
    ip_protocol: str = ""  # inet, inet6, inet46
    state_type: str = ""
    direction: str = ""
    floating: bool = False
    quick: bool = False
    protocol: str = ""
    source: RuleEndpoint = field(default_factory=RuleEndpoint)
    destination: RuleEndpoint = field(default_factory=RuleEndpoint)
    gateway: str = ""
    log: bool = False
    disabled: bool = False
    uuid: str = ""
    tracker: str = ""


@dataclass
class NATRule:
    interface: str = ""
    description: str = ""
    protocol: str = ""
    source: RuleEndpoint = field(default_factory=RuleEndpoint)
    destination: RuleEndpoint = field(default_factory=RuleEndpoint)
    target: str = ""
    local_port: str = ""
    disabled: bool = False


@dataclass
class NATConfig:
    outbound_mode: str = ""  # automatic, hybrid, advanced, disabled
    reflection_disabled: bool = False
    outbound_rules: list[NATRule] = field(default_factory=list)
    inbound_rules: list[NATRule] = field(default_factory=list)


@dataclass
class DHCPRange:
    from_: str = field(default="", metadata={"key": "from"})
    to: str = ""


@dataclass
class DHCPScope:
    """DHCP server scope bound to one interface."""

    interface: str = ""
    enabled: bool = False
    range: DHCPRange = field(default_factory=DHCPRange)
    gateway: str = ""
    dns_server: str = ""
    ntp_server: str = ""
    adv_dhcp6_key_info_statement_key_name: str = ""
    adv_dhcp6_key_info_statement_secret: str = ""


@dataclass
class UnboundConfig:
    enabled: bool = False
    dnssec: bool = False


@dataclass
class DNSMasqConfig:
    enabled: bool = False


@dataclass
class DNSConfig:
    servers: list[str] = field(default_factory=list)
    unbound: UnboundConfig = field(default_factory=UnboundConfig)
    dns_masq: DNSMasqConfig = field(default_factory=DNSMasqConfig)


@dataclass
class NTPConfig:
    preferred_server: str = ""


@dataclass
class SNMPConfig:
    ro_community: str = ""
    sys_location: str = ""
    sys_contact: str = ""


@dataclass
class MonitorType:
    """Load balancer health monitor definition."""

    name: str = ""
    type: str = ""
    description: str = ""


@dataclass
class LoadBalancerConfig:
    monitor_types: list[MonitorType] = field(default_factory=list)


@dataclass
class OpenVPNServer:
    vpn_id: str = ""
    mode: str = ""
    protocol: str = ""
    interface: str = ""
    local_port: str = ""
    description: str = ""
    tunnel_network: str = ""


@dataclass
class OpenVPNClient:
    vpn_id: str = ""
    mode: str = ""
    protocol: str = ""
    interface: str = ""
    server_addr: str = ""
    server_port: str = ""
    description: str = ""


@dataclass
class OpenVPNConfig:
    servers: list[OpenVPNServer] = field(default_factory=list)
    clients: list[OpenVPNClient] = field(default_factory=list)


@dataclass
class WireGuardClient:
    name: str = ""
    enabled: bool = False
    public_key: str = ""
    psk: str = ""
    tunnel_address: str = ""
    server_address: str = ""
    server_port: str = ""


@dataclass
class WireGuardConfig:
    enabled: bool = False
    clients: list[WireGuardClient] = field(default_factory=list)


@dataclass
class VPN:
    open_vpn: OpenVPNConfig = field(default_factory=OpenVPNConfig)
    wire_guard: WireGuardConfig = field(default_factory=WireGuardConfig)


@dataclass
class Gateway:
    name: str = ""
    interface: str = ""
    address: str = ""
    ip_protocol: str = ""
    monitor: str = ""
    disabled: bool = False


@dataclass
class GatewayGroup:
    name: str = ""
    items: list[str] = field(default_factory=list)
    trigger: str = ""


@dataclass
class Routing:
    gateways: list[Gateway] = field(default_factory=list)
    gateway_groups: list[GatewayGroup] = field(default_factory=list)


@dataclass
class Certificate:
    ref_id: str = ""
    description: str = ""
    certificate: str = ""
    private_key: str = ""


@dataclass
class CertificateAuthority:
    ref_id: str = ""
    description: str = ""
    certificate: str = ""


@dataclass
class HighAvailability:
    """CARP / pfsync synchronization settings."""

    pfsync_interface: str = ""
    pfsync_peer_ip: str = ""
    synchronize_to_ip: str = ""
    username: str = ""
    password: str = ""


@dataclass
class IDSConfig:
    """Intrusion detection (Suricata) settings."""

    enabled: bool = False
    ips_mode: bool = False
    interfaces: list[str] = field(default_factory=list)


@dataclass
class APIKey:
    key: str = ""
    secret: str = ""
    description: str = ""


@dataclass
class User:
    name: str = ""
    disabled: bool = False
    description: str = ""
    scope: str = ""
    group_name: str = ""
    uid: str = ""
    api_keys: list[APIKey] = field(default_factory=list)


@dataclass
class Group:
    name: str = ""
    description: str = ""
    scope: str = ""
    gid: str = ""


@dataclass
class SysctlItem:
    tunable: str = ""
    value: str = ""
    description: str = ""


@dataclass
class DeviceConfiguration:
    """Root of a parsed appliance configuration.

    The trailing enrichment fields are left as None by parsers and filled in
    on an export copy by ExportSanitizer. A caller that already supplies one
    of them gets it passed through untouched.
    """

    device_type: str = field(default="", metadata={"key": "device_type", "keep": True})
    version: str = ""
    system: System = field(default_factory=System)
    interfaces: list[Interface] = field(default_factory=list)
    vlans: list[VLAN] = field(default_factory=list)
    bridges: list[Bridge] = field(default_factory=list)
    firewall_rules: list[FirewallRule] = field(default_factory=list)
    nat: NATConfig = field(default_factory=NATConfig)
    dhcp: list[DHCPScope] = field(default_factory=list)
    dns: DNSConfig = field(default_factory=DNSConfig)
    ntp: NTPConfig = field(default_factory=NTPConfig)
    snmp: SNMPConfig = field(default_factory=SNMPConfig)
    load_balancer: LoadBalancerConfig = field(default_factory=LoadBalancerConfig)
    vpn: VPN = field(default_factory=VPN)
    routing: Routing = field(default_factory=Routing)
    certificates: list[Certificate] = field(default_factory=list)
    cas: list[CertificateAuthority] = field(default_factory=list)
    high_availability: HighAvailability = field(default_factory=HighAvailability)
    ids: IDSConfig | None = None
    users: list[User] = field(default_factory=list)
    groups: list[Group] = field(default_factory=list)
    sysctl: list[SysctlItem] = field(default_factory=list)

    statistics: Statistics | None = None
    analysis: Analysis | None = None
    security_assessment: SecurityAssessment | None = None
    performance_metrics: PerformanceMetrics | None = None

    def find_interface(self, name: str) -> Interface | None:
        """Return the interface with the given name, if any."""
        for iface in self.interfaces:
            if iface.name == name:
                return iface
        return None

    def find_dhcp_scope(self, interface: str) -> DHCPScope | None:
        """Return the first DHCP scope bound to the given interface."""
        for scope in self.dhcp:
            if scope.interface == interface:
                return scope
        return None
