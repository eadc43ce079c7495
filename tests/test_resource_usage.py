"""Tests for ResourceUsageAnalyzer (unused interface detection)."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from firewall_dossier.analyzer.resource_usage import ResourceUsageAnalyzer
from firewall_dossier.model.device import (
    DeviceConfiguration,
    DHCPScope,
    Interface,
    LoadBalancerConfig,
    MonitorType,
    OpenVPNClient,
    OpenVPNServer,
)
from conftest import make_rule


def test_enabled_interface_without_rules_is_unused():
    device = DeviceConfiguration(
        interfaces=[Interface(name="wan", enabled=True), Interface(name="opt1", enabled=True)],
        firewall_rules=[make_rule("pass", ["wan"])],
    )
    findings = ResourceUsageAnalyzer(device).analyze()

    assert len(findings) == 1
    assert findings[0].interface_name == "opt1"
    assert "OPT1" in findings[0].description


def test_disabled_interfaces_are_ignored():
    device = DeviceConfiguration(interfaces=[Interface(name="opt2", enabled=False)])
    assert ResourceUsageAnalyzer(device).analyze() == []


def test_services_mark_interfaces_used():
    device = DeviceConfiguration(
        interfaces=[
            Interface(name="lan", enabled=True),
            Interface(name="opt1", enabled=True),
            Interface(name="opt2", enabled=True),
            Interface(name="opt3", enabled=True),
            Interface(name="opt4", enabled=True),
        ],
        dhcp=[DHCPScope(interface="opt1", enabled=True), DHCPScope(interface="opt4", enabled=False)],
    )
    device.vpn.open_vpn.servers.append(OpenVPNServer(interface="opt2"))
    device.vpn.open_vpn.clients.append(OpenVPNClient(interface="opt3"))
    device.vpn.open_vpn.clients.append(OpenVPNClient(interface=""))
    device.dns.dns_masq.enabled = True

    findings = ResourceUsageAnalyzer(device).analyze()
    assert [f.interface_name for f in findings] == ["opt4"]


def test_load_balancer_and_wireguard_mark_lan_used():
    lb = DeviceConfiguration(
        interfaces=[Interface(name="lan", enabled=True)],
        load_balancer=LoadBalancerConfig(monitor_types=[MonitorType(name="HTTP")]),
    )
    assert ResourceUsageAnalyzer(lb).analyze() == []

    wg = DeviceConfiguration(interfaces=[Interface(name="lan", enabled=True)])
    wg.vpn.wire_guard.enabled = True
    assert ResourceUsageAnalyzer(wg).analyze() == []

    bare = DeviceConfiguration(interfaces=[Interface(name="lan", enabled=True)])
    assert len(ResourceUsageAnalyzer(bare).analyze()) == 1
