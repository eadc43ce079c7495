"""Tests for loading device documents."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from firewall_dossier.errors import ConfigLoadError
from firewall_dossier.export.converters import JSONConverter
from firewall_dossier.model.device import Interface
from firewall_dossier.model.loader import device_from_dict, load_device
from firewall_dossier.model.serialize import to_dict

DEVICE_YAML = """\
device_type: pfsense
version: "2.7.2"
system:
  hostname: fw01
  webGui:
    protocol: http
    port: 443
interfaces:
  - name: wan
    enabled: true
    ipAddress: 203.0.113.2
    blockBogons: true
  - name: lan
    enabled: true
firewallRules:
  - type: pass
    interfaces: [wan]
    source: {address: any}
    destination: {address: 192.168.1.10, port: 22}
dhcp:
  - interface: lan
    enabled: true
    range: {from: 192.168.1.100, to: 192.168.1.200}
snmp:
  roCommunity: public
someFutureSection:
  ignored: true
"""


def test_load_yaml_document(tmp_path):
    path = tmp_path / "fw01.yaml"
    path.write_text(DEVICE_YAML)

    device = load_device(path)

    assert device.device_type == "pfsense"
    assert device.system.web_gui.protocol == "http"
    # Bare YAML numbers in string fields are coerced.
    assert device.system.web_gui.port == "443"
    assert device.interfaces[0] == Interface(name="wan", enabled=True, ip_address="203.0.113.2",
                                             block_bogons=True)
    assert device.firewall_rules[0].destination.port == "22"
    assert device.dhcp[0].range.from_ == "192.168.1.100"
    assert device.snmp.ro_community == "public"
    assert device.statistics is None


def test_snake_case_keys_are_accepted():
    device = device_from_dict({"system": {"web_gui": {"protocol": "https"}}})
    assert device.system.web_gui.protocol == "https"


def test_export_round_trip(tmp_path, secret_device):
    path = tmp_path / "device.json"
    path.write_text(json.dumps(to_dict(secret_device)))

    assert load_device(path) == secret_device


def test_empty_document_is_an_empty_device(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    device = load_device(path)
    assert device.interfaces == []
    assert device.device_type == ""


@pytest.mark.parametrize("data,message", [
    ({"interfaces": "lan"}, "expected a list"),
    ({"interfaces": [{"enabled": True}]}, "missing required field 'name'"),
    ({"interfaces": [{"name": "lan", "enabled": "yes"}]}, "expected a boolean"),
    ({"system": ["not", "a", "mapping"]}, "expected a mapping"),
])
def test_type_errors_are_reported_with_path(data, message):
    with pytest.raises(ConfigLoadError, match=message):
        device_from_dict(data)


def test_unparseable_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    with pytest.raises(ConfigLoadError, match="cannot parse"):
        load_device(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigLoadError, match="cannot read"):
        load_device(tmp_path / "nope.yaml")


def test_empty_yaml_sections_use_field_defaults(tmp_path):
    path = tmp_path / "sparse.yaml"
    path.write_text("firewallRules:\nusers:\nsystem:\n  hostname: fw02\n  webGui:\n")

    device = load_device(path)

    assert device.firewall_rules == []
    assert device.users == []
    assert device.system.hostname == "fw02"
    assert device.system.web_gui.protocol == ""


def test_sparse_document_converts(tmp_path):
    path = tmp_path / "sparse.yaml"
    path.write_text("interfaces:\n  - name: lan\n    enabled: true\n    ipAddress:\nfirewallRules:\n")

    data = json.loads(JSONConverter().convert(load_device(path)))
    assert data["statistics"]["totalInterfaces"] == 1


@pytest.mark.parametrize("data,message", [
    ({"interfaces": [{"name": None, "enabled": True}]}, "missing required field 'name'"),
    ({"interfaces": [None]}, "null is not allowed"),
    ({"firewallRules": [{"interfaces": ["wan", None]}]}, "null is not allowed"),
])
def test_null_where_a_value_is_required(data, message):
    with pytest.raises(ConfigLoadError, match=message):
        device_from_dict(data)


def test_non_utf8_file(tmp_path):
    path = tmp_path / "latin1.yaml"
    path.write_bytes(b"system:\n  hostname: \xff\xfe\n")
    with pytest.raises(ConfigLoadError, match="cannot read"):
        load_device(path)
