"""Tests for ExportSanitizer.

Verifies:
1. The input device is never mutated.
2. Every secret is replaced with the redaction marker; unset stays unset.
3. Derived data is computed from the unredacted original.
4. Caller-supplied enrichment passes through untouched.
"""

import copy
import sys
from dataclasses import replace
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from firewall_dossier.constants import REDACTED_VALUE
from firewall_dossier.export.sanitizer import ExportSanitizer
from firewall_dossier.model.device import DeviceConfiguration, HighAvailability, SNMPConfig
from firewall_dossier.model.enrichment import (
    Analysis,
    PerformanceMetrics,
    SecurityAssessment,
    Statistics,
    StatisticsSummary,
)
from conftest import SECRETS


def test_prepare_does_not_mutate_input(secret_device):
    before = copy.deepcopy(secret_device)

    prepared = ExportSanitizer().prepare(secret_device)

    assert secret_device == before
    assert prepared is not secret_device
    assert secret_device.statistics is None
    assert secret_device.analysis is None
    assert secret_device.snmp.ro_community == SECRETS["snmp_community"]
    assert secret_device.users[0].api_keys[0].secret == SECRETS["api_secret"]


def test_every_secret_is_redacted(secret_device):
    prepared = ExportSanitizer().prepare(secret_device)

    assert prepared.high_availability.password == REDACTED_VALUE
    assert prepared.certificates[0].private_key == REDACTED_VALUE
    assert prepared.users[0].api_keys[0].secret == REDACTED_VALUE
    assert prepared.snmp.ro_community == REDACTED_VALUE
    assert prepared.vpn.wire_guard.clients[0].psk == REDACTED_VALUE
    assert prepared.dhcp[0].adv_dhcp6_key_info_statement_secret == REDACTED_VALUE


def test_unset_secrets_stay_empty(secret_device):
    prepared = ExportSanitizer().prepare(secret_device)

    assert prepared.certificates[1].private_key == ""
    assert prepared.users[0].api_keys[1].secret == ""
    assert prepared.users[1].api_keys == []
    assert prepared.vpn.wire_guard.clients[1].psk == ""
    assert prepared.dhcp[1].adv_dhcp6_key_info_statement_secret == ""


def test_non_secret_fields_survive(secret_device):
    prepared = ExportSanitizer().prepare(secret_device)

    assert prepared.high_availability.username == "hasync"
    assert prepared.certificates[0].certificate == "MIIC..."
    assert prepared.users[0].api_keys[0].key == "key-1"
    assert prepared.snmp.sys_location == "rack 4"
    assert prepared.vpn.wire_guard.enabled is True
    assert prepared.dhcp[0].range.from_ == "192.168.1.100"


def test_enrichment_uses_unredacted_values(secret_device):
    prepared = ExportSanitizer().prepare(secret_device)

    # The SNMP service is detected from the real community string.
    assert "SNMP Daemon" in prepared.statistics.enabled_services
    assert prepared.analysis is not None
    assert prepared.security_assessment.overall_score == prepared.statistics.summary.security_score
    assert prepared.security_assessment.security_features == prepared.statistics.security_features
    assert prepared.performance_metrics.config_complexity == prepared.statistics.summary.config_complexity


def test_default_snmp_community_finding_survives_redaction():
    device = DeviceConfiguration(snmp=SNMPConfig(ro_community="public"))
    prepared = ExportSanitizer().prepare(device)

    assert prepared.snmp.ro_community == REDACTED_VALUE
    assert [f.issue for f in prepared.analysis.security_issues] == ["Default SNMP Community String"]


def test_device_type_default_applies_only_when_empty(minimal_device):
    assert ExportSanitizer().prepare(minimal_device).device_type == "opnsense"
    assert ExportSanitizer(default_device_type="pfsense").prepare(minimal_device).device_type == "pfsense"

    typed = DeviceConfiguration(device_type="pfsense")
    assert ExportSanitizer().prepare(typed).device_type == "pfsense"


def test_caller_supplied_enrichment_passes_through(minimal_device):
    stats = Statistics(total_interfaces=42, summary=StatisticsSummary(security_score=77))
    analysis = Analysis()
    device = DeviceConfiguration(statistics=stats, analysis=analysis)

    prepared = ExportSanitizer().prepare(device)

    assert prepared.statistics is stats
    assert prepared.analysis is analysis
    assert prepared.security_assessment.overall_score == 77


def test_prepare_is_deterministic(secret_device):
    first = ExportSanitizer().prepare(secret_device)
    second = ExportSanitizer().prepare(secret_device)
    assert first == second


def test_unset_ha_password_and_snmp_community_stay_empty():
    device = DeviceConfiguration(
        high_availability=HighAvailability(username="hasync"),
        snmp=SNMPConfig(sys_location="rack 4"),
    )
    prepared = ExportSanitizer().prepare(device)

    assert prepared.high_availability.password == ""
    assert prepared.high_availability.username == "hasync"
    assert prepared.snmp.ro_community == ""
    assert "SNMP Daemon" not in prepared.statistics.enabled_services


def test_caller_supplied_assessment_and_metrics_pass_through(secret_device):
    assessment = SecurityAssessment(overall_score=12, vulnerabilities=["legacy ciphers"])
    metrics = PerformanceMetrics(config_complexity=99)
    device = replace(secret_device, security_assessment=assessment, performance_metrics=metrics)

    prepared = ExportSanitizer().prepare(device)

    assert prepared.security_assessment is assessment
    assert prepared.performance_metrics is metrics
    # Statistics are still computed, but do not overwrite the supplied projections.
    assert prepared.statistics is not None
    assert prepared.security_assessment.overall_score == 12
