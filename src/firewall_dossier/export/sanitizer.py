"""Export Sanitizer - Enriched, redacted copies of device configurations.

Every converter goes through ExportSanitizer before serializing so that raw
secrets never reach an exported artifact.

Sensitive fields redacted on the copy:
- high-availability sync password
- certificate private keys
- user API-key secrets
- SNMP read-only community
- WireGuard client pre-shared keys
- DHCPv6 key-info statement secrets

New secret-bearing fields added to the device model MUST be added here.
"""

import logging
from dataclasses import replace

from firewall_dossier import constants
from firewall_dossier.analyzer.analysis import compute_analysis
from firewall_dossier.analyzer.statistics import StatisticsComputer
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.enrichment import (
    PerformanceMetrics,
    SecurityAssessment,
    Statistics,
)

logger = logging.getLogger(__name__)


def _redact(value: str) -> str:
    # Unset stays unset.
    return constants.REDACTED_VALUE if value else value


def security_assessment_from(stats: Statistics) -> SecurityAssessment:
    return SecurityAssessment(
        overall_score=stats.summary.security_score,
        security_features=list(stats.security_features),
    )


def performance_metrics_from(stats: Statistics) -> PerformanceMetrics:
    return PerformanceMetrics(config_complexity=stats.summary.config_complexity)


class ExportSanitizer:
    """Prepares a device configuration for export.

    The input is never mutated: the returned object is a shallow copy whose
    redacted branches are rebuilt rather than edited in place.
    """

    def __init__(self, default_device_type: str = constants.DEVICE_TYPE_OPNSENSE) -> None:
        self.default_device_type = default_device_type

    def prepare(self, device: DeviceConfiguration) -> DeviceConfiguration:
        """Return an enriched, redacted copy of ``device``."""
        changes: dict = {}

        if not device.device_type:
            changes["device_type"] = self.default_device_type

        # Derived data is computed from the original so presence checks see real values.
        stats = device.statistics
        if stats is None:
            stats = StatisticsComputer(device).compute()
            changes["statistics"] = stats
        else:
            logger.debug("Passing through caller-supplied statistics")

        if device.analysis is None:
            changes["analysis"] = compute_analysis(device)
        else:
            logger.debug("Passing through caller-supplied analysis")

        if device.security_assessment is None:
            changes["security_assessment"] = security_assessment_from(stats)
        if device.performance_metrics is None:
            changes["performance_metrics"] = performance_metrics_from(stats)

        changes.update(self._redacted_fields(device))
        return replace(device, **changes)

    def _redacted_fields(self, device: DeviceConfiguration) -> dict:
        """Build replacement values for every branch holding a secret."""
        changes: dict = {}

        if device.high_availability.password:
            changes["high_availability"] = replace(
                device.high_availability,
                password=_redact(device.high_availability.password),
            )

        if device.certificates:
            changes["certificates"] = [
                replace(cert, private_key=_redact(cert.private_key))
                for cert in device.certificates
            ]

        if device.users:
            changes["users"] = [
                replace(
                    user,
                    api_keys=[replace(key, secret=_redact(key.secret)) for key in user.api_keys],
                )
                for user in device.users
            ]

        if device.snmp.ro_community:
            changes["snmp"] = replace(device.snmp, ro_community=_redact(device.snmp.ro_community))

        wire_guard = device.vpn.wire_guard
        if wire_guard.clients:
            clients = [replace(client, psk=_redact(client.psk)) for client in wire_guard.clients]
            changes["vpn"] = replace(device.vpn, wire_guard=replace(wire_guard, clients=clients))

        if device.dhcp:
            changes["dhcp"] = [
                replace(
                    scope,
                    adv_dhcp6_key_info_statement_secret=_redact(
                        scope.adv_dhcp6_key_info_statement_secret
                    ),
                )
                for scope in device.dhcp
            ]

        return changes
