"""Scoring Engine.

Derives two bounded scores from already-computed statistics:
- Security score: feature count x 10, plus bonuses for firewall rules,
  HTTPS web GUI, SSH group, IDS and IPS mode. Max 100.
- Config complexity: weighted sum of category counts, rescaled to 0-100
  against MAX_REASONABLE_COMPLEXITY.
"""

from firewall_dossier import constants
from firewall_dossier.model.device import DeviceConfiguration
from firewall_dossier.model.enrichment import Statistics


class ScoreCalculator:
    """Calculates security and complexity scores."""

    COMPLEXITY_WEIGHTS = {
        "total_interfaces": constants.INTERFACE_COMPLEXITY_WEIGHT,
        "total_firewall_rules": constants.FIREWALL_RULE_COMPLEXITY_WEIGHT,
        "total_users": constants.USER_COMPLEXITY_WEIGHT,
        "total_groups": constants.GROUP_COMPLEXITY_WEIGHT,
        "sysctl_settings": constants.SYSCTL_COMPLEXITY_WEIGHT,
        "total_services": constants.SERVICE_COMPLEXITY_WEIGHT,
        "dhcp_scopes": constants.DHCP_COMPLEXITY_WEIGHT,
        "load_balancer_monitors": constants.LOAD_BALANCER_COMPLEXITY_WEIGHT,
        "total_gateways": constants.GATEWAY_COMPLEXITY_WEIGHT,
        "total_gateway_groups": constants.GATEWAY_GROUP_COMPLEXITY_WEIGHT,
    }

    def security_score(self, device: DeviceConfiguration, stats: Statistics) -> int:
        """Score the security posture from detected features and settings."""
        score = len(stats.security_features) * constants.SECURITY_FEATURE_MULTIPLIER

        if stats.total_firewall_rules > 0:
            score += constants.FIREWALL_RULES_BONUS
        if device.system.web_gui.protocol == constants.PROTOCOL_HTTPS:
            score += constants.HTTPS_WEB_GUI_BONUS
        if device.system.ssh.group:
            score += constants.SSH_GROUP_BONUS
        if device.ids is not None and device.ids.enabled:
            score += constants.IDS_ENABLED_BONUS
            if device.ids.ips_mode:
                score += constants.IPS_MODE_BONUS

        return min(score, constants.MAX_SECURITY_SCORE)

    def config_complexity(self, stats: Statistics) -> int:
        """Weighted configuration size, normalized to 0-100."""
        raw = sum(
            max(getattr(stats, attr), 0) * weight
            for attr, weight in self.COMPLEXITY_WEIGHTS.items()
        )
        return min(
            raw * constants.MAX_COMPLEXITY_SCORE // constants.MAX_REASONABLE_COMPLEXITY,
            constants.MAX_COMPLEXITY_SCORE,
        )
