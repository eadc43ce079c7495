"""Shared constants for analysis, scoring and redaction."""

NETWORK_ANY = "any"
PROTOCOL_HTTPS = "https"
RULE_TYPE_PASS = "pass"
RULE_TYPE_BLOCK = "block"
WAN_INTERFACE = "wan"
LAN_INTERFACE = "lan"
DEFAULT_SNMP_COMMUNITY = "public"

DEVICE_TYPE_OPNSENSE = "opnsense"

# Placeholder written over sensitive values in exported output.
REDACTED_VALUE = "[REDACTED]"

# Security score
SECURITY_FEATURE_MULTIPLIER = 10
FIREWALL_RULES_BONUS = 20
HTTPS_WEB_GUI_BONUS = 15
SSH_GROUP_BONUS = 10
IDS_ENABLED_BONUS = 15
IPS_MODE_BONUS = 10
MAX_SECURITY_SCORE = 100

# Complexity score
INTERFACE_COMPLEXITY_WEIGHT = 5
FIREWALL_RULE_COMPLEXITY_WEIGHT = 2
USER_COMPLEXITY_WEIGHT = 3
GROUP_COMPLEXITY_WEIGHT = 3
SYSCTL_COMPLEXITY_WEIGHT = 4
SERVICE_COMPLEXITY_WEIGHT = 6
DHCP_COMPLEXITY_WEIGHT = 4
LOAD_BALANCER_COMPLEXITY_WEIGHT = 8
GATEWAY_COMPLEXITY_WEIGHT = 3
GATEWAY_GROUP_COMPLEXITY_WEIGHT = 5
MAX_COMPLEXITY_SCORE = 100
MAX_REASONABLE_COMPLEXITY = 1000

LARGE_RULE_COUNT_THRESHOLD = 100
