"""
Centralized configuration for the interface health check.

All constants, defaults, and paths are defined here.
This ensures a single source of truth and makes the tool easy to maintain.

Requires:
    - Linux (sysfs mounted at /sys)
    - Python 3.12+
    - iproute2 (only for the address check)
"""

import ipaddress
from pathlib import Path

from enums import AddressCheck, Duplex

VERSION = "0.1.0"

# ============================================================================
# System Dependencies
# ============================================================================

REQUIRED_COMMANDS = ["ip"]

# Timeout for external commands (seconds)
TIMEOUT_SECONDS = 10

# ============================================================================
# Sysfs Configuration
# ============================================================================

SYSFS_NET_PATH = Path("/sys/class/net")

# Attribute files below /sys/class/net/<interface>/
OPERSTATE_ATTRIBUTE = "operstate"
DUPLEX_ATTRIBUTE = "duplex"
MTU_ATTRIBUTE = "mtu"
SPEED_ATTRIBUTE = "speed"

# ============================================================================
# Expectation Defaults
# ============================================================================

DEFAULT_SPEED = 1000
DEFAULT_DUPLEX = Duplex.FULL
DEFAULT_STATE = f"{DEFAULT_SPEED}:{DEFAULT_DUPLEX}"

# Values accepted by -a/--address-assigned
ADDRESS_CHECK_CHOICES = {
    "ip": AddressCheck.BOTH,
    "ipv4": AddressCheck.IPV4,
    "ipv6": AddressCheck.IPV6,
}

# ============================================================================
# Address Classification
# ============================================================================

IPV4_LINK_LOCAL = ipaddress.ip_network("169.254.0.0/16")
IPV6_LINK_LOCAL = ipaddress.ip_network("fe80::/10")

# ============================================================================
# Output Configuration
# ============================================================================

# Separator between messages of the reported severity
MESSAGE_SEPARATOR = ", "

# Printed when the evaluation produced no message at all
EMPTY_RESULT_MESSAGE = "No check results"
