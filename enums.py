"""
Enumeration types for check_ethernet.

Provides type-safe constants for Nagios states, duplex modes and address checks.
"""

from enum import Enum, IntEnum


class NagiosState(IntEnum):
    """
    Nagios plugin states.

    The value is the process exit code expected by the monitoring framework.
    """
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    def __str__(self) -> str:
        """Return the state name for output."""
        return self.name


# Bucket selection order of the reporter, most severe first
REPORT_PRECEDENCE = (
    NagiosState.UNKNOWN,
    NagiosState.CRITICAL,
    NagiosState.WARNING,
    NagiosState.OK,
)


class Duplex(str, Enum):
    """
    Negotiated link duplex modes.

    Inherits from str so values compare equal to raw sysfs content.
    """
    HALF = "half"
    FULL = "full"

    def __str__(self) -> str:
        """Return the value for string operations."""
        return self.value


class AddressCheck(str, Enum):
    """Address families required to carry a usable address."""
    NONE = "none"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    BOTH = "both"

    def __str__(self) -> str:
        """Return the value for string operations."""
        return self.value


class AddressFamily(str, Enum):
    """Address family of an assigned address."""
    IPV4 = "ipv4"
    IPV6 = "ipv6"

    def __str__(self) -> str:
        """Return the value for string operations."""
        return self.value
