"""
System utilities module.

Provides command execution, interface name validation and log sanitization.

Security:
    All functions safe for unprivileged use (no sudo required)
"""

import re
import subprocess
from typing import Any, Optional

from config import TIMEOUT_SECONDS


# ============================================================================
# Input Validation
# ============================================================================

# Regex for valid interface names (systemd + traditional naming)
# Allows: letters, digits, hyphens, underscores, dots, colons
# Prevents: shell metacharacters, path separators, quotes
VALID_INTERFACE_NAME = re.compile(r'^[a-zA-Z0-9._:-]+$')


def validate_interface_name(name: str) -> bool:
    """
    Validate an interface name before it is used in a sysfs path.

    Rejects path separators (/ \\), so the name cannot leave
    /sys/class/net, and the names "." and "..".

    Args:
        name: Interface name to validate

    Returns:
        True if valid interface name, False otherwise
    """
    if not name or len(name) > 64 or '\n' in name or '\r' in name:
        return False
    if name in ('.', '..'):
        return False
    return bool(VALID_INTERFACE_NAME.match(name))


# ============================================================================
# Log Sanitization
# ============================================================================

def sanitize_for_log(value: Any) -> str:
    """
    Sanitize values before logging to prevent log injection.

    Order of operations:
    1. Replace newlines with spaces
    2. Remove ANSI escape sequences
    3. Remove other control characters

    Args:
        value: Any value to be logged

    Returns:
        Sanitized string safe for logging

    Examples:
        >>> sanitize_for_log("line1\\nline2")
        'line1 line2'
        >>> sanitize_for_log("\\x1b[31mred\\x1b[0m")
        'red'
    """
    if value is None:
        return "None"

    text = str(value)
    text = text.replace('\n', ' ').replace('\r', ' ')
    text = re.sub(r'\x1b\[[0-9;]*m', '', text)
    text = re.sub(r'[\x00-\x08\x0b-\x0c\x0e-\x1f\x7f-\x9f]', '', text)

    # Limit length for logs
    if len(text) > 200:
        text = text[:197] + "..."

    return text


# ============================================================================
# Command Execution
# ============================================================================

def run_command(cmd: list[str]) -> Optional[str]:
    """
    Execute a system command and return output.

    Security:
        - No shell=True (prevents shell injection)
        - Timeout protection

    Args:
        cmd: Command and arguments as list (not string)

    Returns:
        Command output as string, or None if command fails
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            check=True,
            timeout=TIMEOUT_SECONDS,
            shell=False
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
        return None
