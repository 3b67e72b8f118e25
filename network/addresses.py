"""
Address enumeration module.

Queries the addresses assigned to interfaces via 'ip -o addr show'
(netlink interface). Supports both IPv4 and IPv6.

An unknown interface yields no addresses. A failing command yields None,
so callers can tell "no addresses" from "could not enumerate".
"""

from typing import Optional

from logging_config import get_logger
from models import AssignedAddress
from utils.system import run_command, sanitize_for_log

logger = get_logger(__name__)

ADDRESS_FAMILIES = ("inet", "inet6")


def get_all_interface_addresses() -> Optional[dict[str, list[AssignedAddress]]]:
    """
    Get the addresses of ALL interfaces in a single query.

    Each line of 'ip -o addr show' looks like:
        2: eth0    inet 192.168.1.100/24 brd 192.168.1.255 scope global eth0\\ ...

    Returns:
        Dict mapping interface name to its addresses in kernel order, or
        None if the command failed. Interfaces without addresses are not
        in the dict.
    """
    output = run_command(["ip", "-o", "addr", "show"])

    if output is None:
        logger.warning("Failed to enumerate addresses with 'ip' command")
        return None

    result: dict[str, list[AssignedAddress]] = {}

    for line in output.split("\n"):
        parts = line.split()
        if len(parts) < 4 or parts[2] not in ADDRESS_FAMILIES:
            continue

        # VLAN and veth devices are listed as name@link
        iface = parts[1].split("@", 1)[0]

        try:
            address = AssignedAddress.from_prefix(parts[3])
        except ValueError:
            logger.warning(
                "Ignoring unparsable address %s on %s",
                sanitize_for_log(parts[3]), sanitize_for_log(iface)
            )
            continue

        result.setdefault(iface, []).append(address)

    return result


def get_interface_addresses(interface: str) -> Optional[list[AssignedAddress]]:
    """
    Get the addresses assigned to one interface.

    Args:
        interface: Interface name

    Returns:
        Assigned addresses, empty if the interface has none or is unknown,
        None if enumeration failed
    """
    all_addresses = get_all_interface_addresses()
    if all_addresses is None:
        return None

    addresses = all_addresses.get(interface, [])

    logger.debug(
        "[%s] Assigned addresses: %s",
        sanitize_for_log(interface),
        ", ".join(f"{a.address}/{a.prefix_length}" for a in addresses) or "none"
    )
    return addresses
