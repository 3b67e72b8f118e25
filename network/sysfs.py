"""
Sysfs interface attribute reader.

Reads operstate, duplex, mtu and speed from /sys/class/net/<interface>/.

An attribute that cannot be read means the interface is treated as not
present. An attribute that is readable but not numeric where a number is
expected, or that is not valid text, is a FactReadError.
"""

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Optional

from config import (
    DUPLEX_ATTRIBUTE,
    MTU_ATTRIBUTE,
    OPERSTATE_ATTRIBUTE,
    SPEED_ATTRIBUTE,
    SYSFS_NET_PATH,
)
from errors import FactReadError
from logging_config import get_logger
from models import InterfaceFacts
from utils.system import sanitize_for_log, validate_interface_name

logger = get_logger(__name__)


@dataclass
class SysfsInterface:
    """
    Encapsulates sysfs reads for a network interface.

    Attributes:
        name: Interface name, validated on construction
        sysfs_root: Directory holding one entry per interface
    """
    name: str
    sysfs_root: Path = field(default=SYSFS_NET_PATH)

    def __post_init__(self) -> None:
        """Validate interface name on construction."""
        if not validate_interface_name(self.name):
            raise ValueError(f"Invalid interface name: {self.name}")

    @cached_property
    def base_path(self) -> Path:
        """Base sysfs path for this interface."""
        return self.sysfs_root / self.name

    def read_attribute(self, attribute: str) -> Optional[str]:
        """
        Read a whitespace-trimmed attribute value.

        Args:
            attribute: File name below the interface directory

        Returns:
            Attribute content, or None if the file cannot be read

        Raises:
            FactReadError: If the content is not valid text
        """
        path = self.base_path / attribute
        try:
            value = path.read_text(encoding="utf-8").strip()
        except OSError as e:
            # e.g. speed on a link without carrier returns EINVAL
            logger.debug("Can't read %s: %s", sanitize_for_log(path), sanitize_for_log(e))
            return None
        except UnicodeDecodeError:
            raise FactReadError(f"Can't decode reported {attribute} of {self.name}") from None

        logger.debug("%s = %s", sanitize_for_log(path), sanitize_for_log(value))
        return value


def _parse_int(raw: str, error_message: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise FactReadError(error_message) from None


def read_interface_facts(interface: str, sysfs_root: Path = SYSFS_NET_PATH) -> InterfaceFacts:
    """
    Read the sysfs facts of an interface.

    Attributes are read in the order operstate, duplex, mtu, speed. The
    first one that can't be read ends the read with a not-present
    observation. Addresses are not part of this read.

    Args:
        interface: Interface name
        sysfs_root: Directory holding one entry per interface

    Returns:
        InterfaceFacts without assigned addresses

    Raises:
        ValueError: If the interface name is not valid
        FactReadError: If an attribute is not text, or mtu or speed are
            present but not integers
    """
    sysfs = SysfsInterface(interface, sysfs_root)
    safe_name = sanitize_for_log(interface)

    operstate = sysfs.read_attribute(OPERSTATE_ATTRIBUTE)
    if operstate is None:
        logger.info("[%s] No operstate, interface is not present", safe_name)
        return InterfaceFacts.create_absent()

    duplex = sysfs.read_attribute(DUPLEX_ATTRIBUTE)
    if duplex is None:
        logger.info("[%s] No duplex mode, treating interface as not present", safe_name)
        return InterfaceFacts.create_absent(operational_state=operstate)

    raw_mtu = sysfs.read_attribute(MTU_ATTRIBUTE)
    if raw_mtu is None:
        logger.info("[%s] No MTU, treating interface as not present", safe_name)
        return InterfaceFacts.create_absent(operstate, duplex)
    mtu = _parse_int(raw_mtu, "Can't convert reported MTU to an integer")

    raw_speed = sysfs.read_attribute(SPEED_ATTRIBUTE)
    if raw_speed is None:
        logger.info("[%s] No link speed, treating interface as not present", safe_name)
        return InterfaceFacts.create_absent(operstate, duplex)
    speed = _parse_int(raw_speed, "Can't convert reported link speed to an integer")

    logger.debug(
        "[%s] operstate=%s duplex=%s mtu=%d speed=%d",
        safe_name, sanitize_for_log(operstate), sanitize_for_log(duplex), mtu, speed
    )

    return InterfaceFacts(
        present=True,
        operational_state=operstate,
        negotiated_speed=speed,
        negotiated_duplex=duplex,
        mtu=mtu
    )
