"""
Data structure definitions.

Type-safe data models for operator expectations, observed interface facts
and evaluation results.

Checks that are disabled and facts that could not be read are None,
never a negative placeholder.
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Optional

from config import DEFAULT_DUPLEX, DEFAULT_SPEED, IPV4_LINK_LOCAL, IPV6_LINK_LOCAL
from enums import AddressCheck, AddressFamily, Duplex, NagiosState


@dataclass(frozen=True)
class ExpectationModel:
    """
    Operator supplied expectations for one interface.

    Attributes:
        interface: Interface name (e.g., eth0, enp3s0)
        expected_mtu: Expected MTU, or None to skip the MTU check
        expected_speed: Expected link speed in MBit/s, or None to skip
            the speed and duplex checks
        expected_duplex: Expected duplex mode
        escalate_to_critical: Report mismatches as CRITICAL instead of WARNING
        address_check: Address families that must carry a usable address
    """

    interface: str
    expected_mtu: Optional[int] = None
    expected_speed: Optional[int] = DEFAULT_SPEED
    expected_duplex: Duplex = DEFAULT_DUPLEX
    escalate_to_critical: bool = False
    address_check: AddressCheck = AddressCheck.NONE

    @property
    def mismatch_state(self) -> NagiosState:
        """State used for speed, duplex and MTU mismatches."""
        return NagiosState.CRITICAL if self.escalate_to_critical else NagiosState.WARNING


@dataclass(frozen=True)
class AssignedAddress:
    """
    An address assigned to an interface.

    Attributes:
        family: IPv4 or IPv6
        address: Address without prefix length
        prefix_length: Network prefix length
        is_link_local: True for 169.254.0.0/16 and fe80::/10
    """

    family: AddressFamily
    address: str
    prefix_length: int
    is_link_local: bool

    @classmethod
    def from_prefix(cls, prefix: str) -> "AssignedAddress":
        """
        Build an AssignedAddress from a prefix such as 192.168.1.10/24.

        Args:
            prefix: Address with optional prefix length

        Returns:
            Classified address

        Raises:
            ValueError: If prefix is not a valid IPv4 or IPv6 interface address
        """
        iface = ipaddress.ip_interface(prefix)

        if iface.version == 4:
            family = AddressFamily.IPV4
            link_local = iface.ip in IPV4_LINK_LOCAL
        else:
            family = AddressFamily.IPV6
            link_local = iface.ip in IPV6_LINK_LOCAL

        return cls(
            family=family,
            address=str(iface.ip),
            prefix_length=iface.network.prefixlen,
            is_link_local=link_local
        )


@dataclass(frozen=True)
class InterfaceFacts:
    """
    Point-in-time snapshot of an interface.

    Attributes:
        present: Whether the interface exists on the host
        operational_state: Content of the operstate attribute
        negotiated_speed: Link speed in MBit/s, or None if unread
        negotiated_duplex: Content of the duplex attribute
        mtu: MTU, or None if unread
        assigned_addresses: Addresses in enumeration order, or None if they
            could not be enumerated
    """

    present: bool
    operational_state: str
    negotiated_speed: Optional[int]
    negotiated_duplex: str
    mtu: Optional[int]
    assigned_addresses: Optional[tuple[AssignedAddress, ...]] = ()

    @classmethod
    def create_absent(
        cls,
        operational_state: str = "unknown",
        negotiated_duplex: str = "unknown"
    ) -> "InterfaceFacts":
        """
        Create the observation for an interface that could not be read.

        Args:
            operational_state: operstate content if it was read
            negotiated_duplex: duplex content if it was read

        Returns:
            InterfaceFacts with present=False and no numeric values
        """
        return cls(
            present=False,
            operational_state=operational_state,
            negotiated_speed=None,
            negotiated_duplex=negotiated_duplex,
            mtu=None
        )


@dataclass
class EvaluationResult:
    """
    Messages of one evaluation, grouped by severity.

    Messages keep the order in which the checks produced them.
    """

    unknown: list[str] = field(default_factory=list)
    critical: list[str] = field(default_factory=list)
    warning: list[str] = field(default_factory=list)
    ok: list[str] = field(default_factory=list)

    def messages(self, state: NagiosState) -> list[str]:
        """Return the bucket for a state."""
        match state:
            case NagiosState.UNKNOWN:
                return self.unknown
            case NagiosState.CRITICAL:
                return self.critical
            case NagiosState.WARNING:
                return self.warning
            case _:
                return self.ok

    def add(self, state: NagiosState, message: str) -> None:
        """Append a message to the bucket for a state."""
        self.messages(state).append(message)

    def is_empty(self) -> bool:
        """True if no check produced a message."""
        return not (self.unknown or self.critical or self.warning or self.ok)
