"""
Status evaluation module.

Derives Nagios messages from an ExpectationModel and an InterfaceFacts
snapshot. Pure functions, no I/O besides debug logging.

Evaluation order:
    1. Presence          (short-circuits)
    2. Operational state (short-circuits unless "up")
    3. Speed and duplex  (if an expected speed is set)
    4. MTU               (if an expected MTU is set)
    5. Addresses         (if an address check is requested)

Steps 3 to 5 never short-circuit each other; every finding is kept.
"""

from enums import AddressCheck, AddressFamily, Duplex, NagiosState
from logging_config import get_logger
from models import AssignedAddress, EvaluationResult, ExpectationModel, InterfaceFacts

logger = get_logger(__name__)

KNOWN_DUPLEX_MODES = {Duplex.HALF.value, Duplex.FULL.value}


def check_speed(expectation: ExpectationModel, facts: InterfaceFacts, result: EvaluationResult) -> None:
    """Compare the negotiated link speed against the expected speed."""
    expected = expectation.expected_speed
    speed = facts.negotiated_speed

    if expected is None:
        return

    if speed is None:
        result.add(NagiosState.UNKNOWN, "Negotiated interface speed is unknown")
    elif speed > expected:
        result.add(
            NagiosState.WARNING,
            f"Negotiated interface speed ({speed} MBit/s) is greater than "
            f"requested interface speed ({expected} MBit/s)"
        )
    elif speed < expected:
        result.add(
            expectation.mismatch_state,
            f"Negotiated interface speed ({speed} MBit/s) is below "
            f"requested interface speed ({expected} MBit/s)"
        )
    else:
        result.add(NagiosState.OK, f"Negotiated interface speed is {speed} MBit/s")


def check_duplex(expectation: ExpectationModel, facts: InterfaceFacts, result: EvaluationResult) -> None:
    """Compare the negotiated duplex mode against the expected mode."""
    duplex = facts.negotiated_duplex
    expected = expectation.expected_duplex

    if duplex not in KNOWN_DUPLEX_MODES:
        result.add(NagiosState.UNKNOWN, f"Unknown duplex mode {duplex}")
    elif duplex != expected.value:
        result.add(
            expectation.mismatch_state,
            f"Negotiated duplex mode is {duplex} instead of {expected.value}"
        )
    else:
        result.add(NagiosState.OK, f"Negotiated duplex mode is {duplex}")


def check_mtu(expectation: ExpectationModel, facts: InterfaceFacts, result: EvaluationResult) -> None:
    """Compare the MTU against the expected MTU."""
    expected = expectation.expected_mtu
    mtu = facts.mtu

    if expected is None:
        return

    if mtu is None:
        result.add(NagiosState.UNKNOWN, "MTU size is unknown")
    elif mtu != expected:
        result.add(
            expectation.mismatch_state,
            f"MTU size of {mtu} does not match requested MTU size of {expected}"
        )
    else:
        result.add(NagiosState.OK, f"MTU size is {mtu}")


def addresses_in_scope(
    address_check: AddressCheck,
    addresses: tuple[AssignedAddress, ...]
) -> list[AssignedAddress]:
    """
    Filter assigned addresses down to the families of an address check.

    Args:
        address_check: Requested address check
        addresses: All addresses of the interface

    Returns:
        Addresses the check applies to, in their original order
    """
    match address_check:
        case AddressCheck.IPV4:
            return [a for a in addresses if a.family is AddressFamily.IPV4]
        case AddressCheck.IPV6:
            return [a for a in addresses if a.family is AddressFamily.IPV6]
        case AddressCheck.BOTH:
            return list(addresses)
        case _:
            return []


def check_addresses(expectation: ExpectationModel, facts: InterfaceFacts, result: EvaluationResult) -> None:
    """Require at least one non link local address of the requested families."""
    if expectation.address_check is AddressCheck.NONE:
        return

    if facts.assigned_addresses is None:
        result.add(NagiosState.UNKNOWN, "Can't enumerate IP addresses")
        return

    in_scope = addresses_in_scope(expectation.address_check, facts.assigned_addresses)
    routable = [a for a in in_scope if not a.is_link_local]

    logger.debug(
        "Address check %s: %d in scope, %d non link local",
        expectation.address_check, len(in_scope), len(routable)
    )

    if not in_scope:
        result.add(NagiosState.CRITICAL, "No IP address assigned")
    elif not routable:
        result.add(NagiosState.CRITICAL, "Only link local address(es) are assigned")
    else:
        result.add(NagiosState.OK, "Non link local address(es) are assigned")


def evaluate_status(expectation: ExpectationModel, facts: InterfaceFacts) -> EvaluationResult:
    """
    Evaluate interface facts against the operator's expectations.

    Args:
        expectation: Expected interface configuration
        facts: Observed interface state

    Returns:
        EvaluationResult with every finding in its severity bucket

    Examples:
        >>> facts = InterfaceFacts.create_absent()
        >>> evaluate_status(ExpectationModel("eth0"), facts).critical
        ['Interface is not present']
    """
    result = EvaluationResult()

    if not facts.present:
        result.add(NagiosState.CRITICAL, "Interface is not present")
        return result

    if facts.operational_state == "down":
        result.add(NagiosState.CRITICAL, "Interface is DOWN")
        return result

    if facts.operational_state != "up":
        result.add(NagiosState.UNKNOWN, f"Interface is {facts.operational_state}")
        return result

    result.add(NagiosState.OK, "Interface is up")

    if expectation.expected_speed is not None:
        check_speed(expectation, facts, result)
        check_duplex(expectation, facts, result)

    check_mtu(expectation, facts, result)
    check_addresses(expectation, facts, result)

    return result
