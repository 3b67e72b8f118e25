#!/usr/bin/env python3
"""
Ethernet Interface Check - Main Entry Point

Nagios plugin that checks the operational state, negotiated speed and
duplex mode, MTU and assigned addresses of a single network interface.

Prints one status line to stdout and exits with the Nagios state:
0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN.
"""

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional

from config import ADDRESS_CHECK_CHOICES, DEFAULT_SPEED, DEFAULT_STATE, VERSION
from enums import AddressCheck, Duplex, NagiosState
from errors import ConfigurationError, FactReadError
from evaluator import evaluate_status
from logging_config import get_logger, setup_logging
from models import ExpectationModel
from orchestrator import collect_interface_facts
from reporter import report
from utils.system import sanitize_for_log, validate_interface_name

logger = get_logger(__name__)

BANNER = f"""check_ethernet version {VERSION}
This program comes with ABSOLUTELY NO WARRANTY.

check_ethernet is distributed under the Terms of the GNU General
Public License Version 3. (http://www.gnu.org/copyleft/gpl.html)
"""


class PluginArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as ConfigurationError."""

    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message)


def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Values that need validation (-m, -s, -a) are kept as strings and
    checked by build_expectation().

    Args:
        argv: Arguments without program name, sys.argv[1:] if None

    Returns:
        Parsed arguments namespace

    Raises:
        ConfigurationError: If the command line can't be parsed
    """
    parser = PluginArgumentParser(
        prog='check_ethernet',
        description=BANNER,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  %(prog)s -i eth0                       # 1000 MBit/s full duplex expected
  %(prog)s -i eth0 -s 100:half -m 9000   # 100 MBit/s half duplex, jumbo frames
  %(prog)s -i eth0 -s 0                  # Only check the link state
  %(prog)s -i eth0 -C -a ipv4            # CRITICAL on mismatch, require IPv4
        '''
    )

    parser.add_argument(
        '-i', '--interface',
        default='',
        help='Ethernet interface to check'
    )

    parser.add_argument(
        '-m', '--mtu',
        default='-1',
        help='Expected MTU value for interface'
    )

    parser.add_argument(
        '-s', '--state',
        default=DEFAULT_STATE,
        help=('Expected state <speed>[:<mode>] where <speed> is the negotiated link speed '
              'in MBit/s and <mode> is "half" or "full". Default: %(default)s')
    )

    parser.add_argument(
        '-C', '--critical',
        action='store_true',
        help=('Report CRITICAL if speed or duplex is below the requested state or the MTU '
              'does not match. Default: report WARNING')
    )

    parser.add_argument(
        '-a', '--address-assigned',
        metavar='ip|ipv4|ipv6',
        help=('Require a non link local address: "ipv4", "ipv6", or "ip" for any family')
    )

    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging on stderr'
    )

    parser.add_argument(
        '--log-file',
        type=Path,
        help='Write logs to specified file'
    )

    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored log output'
    )

    return parser.parse_args(argv)


def parse_state(value: str) -> tuple[Optional[int], Duplex]:
    """
    Parse the expected state <speed>[:<mode>].

    An empty speed keeps the default speed (":half" is "1000:half").
    A speed of zero or below disables the speed and duplex checks.

    Args:
        value: Value of -s/--state

    Returns:
        Tuple of (expected speed or None, expected duplex)

    Raises:
        ConfigurationError: If the state is malformed
    """
    parts = value.split(":")

    if len(parts) > 2:
        raise ConfigurationError("Invalid link mode")

    speed = DEFAULT_SPEED
    duplex = Duplex.FULL

    if parts[0] != "" or len(parts) == 1:
        try:
            speed = int(parts[0])
        except ValueError:
            raise ConfigurationError("Can't convert link speed to an integer") from None

    if len(parts) == 2:
        try:
            duplex = Duplex(parts[1])
        except ValueError:
            raise ConfigurationError(f"Invalid duplex mode {parts[1]}") from None

    return (speed if speed > 0 else None), duplex


def parse_mtu(value: str) -> Optional[int]:
    """Parse -m/--mtu, zero or below disables the MTU check."""
    try:
        mtu = int(value)
    except ValueError:
        raise ConfigurationError("Can't convert MTU to an integer") from None

    return mtu if mtu > 0 else None


def parse_address_check(value: Optional[str]) -> AddressCheck:
    """Map -a/--address-assigned to an AddressCheck."""
    if value is None:
        return AddressCheck.NONE

    try:
        return ADDRESS_CHECK_CHOICES[value]
    except KeyError:
        raise ConfigurationError(f"Invalid address type {value}") from None


def build_expectation(args: argparse.Namespace) -> ExpectationModel:
    """
    Build the ExpectationModel from parsed arguments.

    Args:
        args: Parsed arguments namespace

    Returns:
        Validated ExpectationModel

    Raises:
        ConfigurationError: If any value is invalid or -i is missing
    """
    mtu = parse_mtu(args.mtu)
    speed, duplex = parse_state(args.state)
    address_check = parse_address_check(args.address_assigned)

    if not args.interface:
        raise ConfigurationError("Interface to check is mandatory")

    if not validate_interface_name(args.interface):
        raise ConfigurationError(f"Invalid interface name {sanitize_for_log(args.interface)}")

    return ExpectationModel(
        interface=args.interface,
        expected_mtu=mtu,
        expected_speed=speed,
        expected_duplex=duplex,
        escalate_to_critical=args.critical,
        address_check=address_check
    )


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the interface check.

    Returns:
        Nagios exit code
    """
    try:
        args = parse_arguments(argv)
        setup_logging(
            verbose=args.verbose,
            log_file=args.log_file,
            use_colors=not args.no_color
        )
        expectation = build_expectation(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return int(NagiosState.UNKNOWN)

    logger.debug("Expectation: %s", expectation)

    try:
        facts = collect_interface_facts(expectation)
    except FactReadError as e:
        logger.debug("Reading facts of %s failed", sanitize_for_log(expectation.interface))
        print(f"Error: {e}", file=sys.stderr)
        return int(NagiosState.UNKNOWN)

    logger.debug("Facts: %s", facts)

    result = evaluate_status(expectation, facts)
    return report(result)


if __name__ == "__main__":
    sys.exit(main())
