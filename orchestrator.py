"""
Fact collection orchestration module.

Combines the sysfs attributes and the assigned addresses of the checked
interface into a single InterfaceFacts snapshot.
"""

import dataclasses
import shutil

from config import REQUIRED_COMMANDS
from enums import AddressCheck
from logging_config import get_logger
from models import ExpectationModel, InterfaceFacts
from network.addresses import get_interface_addresses
from network.sysfs import read_interface_facts
from utils.system import sanitize_for_log

logger = get_logger(__name__)


def check_dependencies() -> bool:
    """
    Verify the system commands used for address enumeration are available.

    Returns:
        True if all commands are present, False otherwise
    """
    logger.debug("Checking dependencies...")

    all_present = True

    for cmd in REQUIRED_COMMANDS:
        if not shutil.which(cmd):
            logger.warning("Missing: %s", cmd)
            all_present = False
        else:
            logger.debug("Found: %s", cmd)

    return all_present


def collect_interface_facts(expectation: ExpectationModel) -> InterfaceFacts:
    """
    Collect the facts needed to evaluate an expectation.

    Addresses are only enumerated when an address check is requested
    and the interface is present. If they can't be enumerated the
    snapshot carries None instead of an address list.

    Args:
        expectation: Operator expectations, names the interface

    Returns:
        InterfaceFacts snapshot

    Raises:
        FactReadError: If a numeric sysfs attribute can't be parsed
    """
    safe_name = sanitize_for_log(expectation.interface)
    logger.info("Collecting facts for %s...", safe_name)

    facts = read_interface_facts(expectation.interface)

    if expectation.address_check is AddressCheck.NONE or not facts.present:
        return facts

    if not check_dependencies():
        logger.warning("[%s] Can't enumerate addresses, 'ip' is missing", safe_name)
        return dataclasses.replace(facts, assigned_addresses=None)

    addresses = get_interface_addresses(expectation.interface)
    if addresses is None:
        return dataclasses.replace(facts, assigned_addresses=None)

    return dataclasses.replace(facts, assigned_addresses=tuple(addresses))
