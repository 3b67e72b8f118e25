"""
Pytest configuration and shared fixtures.

Provides fixtures for mocking sysfs and system commands and for creating
expectation and fact test data throughout the test suite.
"""

import pytest
from pathlib import Path
from typing import Callable, Generator
from unittest.mock import Mock, patch
import logging

from _pytest.logging import LogCaptureFixture
from enums import AddressCheck, Duplex
from models import AssignedAddress, ExpectationModel, InterfaceFacts


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo handlers installed by setup_logging() in a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    # pytest's own capture handlers subclass StreamHandler, match exact types only
    for handler in root.handlers[:]:
        if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def disable_logging() -> Generator[None, None, None]:
    """Disable logging during tests to reduce noise."""
    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def caplog_debug(caplog: LogCaptureFixture) -> LogCaptureFixture:
    """Capture DEBUG level logs in tests."""
    caplog.set_level(logging.DEBUG)
    return caplog


# ============================================================================
# Sysfs Mocking Fixtures
# ============================================================================

@pytest.fixture
def mock_sysfs_base(tmp_path: Path) -> Path:
    """
    Create base mock sysfs filesystem structure.

    Returns:
        Path to mock /sys/class/net directory
    """
    sysfs_net = tmp_path / "sys" / "class" / "net"
    sysfs_net.mkdir(parents=True)
    return sysfs_net


@pytest.fixture
def make_sysfs_interface(mock_sysfs_base: Path) -> Callable[..., Path]:
    """
    Factory for mock interfaces below the mock sysfs root.

    Attributes passed as None are not created. Values are written with a
    trailing newline like the kernel does.

    Returns:
        Function creating an interface directory and returning its path
    """
    def _make(
        name: str = "eth0",
        operstate: str | None = "up",
        duplex: str | None = "full",
        mtu: str | None = "1500",
        speed: str | None = "1000",
    ) -> Path:
        iface = mock_sysfs_base / name
        iface.mkdir()
        for attribute, value in (
            ("operstate", operstate),
            ("duplex", duplex),
            ("mtu", mtu),
            ("speed", speed),
        ):
            if value is not None:
                (iface / attribute).write_text(f"{value}\n")
        return iface

    return _make


@pytest.fixture
def mock_sysfs_ethernet(make_sysfs_interface: Callable[..., Path]) -> Path:
    """
    Create mock Ethernet interface (eth0) that is up at 1000 MBit/s full duplex.

    Returns:
        Path to eth0 interface directory
    """
    return make_sysfs_interface("eth0")


# ============================================================================
# Command Output Fixtures
# ============================================================================

@pytest.fixture
def mock_ip_addr_output() -> str:
    """Sample output from 'ip -o addr show' command."""
    return (
        "1: lo    inet 127.0.0.1/8 scope host lo\\       valid_lft forever preferred_lft forever\n"
        "1: lo    inet6 ::1/128 scope host \\       valid_lft forever preferred_lft forever\n"
        "2: eth0    inet 192.168.1.100/24 brd 192.168.1.255 scope global dynamic eth0\\"
        "       valid_lft 86395sec preferred_lft 86395sec\n"
        "2: eth0    inet6 2001:db8::1/64 scope global dynamic \\"
        "       valid_lft 86395sec preferred_lft 86395sec\n"
        "2: eth0    inet6 fe80::211:22ff:fe33:4455/64 scope link \\"
        "       valid_lft forever preferred_lft forever\n"
        "3: eth1    inet 169.254.1.1/16 brd 169.254.255.255 scope link eth1\\"
        "       valid_lft forever preferred_lft forever\n"
        "4: eth0.10@eth0    inet 10.0.10.5/24 brd 10.0.10.255 scope global eth0.10\\"
        "       valid_lft forever preferred_lft forever"
    )


# ============================================================================
# Mock Function Fixtures
# ============================================================================

@pytest.fixture
def mock_subprocess_run() -> Generator[Mock, None, None]:
    """
    Mock subprocess.run for testing command execution.

    Yields:
        Mock object for subprocess.run
    """
    with patch('subprocess.run') as mock:
        yield mock


# ============================================================================
# Data Model Fixtures
# ============================================================================

@pytest.fixture
def default_expectation() -> ExpectationModel:
    """Expectation with CLI defaults: 1000 MBit/s full duplex, no MTU check."""
    return ExpectationModel(interface="eth0")


@pytest.fixture
def full_expectation() -> ExpectationModel:
    """Expectation with every check enabled."""
    return ExpectationModel(
        interface="eth0",
        expected_mtu=1500,
        expected_speed=1000,
        expected_duplex=Duplex.FULL,
        escalate_to_critical=False,
        address_check=AddressCheck.BOTH
    )


@pytest.fixture
def healthy_facts() -> InterfaceFacts:
    """Facts of an interface that is up at 1000 MBit/s full duplex, MTU 1500."""
    return InterfaceFacts(
        present=True,
        operational_state="up",
        negotiated_speed=1000,
        negotiated_duplex="full",
        mtu=1500,
        assigned_addresses=(
            AssignedAddress.from_prefix("192.168.1.100/24"),
            AssignedAddress.from_prefix("fe80::1/64"),
        )
    )
