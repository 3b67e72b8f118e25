"""
Exception types for check_ethernet.

Every error that ends the check with an UNKNOWN state derives from CheckError.
"""


class CheckError(Exception):
    """Base class for errors that abort the check."""


class ConfigurationError(CheckError):
    """Invalid or missing command line configuration."""


class FactReadError(CheckError):
    """Interface attribute present in sysfs but not in the expected format."""
