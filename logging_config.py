"""
Logging configuration for check_ethernet.

Provides structured logging with configurable verbosity levels.

Nagios reads the plugin result from stdout, so all log output goes to
stderr (and optionally a file). Default mode shows WARNING+ only,
verbose mode shows DEBUG+.

Security:
    Interface names and sysfs content should go through sanitize_for_log()
    from utils.system before being logged.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from errors import ConfigurationError


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds ANSI color codes to the level name.

    Color scheme:
        DEBUG: Cyan
        INFO: Green
        WARNING: Yellow
        ERROR: Red
        CRITICAL: Magenta
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record with color codes.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with color codes
        """
        # Format a copy, the file handler sees the same record afterwards
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, '')
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True
) -> None:
    """
    Configure application-wide logging.

    Console output goes to stderr so stdout carries only the status line.

    Logging Behavior:
        Default mode (verbose=False):
            - Shows WARNING and above only
        Verbose mode (verbose=True):
            - Shows DEBUG and above, e.g. every sysfs attribute read

    Args:
        verbose: If True, enable DEBUG level logging on the console
        log_file: Optional file path to write logs to (always DEBUG, no colors)
        use_colors: If True, use colored output for console

    Raises:
        ConfigurationError: If the log file can't be opened

    Examples:
        >>> setup_logging(verbose=True, use_colors=False)
        >>> setup_logging(log_file=Path("/var/log/check_ethernet.log"))
    """
    level = logging.DEBUG if verbose else logging.WARNING

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    console_formatter: logging.Formatter
    if use_colors:
        console_formatter = ColoredFormatter('%(levelname)s: %(message)s')
    else:
        console_formatter = logging.Formatter('%(levelname)s: %(message)s')

    console_handler.setFormatter(console_formatter)

    handlers: list[logging.Handler] = [console_handler]

    # File logs never contain ANSI escape sequences
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            raise ConfigurationError(f"Can't open log file {log_file}: {e.strerror}") from None
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,  # Root level is DEBUG, handlers filter
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Call this at module level with __name__ and use %-style arguments:

        ```python
        from logging_config import get_logger
        logger = get_logger(__name__)

        logger.debug("Read %s: %s", path, sanitize_for_log(value))
        ```

    Args:
        name: Module name, typically __name__

    Returns:
        Logger instance for the module
    """
    return logging.getLogger(name)
