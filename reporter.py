"""
Nagios result reporting module.

Turns an EvaluationResult into the single status line and the exit code
a Nagios compatible monitoring system expects.
"""

from typing import Optional, TextIO

from config import EMPTY_RESULT_MESSAGE, MESSAGE_SEPARATOR
from enums import REPORT_PRECEDENCE, NagiosState
from logging_config import get_logger
from models import EvaluationResult

logger = get_logger(__name__)


def select_state(result: EvaluationResult) -> NagiosState:
    """
    Select the reported state.

    The first non-empty bucket in the order UNKNOWN, CRITICAL, WARNING, OK
    wins. An empty result is UNKNOWN.
    """
    for state in REPORT_PRECEDENCE:
        if result.messages(state):
            return state
    return NagiosState.UNKNOWN


def format_report(result: EvaluationResult) -> tuple[NagiosState, str]:
    """
    Build the status line for a result.

    Args:
        result: Evaluation result

    Returns:
        Tuple of (reported state, status line)
    """
    if result.is_empty():
        logger.warning("Evaluation produced no messages")
        return NagiosState.UNKNOWN, EMPTY_RESULT_MESSAGE

    state = select_state(result)
    return state, MESSAGE_SEPARATOR.join(result.messages(state))


def report(result: EvaluationResult, stream: Optional[TextIO] = None) -> int:
    """
    Write the status line and return the exit code.

    Args:
        result: Evaluation result
        stream: Output stream, current sys.stdout if None

    Returns:
        Exit code of the reported state (0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN)
    """
    state, line = format_report(result)
    logger.debug("Reporting %s", state)

    print(line, file=stream)
    return int(state)
