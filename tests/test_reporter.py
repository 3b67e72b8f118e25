"""
Tests for the reporting module.

Verifies bucket precedence, message joining and exit codes.
"""

import io

import pytest
from _pytest.capture import CaptureFixture

from enums import NagiosState
from models import EvaluationResult
from reporter import format_report, report, select_state


def _result(**buckets: list[str]) -> EvaluationResult:
    return EvaluationResult(**buckets)


class TestSelectState:
    """Test select_state function."""

    @pytest.mark.parametrize("buckets,expected", [
        ({"ok": ["a"]}, NagiosState.OK),
        ({"ok": ["a"], "warning": ["b"]}, NagiosState.WARNING),
        ({"ok": ["a"], "warning": ["b"], "critical": ["c"]}, NagiosState.CRITICAL),
        ({"ok": ["a"], "warning": ["b"], "critical": ["c"], "unknown": ["d"]}, NagiosState.UNKNOWN),
        ({"unknown": ["d"], "ok": ["a"]}, NagiosState.UNKNOWN),
        ({"critical": ["c"], "ok": ["a"]}, NagiosState.CRITICAL),
    ])
    def test_precedence(self, buckets: dict[str, list[str]], expected: NagiosState) -> None:
        """Test UNKNOWN > CRITICAL > WARNING > OK."""
        assert select_state(_result(**buckets)) is expected

    def test_empty_is_unknown(self) -> None:
        """Test an empty result is UNKNOWN."""
        assert select_state(EvaluationResult()) is NagiosState.UNKNOWN


class TestFormatReport:
    """Test format_report function."""

    def test_joins_winning_bucket_only(self) -> None:
        """Test only the winning bucket is printed, joined with a comma."""
        result = _result(ok=["Interface is up"], warning=["first", "second"])

        assert format_report(result) == (NagiosState.WARNING, "first, second")

    def test_single_message(self) -> None:
        """Test a single message is printed as is."""
        result = _result(critical=["Interface is not present"])

        assert format_report(result) == (NagiosState.CRITICAL, "Interface is not present")

    def test_empty(self) -> None:
        """Test an empty result has a status line too."""
        assert format_report(EvaluationResult()) == (NagiosState.UNKNOWN, "No check results")


class TestReport:
    """Test report function."""

    @pytest.mark.parametrize("bucket,code", [
        ("ok", 0),
        ("warning", 1),
        ("critical", 2),
        ("unknown", 3),
    ])
    def test_exit_codes(self, bucket: str, code: int) -> None:
        """Test the returned exit code of each state."""
        stream = io.StringIO()

        assert report(_result(**{bucket: ["message"]}), stream) == code
        assert stream.getvalue() == "message\n"

    def test_writes_stdout_by_default(self, capsys: CaptureFixture[str]) -> None:
        """Test the status line is the only stdout output."""
        code = report(_result(ok=["Interface is up", "MTU size is 1500"]))

        captured = capsys.readouterr()
        assert code == 0
        assert captured.out == "Interface is up, MTU size is 1500\n"
