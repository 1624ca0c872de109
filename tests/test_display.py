"""
Display and diagnostics tests
"""

import logging

from conversor import display
from conversor.diagnostics import log_diagnostic
from conversor.models import DiagnosticEvent, DiagnosticKind


class TestDisplay:

    def test_format_two_decimals(self):
        assert display.format_amount(1500.0) == "1500.00"
        assert display.format_amount(10.000000000000002) == "10.00"
        assert display.format_amount(0.125) == "0.12"

    def test_amount_text(self):
        assert display.amount_text(0) == ""
        assert display.amount_text(42) == "42"

    def test_result_text_shown(self):
        assert display.result_text(1500.0, "USD", "JPY") == "1500.00 JPY"

    def test_result_hidden_when_zero(self):
        assert display.result_text(0.0, "USD", "JPY") is None
        assert not display.should_show_result(0.0, "USD", "JPY")

    def test_result_hidden_without_both_currencies(self):
        assert not display.should_show_result(5.0, None, "JPY")
        assert not display.should_show_result(5.0, "USD", None)
        assert display.result_text(5.0, "USD", None) is None


class TestLogDiagnostic:

    def test_fetch_failure_logged_as_error(self, caplog):
        event = DiagnosticEvent(
            kind=DiagnosticKind.FETCH_FAILED,
            message="Failed to load currencies",
            details={"error_type": "TRANSPORT"},
        )
        with caplog.at_level(logging.DEBUG, logger="conversor.diagnostics"):
            log_diagnostic(event)

        assert [r.levelno for r in caplog.records] == [logging.ERROR]
        assert "TRANSPORT" in caplog.records[0].getMessage()

    def test_rejected_amount_not_an_error(self, caplog):
        event = DiagnosticEvent(
            kind=DiagnosticKind.AMOUNT_REJECTED,
            message="Amount input rejected",
            details={"raw": "abc", "previous": 0},
        )
        with caplog.at_level(logging.DEBUG, logger="conversor.diagnostics"):
            log_diagnostic(event)

        assert [r.levelno for r in caplog.records] == [logging.DEBUG]
