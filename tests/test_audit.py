"""Tests for audit logging of evaluations."""

import logging
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from accountant.audit import AuditLogger, configure_logging
from accountant.audit import logger as audit_logger_module
from accountant.config import AppSettings
from accountant.entry import parse_amount
from accountant.evaluator import evaluate
from accountant.models.audit import AuditEvent, AuditEventType, AuditSeverity
from accountant.models.expression import EvaluationResult


@pytest.fixture(autouse=True)
def _configured_logging():
    # Real configuration must happen before capture_logs() swaps in its processors
    configure_logging()


class TestAuditLogger:
    """Tests for AuditLogger."""

    def test_logs_at_event_severity(self):
        with capture_logs() as logs:
            logger = AuditLogger()
            logger.log(AuditEvent(
                event_type=AuditEventType.EXPRESSION_REJECTED,
                severity=AuditSeverity.WARNING,
                description="rejected",
            ))
        assert len(logs) == 1
        assert logs[0]["event"] == "audit_event"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["event_type"] == "expression_rejected"

    def test_log_evaluation(self):
        with capture_logs() as logs:
            AuditLogger().log_evaluation(EvaluationResult.ok("1 + 2", Decimal("3")))
        assert logs[0]["log_level"] == "info"
        assert logs[0]["details"] == {"expression": "1 + 2", "value": "3"}


class TestEvaluationIsLogged:
    """Tests that public entry points log their outcome."""

    def test_evaluate_logs_success(self):
        with capture_logs() as logs:
            evaluate("6 * 7", audit_logger=AuditLogger())
        assert [entry["event_type"] for entry in logs] == ["expression_evaluated"]

    def test_evaluate_logs_rejection(self):
        with capture_logs() as logs:
            evaluate("5 / 0", audit_logger=AuditLogger())
        assert logs[0]["event_type"] == "expression_rejected"
        assert logs[0]["error_code"] == "division_by_zero"

    def test_parse_amount_logs_expression_and_amount(self):
        with capture_logs() as logs:
            parse_amount("2 + 2", audit_logger=AuditLogger())
        assert [entry["event_type"] for entry in logs] == [
            "expression_evaluated",
            "amount_accepted",
        ]

    def test_parse_amount_logs_plain_rejection(self):
        with capture_logs() as logs:
            parse_amount("abc", audit_logger=AuditLogger())
        assert [entry["event_type"] for entry in logs] == ["amount_rejected"]


class TestLongInput:
    """Long or unusual input is logged without failing the evaluation."""

    def test_product_of_large_numbers(self):
        big = "9" * 300
        with capture_logs() as logs:
            result = evaluate(f"{big} * {big}", audit_logger=AuditLogger())
        assert result.value == Decimal(int(big) ** 2)
        assert len(str(result.value)) == 600
        assert len(logs[0]["description"]) <= 500
        assert logs[0]["details"]["value"] == str(result.value)

    def test_control_characters(self):
        with capture_logs() as logs:
            result = evaluate("\x01" * 300, audit_logger=AuditLogger())
        assert result.error.symbol == "\x01" * 300
        assert len(logs[0]["description"]) <= 500

    def test_long_plain_amount(self):
        with capture_logs() as logs:
            result = parse_amount("1" * 600, audit_logger=AuditLogger())
        assert str(result.value) == "1" * 600
        assert logs[0]["event_type"] == "amount_accepted"
        assert len(logs[0]["description"]) <= 500


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_leaves_root_handlers_alone(self, monkeypatch):
        monkeypatch.setattr(audit_logger_module, "_CONFIGURED", False)
        package_logger = logging.getLogger(audit_logger_module.PACKAGE_LOGGER_NAME)
        previous_level = package_logger.level
        root_handlers = list(logging.getLogger().handlers)
        try:
            configure_logging(AppSettings(log_level="DEBUG"))
            assert logging.getLogger().handlers == root_handlers
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous_level)
