"""
Audit Logger

DESIGN DECISION: Every amount the user enters is logged.
This provides:
1. Traceability of what was typed and what was stored
2. Debugging capability when an amount looks wrong

The audit logger:
- Is synchronous; evaluation is a short, bounded computation
- Never changes the outcome it is logging
"""

import logging
from typing import Optional

import structlog

from accountant.config import AppSettings, get_settings
from accountant.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from accountant.models.expression import EvaluationResult


PACKAGE_LOGGER_NAME = "accountant"
_CONFIGURED = False


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Configure structlog and the package log level exactly once.

    Later calls are no-ops, so library entry points can call this freely.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if settings is None:
        settings = get_settings().app

    # Level only, on our own logger; handlers belong to the host application
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(
        getattr(logging, settings.log_level)
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


class AuditLogger:
    """
    Central audit logging service.

    Writes every event to the structured local log.
    """

    def __init__(self, name: str = "accountant.audit"):
        configure_logging()
        self._logger = structlog.get_logger(name)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at a level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_evaluation(self, result: EvaluationResult) -> None:
        """Log the outcome of an expression evaluation."""
        self.log(AuditEventBuilder.expression_evaluated(result))

    def log_amount(self, result: EvaluationResult) -> None:
        """Log the outcome of an amount entry."""
        self.log(AuditEventBuilder.amount_entered(result))
