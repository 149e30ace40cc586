"""
Audit Models for Personal Accountant

Every amount the user enters is logged for audit purposes, whether it
was accepted or rejected. This makes it possible to see what was typed
and what the ledger made of it.

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from accountant.models.expression import EvaluationResult


DESCRIPTION_MAX_LENGTH = 500


def _clip(text: str, limit: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Shorten text to fit the description field; details keep the full data."""
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Expression evaluation
    EXPRESSION_EVALUATED = "expression_evaluated"
    EXPRESSION_REJECTED = "expression_rejected"

    # Amount entry
    AMOUNT_ACCEPTED = "amount_accepted"
    AMOUNT_REJECTED = "amount_rejected"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    description: str = Field(
        ...,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Human-readable description of what happened"
    )

    # Additional data (event-specific)
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (if applicable)
    error_code: Optional[str] = Field(
        default=None,
        description="Error kind if this is an error event"
    )
    error_message: Optional[str] = Field(
        default=None,
        description="Error message if this is an error event"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expression_evaluated(result)
        audit_logger.log(event)
    """

    @staticmethod
    def _outcome(
        result: EvaluationResult,
        ok_type: AuditEventType,
        rejected_type: AuditEventType,
        subject: str,
    ) -> AuditEvent:
        if result.is_ok:
            return AuditEvent(
                event_type=ok_type,
                description=_clip(f"{subject} {result.expression!r} = {result.value}"),
                details={
                    "expression": result.expression,
                    "value": str(result.value),
                },
            )

        return AuditEvent(
            event_type=rejected_type,
            severity=AuditSeverity.WARNING,
            description=_clip(f"{subject} {result.expression!r} rejected"),
            details={
                "expression": result.expression,
                "symbol": result.error.symbol,
            },
            error_code=result.error.kind.value,
            error_message=result.error.message,
        )

    @staticmethod
    def expression_evaluated(result: EvaluationResult) -> AuditEvent:
        """Create event for a finished evaluation, successful or not."""
        return AuditEventBuilder._outcome(
            result,
            AuditEventType.EXPRESSION_EVALUATED,
            AuditEventType.EXPRESSION_REJECTED,
            "Expression",
        )

    @staticmethod
    def amount_entered(result: EvaluationResult) -> AuditEvent:
        """Create event for a parsed amount entry."""
        return AuditEventBuilder._outcome(
            result,
            AuditEventType.AMOUNT_ACCEPTED,
            AuditEventType.AMOUNT_REJECTED,
            "Amount",
        )
