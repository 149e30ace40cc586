"""
Data Models Package

This package contains all Pydantic models used by the amount evaluator.
All data flowing through the system must conform to these schemas.
"""

from accountant.models.expression import (
    EvaluationError,
    EvaluationErrorKind,
    EvaluationResult,
    ExpressionError,
    Token,
    TokenType,
)
from accountant.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expression models
    "EvaluationError",
    "EvaluationErrorKind",
    "EvaluationResult",
    "ExpressionError",
    "Token",
    "TokenType",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
