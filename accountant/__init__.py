"""
Personal Accountant - Amount Expression Evaluator

Turns the amount a user types into the ledger ("12.50", "3 * 4.25 + 1")
into an exact decimal value, or a precise error they can act on.

DESIGN PRINCIPLES:
1. Money is never a float
2. Fail early, fail visibly
3. No silent corrections
4. Every evaluation is logged
"""

from accountant.entry import describe_error, looks_like_expression, parse_amount
from accountant.evaluator import evaluate
from accountant.models import (
    EvaluationError,
    EvaluationErrorKind,
    EvaluationResult,
    ExpressionError,
)

__version__ = "1.0.0"
__author__ = "Personal Accountant Team"

__all__ = [
    "EvaluationError",
    "EvaluationErrorKind",
    "EvaluationResult",
    "ExpressionError",
    "describe_error",
    "evaluate",
    "looks_like_expression",
    "parse_amount",
]
