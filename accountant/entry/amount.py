"""
Amount Entry

What the ledger runs when the user types a transaction amount.
A plain number is taken as-is; anything containing an operator is
evaluated as an expression ("12.50 + 3 * 2").

IMPORTANT: A rejected amount is never "fixed up". The caller shows
describe_error() and asks again.
"""

from typing import Optional

from accountant.audit import AuditLogger
from accountant.config import EvaluatorSettings
from accountant.evaluator import evaluate
from accountant.evaluator.tokenizer import OPERATORS, parse_decimal_literal, tokenize
from accountant.models.expression import (
    EvaluationError,
    EvaluationErrorKind,
    EvaluationResult,
)


_FRIENDLY_MESSAGES = {
    EvaluationErrorKind.UNKNOWN_SYMBOL: "unrecognized symbol",
    EvaluationErrorKind.UNMATCHED_PAREN: "parentheses don't match",
    EvaluationErrorKind.MALFORMED_EXPRESSION: "incomplete or malformed expression",
    EvaluationErrorKind.DIVISION_BY_ZERO: "division by zero",
}


def looks_like_expression(text: str) -> bool:
    """True if the text contains any arithmetic operator."""
    return any(ch in OPERATORS for ch in text)


def _plain_amount_error(text: str) -> EvaluationError:
    """Name the first lexeme that is not a number, operator or paren."""
    _, error = tokenize(text)
    if error is not None:
        return error
    # Every lexeme is valid ("(5)") but together they are not a plain number
    return EvaluationError.unknown_symbol(text)


def parse_amount(
    text: str,
    settings: Optional[EvaluatorSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> EvaluationResult:
    """
    Parse an amount typed by the user.

    Args:
        text: Raw input, e.g. "250", "12.5 * 4" or "(100 - 20) / 3"
        settings: Evaluator settings for expressions
        audit_logger: Where to log the outcome

    Returns:
        EvaluationResult with the exact amount or the reason it was rejected
    """
    audit_logger = audit_logger or AuditLogger()

    if looks_like_expression(text):
        result = evaluate(text, settings=settings, audit_logger=audit_logger)
    else:
        stripped = text.strip()
        value = parse_decimal_literal(stripped)
        if not stripped:
            result = EvaluationResult.failed(
                text, EvaluationError.malformed("No amount entered")
            )
        elif value is None:
            result = EvaluationResult.failed(text, _plain_amount_error(stripped))
        else:
            result = EvaluationResult.ok(text, value)

    audit_logger.log_amount(result)
    return result


def describe_error(result: EvaluationResult) -> str:
    """
    Generate a user-friendly message for a rejected amount.

    This is what we show on the retry prompt.
    """
    if result.is_ok:
        return f"Amount: {result.value}"

    reason = _FRIENDLY_MESSAGES[result.error.kind]
    if result.error.symbol:
        reason = f"{reason} {result.error.symbol!r}"
    return f"Invalid amount: {reason} in {result.expression!r}"
