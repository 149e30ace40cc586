"""
Expression Evaluation Engine

Single entry point for turning an amount expression into a value:

    tokenize -> to_postfix -> evaluate_postfix

Each stage returns (output, error) and the engine stops at the first
error. Nothing is shared between calls, so evaluate() is safe to call
from any number of threads.
"""

from typing import Optional

from accountant.audit import AuditLogger
from accountant.config import EvaluatorSettings, get_settings
from accountant.evaluator.converter import to_postfix
from accountant.evaluator.postfix import evaluate_postfix
from accountant.evaluator.tokenizer import tokenize
from accountant.models.expression import EvaluationResult


def _run(expression: str, settings: EvaluatorSettings) -> EvaluationResult:
    tokens, error = tokenize(expression)
    if error is not None:
        return EvaluationResult.failed(expression, error)

    postfix, error = to_postfix(tokens)
    if error is not None:
        return EvaluationResult.failed(expression, error)

    value, error = evaluate_postfix(
        postfix,
        scale=settings.division_scale,
        rounding=settings.rounding,
    )
    if error is not None:
        return EvaluationResult.failed(expression, error)

    return EvaluationResult.ok(expression, value)


def evaluate(
    expression: str,
    settings: Optional[EvaluatorSettings] = None,
    audit_logger: Optional[AuditLogger] = None,
) -> EvaluationResult:
    """
    Evaluate an infix arithmetic expression exactly.

    Supports decimal numbers, + - * /, parentheses and spaces.
    Division results are rounded to `settings.division_scale`
    fractional digits.

    Args:
        expression: Text as entered by the user
        settings: Evaluator settings (defaults to the global settings)
        audit_logger: Where to log the outcome (defaults to a new AuditLogger)

    Returns:
        EvaluationResult holding either the value or the error
    """
    if settings is None:
        settings = get_settings().evaluator

    result = _run(expression, settings)

    (audit_logger or AuditLogger()).log_evaluation(result)
    return result
