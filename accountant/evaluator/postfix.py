"""
Postfix Evaluation

Reduces a postfix token sequence to a single exact Decimal.

CRITICAL: Amounts are money. Addition, subtraction and multiplication are
exact, and division is the ONLY place rounding happens: the quotient is
rounded once, directly to `scale` fractional digits, with the configured
rounding mode. No binary floating point is involved anywhere.
"""

import decimal
from decimal import Decimal
from typing import Iterable, Optional

from accountant.models.expression import EvaluationError, Token, TokenType


# Unlimited precision: + - * of finite decimals never round in this context.
EXACT_CONTEXT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation, decimal.Overflow, decimal.DivisionByZero],
)


def divide(a: Decimal, b: Decimal, scale: int, rounding: str) -> Decimal:
    """
    Divide with a single rounding step to `scale` fractional digits.

    The quotient is truncated one digit past `scale` using integer
    arithmetic, then a trailing 1 is appended when the division was
    inexact. That keeps the rounding decision identical to rounding the
    true quotient, including for exact ties.
    """
    a_num, a_den = a.as_integer_ratio()
    b_num, b_den = b.as_integer_ratio()

    numerator = a_num * b_den * 10 ** (scale + 1)
    denominator = a_den * b_num
    quotient, remainder = divmod(abs(numerator), abs(denominator))
    digits = quotient * 10 + (1 if remainder else 0)
    negative = digits != 0 and (numerator < 0) != (denominator < 0)

    # String construction is exact regardless of context precision
    truncated = Decimal(f"{'-' if negative else ''}{digits}E-{scale + 2}")
    with decimal.localcontext(EXACT_CONTEXT):
        return truncated.quantize(Decimal(1).scaleb(-scale), rounding=rounding)


def apply_operator(
    operator: str,
    a: Decimal,
    b: Decimal,
    scale: int,
    rounding: str,
) -> tuple[Optional[Decimal], Optional[EvaluationError]]:
    """Apply a binary operator as `a <op> b`."""
    if operator == "/":
        if b == 0:
            return None, EvaluationError.division_by_zero()
        return divide(a, b, scale, rounding), None

    with decimal.localcontext(EXACT_CONTEXT):
        if operator == "+":
            return a + b, None
        if operator == "-":
            return a - b, None
        if operator == "*":
            return a * b, None

    raise ValueError(f"Unsupported operator: {operator!r}")


def evaluate_postfix(
    postfix: Iterable[Token],
    scale: int = 10,
    rounding: str = decimal.ROUND_HALF_UP,
) -> tuple[Optional[Decimal], Optional[EvaluationError]]:
    """
    Evaluate a postfix sequence with an operand stack.

    Returns: (value, error). Exactly one of them is None.
    """
    stack: list[Decimal] = []

    for token in postfix:
        if token.type == TokenType.NUMBER:
            stack.append(token.value)
            continue

        if token.type != TokenType.OPERATOR:
            raise ValueError(f"Unexpected token in postfix sequence: {token.text!r}")

        if len(stack) < 2:
            return None, EvaluationError.malformed(
                f"Operator {token.text!r} is missing an operand"
            )

        # First pop is the right-hand operand
        b = stack.pop()
        a = stack.pop()
        result, error = apply_operator(token.text, a, b, scale, rounding)
        if error is not None:
            return None, error
        stack.append(result)

    if not stack:
        return None, EvaluationError.malformed("Expression is empty")
    if len(stack) > 1:
        return None, EvaluationError.malformed(
            "Expression has numbers with no operator between them"
        )
    return stack[0], None
