"""
Expression Models for Personal Accountant

These models describe everything that flows through the amount
expression evaluator: lexical tokens, the errors a user can cause,
and the final result handed back to the caller.

DESIGN DECISION: Expected failures (a typo in an amount) are VALUES,
not exceptions. Every stage returns an EvaluationError instead of
raising, and the caller decides how to present it.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# TOKENS
# =============================================================================

class TokenType(str, Enum):
    """Lexical categories produced by the tokenizer."""
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token(BaseModel):
    """
    A single lexical token.

    NUMBER tokens carry their parsed exact value alongside the source text.
    Tokens never change once produced.
    """
    model_config = ConfigDict(frozen=True)

    type: TokenType
    text: str = Field(..., min_length=1)
    value: Optional[Decimal] = None

    @model_validator(mode='after')
    def validate_value(self) -> 'Token':
        """Only NUMBER tokens have a value, and they always have one."""
        if self.type == TokenType.NUMBER and self.value is None:
            raise ValueError("Number token requires a value")
        if self.type != TokenType.NUMBER and self.value is not None:
            raise ValueError("Only number tokens carry a value")
        return self

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    def __str__(self) -> str:
        return self.text


# =============================================================================
# ERRORS
# =============================================================================

class EvaluationErrorKind(str, Enum):
    """
    Every way an amount expression can fail.

    All of them are terminal: the evaluation stops and nothing
    partial is returned.
    """
    UNKNOWN_SYMBOL = "unknown_symbol"              # not a number, operator or paren
    UNMATCHED_PAREN = "unmatched_paren"            # ( or ) without a partner
    MALFORMED_EXPRESSION = "malformed_expression"  # operands and operators don't line up
    DIVISION_BY_ZERO = "division_by_zero"


class EvaluationError(BaseModel):
    """A single, user-caused evaluation failure."""
    model_config = ConfigDict(frozen=True)

    kind: EvaluationErrorKind = Field(
        ...,
        description="Category of the failure"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the failure"
    )
    symbol: Optional[str] = Field(
        default=None,
        description="Offending lexeme, for unknown symbols"
    )

    @classmethod
    def unknown_symbol(cls, symbol: str) -> 'EvaluationError':
        return cls(
            kind=EvaluationErrorKind.UNKNOWN_SYMBOL,
            message=f"Unknown symbol: {symbol!r}",
            symbol=symbol,
        )

    @classmethod
    def unmatched_paren(cls, message: str = "Unmatched parenthesis") -> 'EvaluationError':
        return cls(kind=EvaluationErrorKind.UNMATCHED_PAREN, message=message)

    @classmethod
    def malformed(cls, message: str = "Malformed expression") -> 'EvaluationError':
        return cls(kind=EvaluationErrorKind.MALFORMED_EXPRESSION, message=message)

    @classmethod
    def division_by_zero(cls) -> 'EvaluationError':
        return cls(kind=EvaluationErrorKind.DIVISION_BY_ZERO, message="Division by zero")


class ExpressionError(Exception):
    """
    Raised by EvaluationResult.unwrap() for callers that want exceptions.

    The evaluator itself never raises this.
    """

    def __init__(self, expression: str, error: EvaluationError):
        self.expression = expression
        self.error = error
        super().__init__(f"Invalid expression {expression!r}: {error.message}")


# =============================================================================
# RESULT
# =============================================================================

class EvaluationResult(BaseModel):
    """
    Outcome of evaluating one expression.

    Exactly one of `value` / `error` is set.
    """
    model_config = ConfigDict(frozen=True)

    expression: str = Field(
        ...,
        description="The text exactly as the user entered it"
    )
    value: Optional[Decimal] = Field(
        default=None,
        description="Exact result on success"
    )
    error: Optional[EvaluationError] = Field(
        default=None,
        description="Failure on error"
    )
    evaluated_at: datetime = Field(
        default_factory=datetime.utcnow
    )

    @model_validator(mode='after')
    def validate_outcome(self) -> 'EvaluationResult':
        """A result is either a value or an error, never both or neither."""
        if (self.value is None) == (self.error is None):
            raise ValueError("Result must have exactly one of value or error")
        return self

    @classmethod
    def ok(cls, expression: str, value: Decimal) -> 'EvaluationResult':
        return cls(expression=expression, value=value)

    @classmethod
    def failed(cls, expression: str, error: EvaluationError) -> 'EvaluationResult':
        return cls(expression=expression, error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[EvaluationErrorKind]:
        return self.error.kind if self.error else None

    def unwrap(self) -> Decimal:
        """Return the value, or raise ExpressionError."""
        if self.error is not None:
            raise ExpressionError(self.expression, self.error)
        return self.value
