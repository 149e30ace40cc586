"""
Expression Tokenizer

Splits a raw amount expression into tokens.

The input is cut at every delimiter in DELIMITERS. Delimiters are kept
as lexemes of their own, spaces and empty pieces are dropped, and every
remaining lexeme must be a decimal literal, an operator or a paren.
"""

import re
from decimal import Decimal
from typing import Iterator, Optional

from accountant.models.expression import EvaluationError, Token, TokenType


OPERATORS = frozenset("+-*/")
DELIMITERS = "+-*/() "

# Base-10 only: optional sign, digits, optional fraction. No exponent, no NaN.
DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

_SPLITTER = re.compile("([" + re.escape(DELIMITERS) + "])")


def iter_lexemes(expression: str) -> Iterator[str]:
    """
    Lazily yield the non-blank lexemes of an expression.

    Only the ASCII space is a delimiter; other whitespace around a
    lexeme is stripped.
    """
    for piece in _SPLITTER.split(expression):
        piece = piece.strip()
        if piece:
            yield piece


def parse_decimal_literal(text: str) -> Optional[Decimal]:
    """Return the exact value of a decimal literal, or None if it isn't one."""
    if DECIMAL_LITERAL.fullmatch(text) is None:
        return None
    return Decimal(text)


def classify(lexeme: str) -> Optional[Token]:
    """Turn one lexeme into a token, or None if it is not recognized."""
    if lexeme in OPERATORS:
        return Token(type=TokenType.OPERATOR, text=lexeme)
    if lexeme == "(":
        return Token(type=TokenType.LEFT_PAREN, text=lexeme)
    if lexeme == ")":
        return Token(type=TokenType.RIGHT_PAREN, text=lexeme)

    value = parse_decimal_literal(lexeme)
    if value is not None:
        return Token(type=TokenType.NUMBER, text=lexeme, value=value)
    return None


def tokenize(expression: str) -> tuple[list[Token], Optional[EvaluationError]]:
    """
    Tokenize an expression.

    Returns: (tokens, error). On error the token list is empty.
    """
    tokens = []
    for lexeme in iter_lexemes(expression):
        token = classify(lexeme)
        if token is None:
            return [], EvaluationError.unknown_symbol(lexeme)
        tokens.append(token)
    return tokens, None
