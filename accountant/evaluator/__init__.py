"""Amount expression evaluator package."""

from accountant.evaluator.converter import PRECEDENCE, to_postfix
from accountant.evaluator.engine import evaluate
from accountant.evaluator.postfix import divide, evaluate_postfix
from accountant.evaluator.tokenizer import (
    iter_lexemes,
    parse_decimal_literal,
    tokenize,
)

__all__ = [
    "PRECEDENCE",
    "divide",
    "evaluate",
    "evaluate_postfix",
    "iter_lexemes",
    "parse_decimal_literal",
    "to_postfix",
    "tokenize",
]
