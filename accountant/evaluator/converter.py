"""
Infix to Postfix Conversion (shunting-yard)

Reorders infix tokens into postfix (Reverse Polish) order so that the
evaluator never has to think about precedence or parentheses.

All four operators are left-associative: an operator on the stack is
flushed before a new one of EQUAL or higher precedence is pushed, so
"10 - 2 - 3" becomes "10 2 - 3 -", i.e. (10 - 2) - 3.
"""

from typing import Iterable, Optional

from accountant.models.expression import EvaluationError, Token, TokenType


PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


def precedence(token: Token) -> int:
    return PRECEDENCE[token.text]


def to_postfix(tokens: Iterable[Token]) -> tuple[list[Token], Optional[EvaluationError]]:
    """
    Convert infix tokens to postfix order.

    The output contains only NUMBER and OPERATOR tokens.

    Returns: (postfix, error). On error the postfix list is empty.
    """
    output: list[Token] = []
    operators: list[Token] = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            while (
                operators
                and operators[-1].is_operator
                and precedence(operators[-1]) >= precedence(token)
            ):
                output.append(operators.pop())
            operators.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            operators.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while operators and operators[-1].type != TokenType.LEFT_PAREN:
                output.append(operators.pop())
            if not operators:
                return [], EvaluationError.unmatched_paren(
                    "Closing parenthesis without a matching '('"
                )
            operators.pop()

    while operators:
        top = operators.pop()
        if top.type == TokenType.LEFT_PAREN:
            return [], EvaluationError.unmatched_paren("Unclosed parenthesis '('")
        output.append(top)

    return output, None
