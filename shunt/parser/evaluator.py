"""
Postfix evaluation.

Runs a postfix token sequence on an operand stack. Domain errors (division
by zero, sqrt of a negative, ...) are only detected here.
"""

from __future__ import annotations

from typing import Iterable

from ..core.errors import ExpressionSyntaxError
from .tokenizer import Token, TokenType


class Evaluator:
    """Stack machine for postfix token sequences."""

    def evaluate(self, tokens: Iterable[Token]) -> float:
        """
        Evaluate a postfix token sequence.

        Args:
            tokens: Postfix tokens

        Returns:
            The value left in the first operand stack slot

        Raises:
            ExpressionSyntaxError: On a missing operand or a token that has
                no place in postfix order
            DomainError: On division by zero or an out-of-domain argument
        """
        stack: list[float] = []

        for token in tokens:
            if token.is_operand:
                stack.append(token.value)

            elif token.type == TokenType.BINARY_OPERATOR:
                if not stack:
                    raise ExpressionSyntaxError(
                        "Missing right operand to apply binary operation",
                        details={"operator": token.value.value, "pos": token.pos},
                    )
                right = stack.pop()
                if not stack:
                    raise ExpressionSyntaxError(
                        "Missing left operand to apply binary operation",
                        details={"operator": token.value.value, "pos": token.pos},
                    )
                left = stack.pop()
                stack.append(token.value.apply(left, right))

            elif token.type == TokenType.UNARY_OPERATOR:
                if not stack:
                    raise ExpressionSyntaxError(
                        "Missing operand to apply unary operation",
                        details={"operator": token.value.value, "pos": token.pos},
                    )
                stack.append(token.value.apply(stack.pop()))

            elif token.type == TokenType.FUNCTION:
                if not stack:
                    raise ExpressionSyntaxError(
                        "Missing argument to apply function",
                        details={"function": token.value.value, "pos": token.pos},
                    )
                stack.append(token.value.apply(stack.pop()))

            else:
                raise ExpressionSyntaxError(
                    "Token non-accepted for evaluation of postfix expression",
                    details={"token": token.symbol, "pos": token.pos},
                )

        if not stack:
            raise ExpressionSyntaxError("Expression has no value to evaluate")

        # Extra residual values are not an error; the first slot is the result
        return stack[0]


def evaluate_postfix(tokens: Iterable[Token]) -> float:
    """Evaluate a postfix token sequence."""
    return Evaluator().evaluate(tokens)
