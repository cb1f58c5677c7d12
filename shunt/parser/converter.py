"""
Infix to postfix conversion (shunting-yard).

Operands go straight to the output. Operators, functions and left
parentheses wait on a pending stack until something of lower binding power
forces them out:

- a unary operator on the stack always pops before an incoming binary one
- a binary operator pops before an incoming one of lower precedence, or of
  equal precedence when the incoming operator is left-associative
- a right parenthesis pops back to its left parenthesis, then pops the
  function that owns the group, if any
"""

from __future__ import annotations

from typing import Iterable, Iterator

from ..core.errors import ExpressionSyntaxError
from .operators import BinaryOperator
from .tokenizer import Token, TokenType


def last_operator_is_primary(stack_top: Token, incoming: BinaryOperator) -> bool:
    """
    Check whether the operator on top of the stack must be emitted before
    the incoming binary operator is pushed.
    """
    if stack_top.type == TokenType.UNARY_OPERATOR:
        return True

    if stack_top.type == TokenType.BINARY_OPERATOR:
        top_precedence = stack_top.value.precedence
        incoming_precedence = incoming.precedence
        if top_precedence > incoming_precedence:
            return True
        return top_precedence == incoming_precedence and incoming.is_left_associative

    # Functions and left parentheses act as barriers
    return False


class Converter:
    """
    Reorders an infix token sequence into postfix (Reverse Polish) order.

    A converter holds no state between calls; each conversion uses its own
    pending stack.
    """

    def convert(self, tokens: Iterable[Token]) -> list[Token]:
        """
        Convert an infix token sequence to postfix.

        Args:
            tokens: Infix tokens, in source order

        Returns:
            Postfix tokens

        Raises:
            ExpressionSyntaxError: If parentheses are unbalanced
        """
        return list(self.iter_postfix(tokens))

    def iter_postfix(self, tokens: Iterable[Token]) -> Iterator[Token]:
        """Yield postfix tokens as soon as each one is settled."""
        stack: list[Token] = []

        for token in tokens:
            if token.is_operand:
                yield token

            elif token.type == TokenType.BINARY_OPERATOR:
                while stack and last_operator_is_primary(stack[-1], token.value):
                    yield stack.pop()
                stack.append(token)

            elif token.type in (TokenType.UNARY_OPERATOR, TokenType.FUNCTION, TokenType.LPAREN):
                stack.append(token)

            elif token.type == TokenType.RPAREN:
                while stack and stack[-1].type != TokenType.LPAREN:
                    yield stack.pop()

                if not stack:
                    raise _mismatched(token)

                stack.pop()  # the matching (

                if stack and stack[-1].type == TokenType.FUNCTION:
                    yield stack.pop()

            else:  # pragma: no cover - TokenType is closed
                raise ExpressionSyntaxError(f"Unexpected token {token!r}")

        # An unclosed group anywhere on the stack is an error
        for pending in stack:
            if pending.type == TokenType.LPAREN:
                raise _mismatched(pending)

        while stack:
            yield stack.pop()


def _mismatched(token: Token) -> ExpressionSyntaxError:
    return ExpressionSyntaxError("Mismatched parenthesis", details={"pos": token.pos})


def infix_to_postfix(tokens: Iterable[Token]) -> list[Token]:
    """Convert an infix token sequence to postfix order."""
    return Converter().convert(tokens)
