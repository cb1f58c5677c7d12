"""
Tokenizer for arithmetic expressions.

This module scans expression text into a flat sequence of tokens. It handles
numbers, constants, variables, functions, operators and parentheses.

The only context-sensitive decision is unary vs. binary for an operator
glyph: an operator is unary when it is the first token of the expression or
directly follows a left parenthesis, and binary everywhere else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, Union

from ..core.errors import ExpressionSyntaxError, LexError
from .context import Context
from .functions import Function
from .operators import OPERATOR_GLYPHS, BinaryOperator, UnaryOperator


class TokenType(Enum):
    """Token types for arithmetic expressions."""

    # Literals
    NUMBER = auto()
    CONSTANT = auto()

    # Operators
    BINARY_OPERATOR = auto()
    UNARY_OPERATOR = auto()
    FUNCTION = auto()

    # Parentheses
    LPAREN = auto()  # (
    RPAREN = auto()  # )


TokenValue = Union[float, BinaryOperator, UnaryOperator, Function, None]


@dataclass(frozen=True)
class Token:
    """
    Represents a single token in the expression.

    Attributes:
        type: The token type
        value: Numeric value for NUMBER/CONSTANT, the operator or function
            kind for operators and functions, None for parentheses
        pos: Position in the source string (for error reporting); not part
            of token equality
    """

    type: TokenType
    value: TokenValue = None
    pos: int = field(default=0, compare=False)

    @classmethod
    def number(cls, value: float, pos: int = 0) -> "Token":
        return cls(TokenType.NUMBER, float(value), pos)

    @classmethod
    def constant(cls, value: float, pos: int = 0) -> "Token":
        return cls(TokenType.CONSTANT, float(value), pos)

    @classmethod
    def binary(cls, op: BinaryOperator | str, pos: int = 0) -> "Token":
        if isinstance(op, str):
            op = BinaryOperator.from_char(op)
        return cls(TokenType.BINARY_OPERATOR, op, pos)

    @classmethod
    def unary(cls, op: UnaryOperator | str, pos: int = 0) -> "Token":
        if isinstance(op, str):
            op = UnaryOperator.from_char(op)
        return cls(TokenType.UNARY_OPERATOR, op, pos)

    @classmethod
    def function(cls, func: Function | str, pos: int = 0) -> "Token":
        if isinstance(func, str):
            func = Function.from_string(func)
        return cls(TokenType.FUNCTION, func, pos)

    @classmethod
    def lparen(cls, pos: int = 0) -> "Token":
        return cls(TokenType.LPAREN, None, pos)

    @classmethod
    def rparen(cls, pos: int = 0) -> "Token":
        return cls(TokenType.RPAREN, None, pos)

    @property
    def is_operand(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.CONSTANT)

    @property
    def symbol(self) -> str:
        """Source-like text for this token."""
        if self.type in (TokenType.NUMBER, TokenType.CONSTANT):
            return repr(self.value)
        if self.type in (TokenType.BINARY_OPERATOR, TokenType.UNARY_OPERATOR, TokenType.FUNCTION):
            return self.value.value
        return "(" if self.type == TokenType.LPAREN else ")"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.symbol!r}, pos={self.pos})"


class Tokenizer:
    """
    Tokenizes arithmetic expressions against a context.

    The tokenizer handles:
    - Numbers (digits with at most one decimal point)
    - Constants, functions and variables (resolved through the context)
    - Operators + - * / ^ (unary or binary by position)
    - Parentheses
    """

    def __init__(self, context: Context | None = None):
        """
        Initialize tokenizer with optional context.

        Args:
            context: Naming environment for words (defaults to Numeric)
        """
        self.context = context or Context.numeric()

    def tokenize(self, expression: str) -> list[Token]:
        """
        Tokenize an expression.

        Args:
            expression: The expression to tokenize

        Returns:
            List of tokens

        Raises:
            LexError: On an unknown character, word or operator
            ExpressionSyntaxError: On a malformed number literal
        """
        return list(self.iter_tokens(expression))

    def iter_tokens(self, expression: str) -> Iterator[Token]:
        """
        Yield the tokens of an expression one at a time.

        The first unrecoverable condition raises and ends the iteration.
        """
        pos = 0
        length = len(expression)
        previous: Token | None = None

        while pos < length:
            char = expression[pos]

            if char.isspace():
                pos += 1
                continue

            if _is_digit(char):
                token, pos = self._read_number(expression, pos)
            elif char in OPERATOR_GLYPHS:
                if previous is None or previous.type == TokenType.LPAREN:
                    token = Token.unary(char, pos)
                else:
                    token = Token.binary(char, pos)
                pos += 1
            elif char == "(":
                token = Token.lparen(pos)
                pos += 1
            elif char == ")":
                token = Token.rparen(pos)
                pos += 1
            elif char.isalpha() or char == "_":
                token, pos = self._read_word(expression, pos)
            else:
                raise LexError(
                    f"Invalid character at position {pos}: '{char}'",
                    details={"char": char, "pos": pos},
                )

            previous = token
            yield token

    def _read_number(self, expression: str, start: int) -> tuple[Token, int]:
        """Consume a maximal run of digits and dots and parse it."""
        end = start
        while end < len(expression) and (_is_digit(expression[end]) or expression[end] == "."):
            end += 1

        literal = expression[start:end]
        if literal.count(".") > 1:
            raise ExpressionSyntaxError(
                f"Invalid number literal '{literal}'",
                details={"literal": literal, "pos": start},
            )
        try:
            value = float(literal)
        except ValueError:
            raise ExpressionSyntaxError(
                f"Invalid number literal '{literal}'",
                details={"literal": literal, "pos": start},
            ) from None

        return Token.number(value, start), end

    def _read_word(self, expression: str, start: int) -> tuple[Token, int]:
        """Consume a maximal alphanumeric/underscore run and resolve it."""
        end = start
        while end < len(expression) and (expression[end].isalnum() or expression[end] == "_"):
            end += 1

        word = expression[start:end]
        resolved = self.context.resolve_word(word)

        if isinstance(resolved, Function):
            return Token.function(resolved, start), end
        return Token.constant(resolved, start), end


def tokenize(expression: str, context: Context | None = None) -> list[Token]:
    """Tokenize an expression with a fresh tokenizer."""
    return Tokenizer(context).tokenize(expression)


def _is_digit(char: str) -> bool:
    # str.isdigit() also admits superscripts and non-ASCII digits
    return "0" <= char <= "9"
