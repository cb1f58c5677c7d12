"""
Operator tables for arithmetic expressions.

Binary operators carry a fixed precedence and associativity:

    +  -    precedence 2, left
    *  /    precedence 3, left
    ^       precedence 4, right

Unary operators (+, -) are never compared by precedence; the converter
always treats them as binding tighter than any binary operator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..core.errors import DomainError, LexError


class Associativity(Enum):
    """Operator associativity."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorConfig:
    """Configuration for a binary operator."""

    symbol: str
    precedence: int
    associativity: Associativity


class BinaryOperator(Enum):
    """Binary operators, keyed by their glyph."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    @classmethod
    def from_char(cls, char: str) -> "BinaryOperator":
        """
        Look up a binary operator by glyph.

        Raises:
            LexError: If the glyph is not a binary operator
        """
        try:
            return cls(char)
        except ValueError:
            raise LexError(
                "Unknown operator characters", details={"char": char}
            ) from None

    @classmethod
    def is_ops(cls, char: str) -> bool:
        return char in _BINARY_GLYPHS

    @property
    def config(self) -> OperatorConfig:
        return BINARY_OPERATORS[self]

    @property
    def precedence(self) -> int:
        return BINARY_OPERATORS[self].precedence

    @property
    def associativity(self) -> Associativity:
        return BINARY_OPERATORS[self].associativity

    @property
    def is_left_associative(self) -> bool:
        return self.associativity == Associativity.LEFT

    def apply(self, left: float, right: float) -> float:
        """
        Apply the operator to two operands.

        Raises:
            DomainError: On division by zero
        """
        if self is BinaryOperator.PLUS:
            return left + right
        elif self is BinaryOperator.MINUS:
            return left - right
        elif self is BinaryOperator.MULTIPLY:
            return left * right
        elif self is BinaryOperator.DIVIDE:
            if right == 0.0:
                raise DomainError(
                    "Division by zero", details={"left": left, "right": right}
                )
            return left / right
        # Power
        return _power(left, right)


class UnaryOperator(Enum):
    """Unary (sign) operators, keyed by their glyph."""

    PLUS = "+"
    MINUS = "-"

    @classmethod
    def from_char(cls, char: str) -> "UnaryOperator":
        """
        Look up a unary operator by glyph.

        Raises:
            LexError: If the glyph has no unary form (e.g. '*')
        """
        try:
            return cls(char)
        except ValueError:
            raise LexError(
                "Unknown operator characters", details={"char": char}
            ) from None

    @classmethod
    def is_ops(cls, char: str) -> bool:
        return char in _UNARY_GLYPHS

    def apply(self, operand: float) -> float:
        if self is UnaryOperator.MINUS:
            return -operand
        return operand


BINARY_OPERATORS: dict[BinaryOperator, OperatorConfig] = {
    BinaryOperator.PLUS: OperatorConfig("+", precedence=2, associativity=Associativity.LEFT),
    BinaryOperator.MINUS: OperatorConfig("-", precedence=2, associativity=Associativity.LEFT),
    BinaryOperator.MULTIPLY: OperatorConfig("*", precedence=3, associativity=Associativity.LEFT),
    BinaryOperator.DIVIDE: OperatorConfig("/", precedence=3, associativity=Associativity.LEFT),
    BinaryOperator.POWER: OperatorConfig("^", precedence=4, associativity=Associativity.RIGHT),
}

_BINARY_GLYPHS = frozenset(op.value for op in BinaryOperator)
_UNARY_GLYPHS = frozenset(op.value for op in UnaryOperator)

# Every glyph the tokenizer treats as an operator
OPERATOR_GLYPHS = _BINARY_GLYPHS | _UNARY_GLYPHS


def _power(base: float, exponent: float) -> float:
    """Real power with IEEE results where Python would raise or go complex."""
    try:
        result = base**exponent
    except OverflowError:
        if base < 0 and exponent.is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ZeroDivisionError:
        # 0 raised to a negative power
        return math.inf
    if isinstance(result, complex):
        # Negative base with a fractional exponent has no real value
        return math.nan
    return float(result)
