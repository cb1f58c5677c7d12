"""
Shunt - arithmetic expression evaluation.

    >>> from shunt import evaluate, evaluate_with_variables
    >>> evaluate("sqrt(9.0)")
    3.0
    >>> evaluate_with_variables("2 * x", {"x": 1.5})
    3.0
"""

from .core.errors import (
    DomainError,
    EmptyExpressionError,
    ExpressionError,
    ExpressionSyntaxError,
    LexError,
)
from .parser import (
    Context,
    InfixExpression,
    PostfixExpression,
    evaluate,
    evaluate_with_variables,
)

__version__ = "1.0.0"

__all__ = [
    "evaluate",
    "evaluate_with_variables",
    "Context",
    "InfixExpression",
    "PostfixExpression",
    "ExpressionError",
    "LexError",
    "ExpressionSyntaxError",
    "EmptyExpressionError",
    "DomainError",
]
