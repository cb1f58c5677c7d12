"""Core utilities package"""

from .config import settings, get_settings
from .logging import setup_logging, get_logger
from .errors import (
    ExpressionError,
    LexError,
    ExpressionSyntaxError,
    EmptyExpressionError,
    DomainError,
)

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "ExpressionError",
    "LexError",
    "ExpressionSyntaxError",
    "EmptyExpressionError",
    "DomainError",
]
