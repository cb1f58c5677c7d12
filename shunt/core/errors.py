"""
Expression evaluation exceptions.

Every failure in the tokenize -> convert -> evaluate pipeline is raised as an
``ExpressionError`` subclass. The first error aborts the whole pipeline.
"""

from typing import Any, Dict, Optional


class ExpressionError(Exception):
    """Base exception for expression evaluation errors"""

    kind = "error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the API and the CLI"""
        return {
            "type": self.__class__.__name__,
            "kind": self.kind,
            "message": self.message,
            "details": self.details,
        }


class LexError(ExpressionError):
    """Raised for an unrecognized character or word"""

    kind = "lex"


class ExpressionSyntaxError(ExpressionError):
    """Raised for malformed literals, unbalanced parentheses and missing operands"""

    kind = "syntax"


class EmptyExpressionError(ExpressionSyntaxError):
    """Raised when there is nothing to evaluate"""

    def __init__(self):
        super().__init__("The expression to evaluate is empty")


class DomainError(ExpressionError):
    """Raised for division by zero or an out-of-domain function argument"""

    kind = "domain"
