"""
Expression objects and evaluation entry points.

    InfixExpression("1 + 2 * 3")     text -> infix tokens
        .to_postfix()                 infix -> postfix tokens
        .evaluate()                   postfix -> float

Each stage is materialized before the next one runs, so an unbalanced
parenthesis is always reported by the converter even when an earlier part
of the expression would fail to evaluate.
"""

from __future__ import annotations

from typing import Mapping

from ..core.errors import EmptyExpressionError
from ..core.logging import get_logger
from .context import Context
from .converter import Converter
from .evaluator import Evaluator
from .tokenizer import Token, Tokenizer

logger = get_logger(__name__)


class PostfixExpression:
    """A token sequence in postfix (Reverse Polish) order."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

    def evaluate(self) -> float:
        """Evaluate the postfix expression."""
        return Evaluator().evaluate(self.tokens)

    def to_string(self) -> str:
        """Render as space-separated RPN, e.g. ``3.0 4.0 2.0 * +``."""
        return " ".join(token.symbol for token in self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        return f"PostfixExpression({self.to_string()!r})"


class InfixExpression:
    """
    An expression in source (infix) order.

    Args:
        expression: Expression text
        context: Naming environment for words (defaults to Numeric)

    Raises:
        EmptyExpressionError: If the expression text is empty
        LexError: If the text contains an unknown character or word
    """

    def __init__(self, expression: str, context: Context | None = None):
        if len(expression) == 0:
            raise EmptyExpressionError()

        self.expression = expression
        self.context = context or Context.numeric()
        self.tokens = Tokenizer(self.context).tokenize(expression)

    def to_postfix(self) -> PostfixExpression:
        """Convert to postfix order."""
        return PostfixExpression(Converter().convert(self.tokens))

    def evaluate(self) -> float:
        """Convert to postfix and evaluate."""
        return self.to_postfix().evaluate()

    def __repr__(self) -> str:
        return f"InfixExpression({self.expression!r})"


def evaluate(expression: str) -> float:
    """
    Evaluate an arithmetic expression.

    Args:
        expression: Expression text, e.g. ``"3 + 4 * 2 / (1 - 5) ^ 2 ^ 3"``

    Returns:
        The numeric result

    Raises:
        ExpressionError: The first lex, syntax or domain error encountered
    """
    return _run(expression, Context.numeric())


def evaluate_with_variables(expression: str, variables: Mapping[str, float]) -> float:
    """
    Evaluate an arithmetic expression with variable substitution.

    Words that are neither constants nor functions are looked up in
    ``variables`` before being treated as unknown.

    Args:
        expression: Expression text, e.g. ``"x * sin(y)"``
        variables: Variable name -> value

    Returns:
        The numeric result

    Raises:
        ExpressionError: The first lex, syntax or domain error encountered
        ValueError: If a variable name or value is not valid
    """
    return _run(expression, Context.numeric().with_variables(variables))


def _run(expression: str, context: Context) -> float:
    infix = InfixExpression(expression, context)
    postfix = infix.to_postfix()
    result = postfix.evaluate()

    logger.debug(
        "Expression evaluated",
        extra_data={
            "expression": expression,
            "infix_tokens": len(infix.tokens),
            "postfix": postfix.to_string(),
            "result": result,
        },
    )
    return result
