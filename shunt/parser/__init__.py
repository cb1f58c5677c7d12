"""
Shunt Parser Package

This package provides arithmetic expression evaluation in three stages:
tokenization, infix-to-postfix conversion (shunting-yard) and postfix
evaluation.
"""

from .context import Context
from .converter import Converter, infix_to_postfix
from .evaluator import Evaluator, evaluate_postfix
from .expression import InfixExpression, PostfixExpression, evaluate, evaluate_with_variables
from .functions import Function
from .operators import Associativity, BinaryOperator, UnaryOperator
from .tokenizer import Token, TokenType, Tokenizer, tokenize

__all__ = [
    "Context",
    "Converter",
    "infix_to_postfix",
    "Evaluator",
    "evaluate_postfix",
    "InfixExpression",
    "PostfixExpression",
    "evaluate",
    "evaluate_with_variables",
    "Function",
    "Associativity",
    "BinaryOperator",
    "UnaryOperator",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
]
