"""
Shared pytest fixtures for the shunt test suite.

This module provides:
- Tokenizer, converter and evaluator instances
- A helper to run text through the whole pipeline stage by stage
- A YAML variables file for context and CLI tests
"""

import pytest

from shunt.parser import Context, Converter, Evaluator, Tokenizer


@pytest.fixture
def tokenizer() -> Tokenizer:
    """Tokenizer over the Numeric context."""
    return Tokenizer(Context.numeric())


@pytest.fixture
def converter() -> Converter:
    return Converter()


@pytest.fixture
def evaluator() -> Evaluator:
    return Evaluator()


@pytest.fixture
def to_postfix(tokenizer, converter):
    """Tokenize and convert an expression, returning the postfix tokens."""
    def _to_postfix(expression: str):
        return converter.convert(tokenizer.tokenize(expression))
    return _to_postfix


@pytest.fixture
def variables_file(tmp_path):
    """YAML file binding x and y and adding a constant g."""
    path = tmp_path / "variables.yaml"
    path.write_text(
        "name: Physics\n"
        "variables:\n"
        "  x: 2\n"
        "  y: 0.5\n"
        "constants:\n"
        "  g: 9.81\n"
    )
    return path
