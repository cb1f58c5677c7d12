"""
Context for expression tokenization.

A context is the naming environment a word in an expression is resolved
against:
- Constants and their values (pi, e, c)
- Available functions
- Caller-supplied variable bindings

Words are resolved in that order: a constant shadows a function of the same
name, and both shadow a variable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from ..core.errors import LexError
from .functions import Function

# Speed of light in vacuum, m/s
SPEED_OF_LIGHT = 299792458.0

DEFAULT_CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "c": SPEED_OF_LIGHT,
}


@dataclass
class Context:
    """
    Naming environment for expressions.

    Attributes:
        name: Context name (e.g., "Numeric")
        constants: Named constants and their values
        functions: Available functions by name
        variables: Variable bindings (name -> value)
    """

    name: str
    constants: dict[str, float] = field(default_factory=dict)
    functions: dict[str, Function] = field(default_factory=dict)
    variables: dict[str, float] = field(default_factory=dict)

    @classmethod
    def numeric(cls) -> "Context":
        """
        Create the standard Numeric context.

        All constants and functions, no variables.
        """
        return cls(
            name="Numeric",
            constants=dict(DEFAULT_CONSTANTS),
            functions={func.value: func for func in Function},
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Context":
        """
        Load a context from a YAML file.

        The file may define ``name``, a ``variables`` mapping and extra
        ``constants``; both mappings must hold numeric values.

        Args:
            path: Path to YAML configuration file

        Returns:
            Context instance based on the Numeric context
        """
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Context file {path} must contain a mapping")

        context = cls.numeric()
        context.name = data.get("name", context.name)
        context.constants.update(_numeric_mapping(data.get("constants", {}), "constants"))
        context.variables.update(_numeric_mapping(data.get("variables", {}), "variables"))
        return context

    def with_variables(self, variables: Mapping[str, float]) -> "Context":
        """
        Return a copy of this context with additional variable bindings.

        Bindings are a plain lookup table: a key that can never be spelled
        as a word in an expression is carried along but never matched.
        """
        return Context(
            name=self.name,
            constants=dict(self.constants),
            functions=dict(self.functions),
            variables={
                **self.variables,
                **{name: float(value) for name, value in variables.items()},
            },
        )

    def is_constant(self, name: str) -> bool:
        """Check if name is a constant in this context."""
        return name in self.constants

    def is_function(self, name: str) -> bool:
        """Check if name is a function in this context."""
        return name in self.functions

    def is_variable(self, name: str) -> bool:
        """Check if name is a bound variable in this context."""
        return name in self.variables

    def resolve_word(self, word: str) -> float | Function:
        """
        Resolve a word to a value or a function.

        Returns:
            The constant or variable value, or the Function

        Raises:
            LexError: If the word is not known in this context
        """
        if word in self.constants:
            return self.constants[word]
        if word in self.functions:
            return self.functions[word]
        if word in self.variables:
            return self.variables[word]
        raise LexError(f"Unknown word '{word}'", details={"word": word})


def _numeric_mapping(values: Any, label: str) -> dict[str, float]:
    """Validate a name -> number mapping and coerce values to float."""
    if not isinstance(values, Mapping):
        raise ValueError(f"{label} must be a mapping of names to numbers")

    result: dict[str, float] = {}
    for name, value in values.items():
        if not isinstance(name, str) or not _is_word(name):
            raise ValueError(f"Invalid name in {label}: {name!r}")
        # bool is an int subclass but never a meaningful binding
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Value of '{name}' in {label} is not a number: {value!r}")
        result[name] = float(value)
    return result


def _is_word(name: str) -> bool:
    return bool(name) and all(ch.isalnum() or ch == "_" for ch in name) and not name[0].isdigit()
