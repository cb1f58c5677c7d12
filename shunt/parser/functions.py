"""
Single-argument real functions available in expressions.

Each function has a name, an evaluator and, where the mathematical domain
is restricted, a domain check applied before evaluation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..core.errors import DomainError, LexError


def _not_negative(arg: float) -> bool:
    return arg >= 0.0


def _positive(arg: float) -> bool:
    return arg > 0.0


def _unit_interval(arg: float) -> bool:
    return -1.0 <= arg <= 1.0


def _tan_defined(arg: float) -> bool:
    # Exact remainder test; only catches arguments that land on pi/2 + k*pi
    # bit for bit.
    return math.fmod(arg - math.pi / 2, math.pi) != 0.0


def _acosh(arg: float) -> float:
    # Outside [1, inf) there is no real value
    return math.acosh(arg) if arg >= 1.0 else math.nan


def _atanh(arg: float) -> float:
    if arg == 1.0:
        return math.inf
    if arg == -1.0:
        return -math.inf
    return math.atanh(arg) if -1.0 < arg < 1.0 else math.nan


def _exp(arg: float) -> float:
    try:
        return math.exp(arg)
    except OverflowError:
        return math.inf


def _sinh(arg: float) -> float:
    try:
        return math.sinh(arg)
    except OverflowError:
        return math.copysign(math.inf, arg)


def _cosh(arg: float) -> float:
    try:
        return math.cosh(arg)
    except OverflowError:
        return math.inf


@dataclass(frozen=True)
class FunctionConfig:
    """Configuration for a function."""

    name: str
    evaluator: Callable[[float], float]
    domain: Callable[[float], bool] | None = None
    domain_message: str | None = None


class Function(Enum):
    """Closed set of named functions, keyed by their name."""

    ABS = "abs"
    SQRT = "sqrt"
    CBRT = "cbrt"
    EXP = "exp"
    LN = "ln"
    LOG10 = "log10"
    LOG2 = "log2"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"

    @classmethod
    def from_string(cls, name: str) -> "Function":
        """
        Look up a function by name.

        Raises:
            LexError: If no function has this name
        """
        try:
            return cls(name)
        except ValueError:
            raise LexError(
                "Unknown function string", details={"word": name}
            ) from None

    @classmethod
    def is_fun(cls, name: str) -> bool:
        return name in _FUNCTION_NAMES

    @property
    def config(self) -> FunctionConfig:
        return FUNCTIONS[self]

    def apply(self, arg: float) -> float:
        """
        Apply the function to its argument.

        Raises:
            DomainError: If the argument is outside the function's domain
        """
        config = FUNCTIONS[self]
        if config.domain is not None and not config.domain(arg):
            raise DomainError(
                config.domain_message, details={"function": self.value, "argument": arg}
            )
        try:
            return config.evaluator(arg)
        except ValueError:
            # math raises on infinite arguments to periodic functions
            return math.nan


def _positive_log(name: str, evaluator: Callable[[float], float]) -> FunctionConfig:
    return FunctionConfig(
        name,
        evaluator,
        domain=_positive,
        domain_message=f"Argument of {name} function is negative or null",
    )


def _unit_trig(name: str, evaluator: Callable[[float], float]) -> FunctionConfig:
    return FunctionConfig(
        name,
        evaluator,
        domain=_unit_interval,
        domain_message=f"Argument of {name} function is not containing in [-1, 1]",
    )


FUNCTIONS: dict[Function, FunctionConfig] = {
    Function.ABS: FunctionConfig("abs", abs),
    Function.SQRT: FunctionConfig(
        "sqrt",
        math.sqrt,
        domain=_not_negative,
        domain_message="Argument of sqrt function is negative",
    ),
    Function.CBRT: FunctionConfig("cbrt", math.cbrt),
    Function.EXP: FunctionConfig("exp", _exp),
    Function.LN: _positive_log("ln", math.log),
    Function.LOG10: _positive_log("log10", math.log10),
    Function.LOG2: _positive_log("log2", math.log2),
    Function.SIN: FunctionConfig("sin", math.sin),
    Function.COS: FunctionConfig("cos", math.cos),
    Function.TAN: FunctionConfig(
        "tan",
        math.tan,
        domain=_tan_defined,
        domain_message="Argument of tan function is not valid",
    ),
    Function.ASIN: _unit_trig("asin", math.asin),
    Function.ACOS: _unit_trig("acos", math.acos),
    Function.ATAN: FunctionConfig("atan", math.atan),
    Function.SINH: FunctionConfig("sinh", _sinh),
    Function.COSH: FunctionConfig("cosh", _cosh),
    Function.TANH: FunctionConfig("tanh", math.tanh),
    Function.ASINH: FunctionConfig("asinh", math.asinh),
    Function.ACOSH: FunctionConfig("acosh", _acosh),
    Function.ATANH: FunctionConfig("atanh", _atanh),
}

_FUNCTION_NAMES = frozenset(func.value for func in Function)
