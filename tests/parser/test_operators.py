"""Tests for operator and function tables."""

import math

import pytest

from shunt.core.errors import DomainError, LexError
from shunt.parser import Associativity, BinaryOperator, Function, UnaryOperator


class TestBinaryOperator:
    """Test binary operator metadata and application."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("+", BinaryOperator.PLUS),
            ("-", BinaryOperator.MINUS),
            ("*", BinaryOperator.MULTIPLY),
            ("/", BinaryOperator.DIVIDE),
            ("^", BinaryOperator.POWER),
        ],
    )
    def test_from_char(self, char, expected):
        assert BinaryOperator.from_char(char) is expected

    def test_from_unknown_char(self):
        with pytest.raises(LexError, match="Unknown operator characters"):
            BinaryOperator.from_char("%")

    def test_precedence_levels(self):
        assert BinaryOperator.PLUS.precedence == BinaryOperator.MINUS.precedence == 2
        assert BinaryOperator.MULTIPLY.precedence == BinaryOperator.DIVIDE.precedence == 3
        assert BinaryOperator.POWER.precedence == 4

    def test_only_power_is_right_associative(self):
        for op in BinaryOperator:
            expected = Associativity.RIGHT if op is BinaryOperator.POWER else Associativity.LEFT
            assert op.associativity is expected
        assert not BinaryOperator.POWER.is_left_associative

    @pytest.mark.parametrize(
        "op,left,right,expected",
        [
            (BinaryOperator.PLUS, 1.5, 2.0, 3.5),
            (BinaryOperator.MINUS, 1.5, 2.0, -0.5),
            (BinaryOperator.MULTIPLY, 1.5, 2.0, 3.0),
            (BinaryOperator.DIVIDE, 3.0, 2.0, 1.5),
            (BinaryOperator.POWER, 2.0, 10.0, 1024.0),
        ],
    )
    def test_apply(self, op, left, right, expected):
        assert op.apply(left, right) == pytest.approx(expected)

    def test_operand_order(self):
        """Test non-commutative operators apply left op right."""
        assert BinaryOperator.MINUS.apply(10.0, 4.0) == 6.0
        assert BinaryOperator.DIVIDE.apply(10.0, 4.0) == 2.5

    def test_division_by_zero(self):
        with pytest.raises(DomainError, match="Division by zero"):
            BinaryOperator.DIVIDE.apply(1.0, 0.0)

    def test_power_of_negative_base_with_fraction_is_nan(self):
        assert math.isnan(BinaryOperator.POWER.apply(-8.0, 1.0 / 3.0))

    def test_power_overflow_is_infinite(self):
        assert BinaryOperator.POWER.apply(10.0, 400.0) == math.inf
        assert BinaryOperator.POWER.apply(-10.0, 401.0) == -math.inf

    def test_zero_to_negative_power_is_infinite(self):
        assert BinaryOperator.POWER.apply(0.0, -1.0) == math.inf


class TestUnaryOperator:
    """Test unary operators."""

    def test_from_char(self):
        assert UnaryOperator.from_char("-") is UnaryOperator.MINUS
        assert UnaryOperator.from_char("+") is UnaryOperator.PLUS

    @pytest.mark.parametrize("char", ["*", "/", "^"])
    def test_no_unary_form(self, char):
        with pytest.raises(LexError):
            UnaryOperator.from_char(char)

    def test_apply(self):
        assert UnaryOperator.MINUS.apply(3.0) == -3.0
        assert UnaryOperator.PLUS.apply(3.0) == 3.0


class TestFunction:
    """Test function lookup, domains and application."""

    def test_from_string_covers_all_names(self):
        names = [
            "abs", "sqrt", "cbrt", "exp", "ln", "log10", "log2",
            "sin", "cos", "tan", "asin", "acos", "atan",
            "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
        ]
        assert [Function.from_string(name).value for name in names] == names
        assert all(Function.is_fun(name) for name in names)

    def test_unknown_function(self):
        assert not Function.is_fun("toto")
        with pytest.raises(LexError, match="Unknown function string"):
            Function.from_string("toto")

    @pytest.mark.parametrize(
        "func,arg,expected",
        [
            (Function.ABS, -2.5, 2.5),
            (Function.SQRT, 9.0, 3.0),
            (Function.CBRT, -27.0, -3.0),
            (Function.EXP, 1.0, math.e),
            (Function.LN, math.e, 1.0),
            (Function.LOG10, 1000.0, 3.0),
            (Function.LOG2, 8.0, 3.0),
            (Function.SIN, math.pi / 2, 1.0),
            (Function.COS, 0.0, 1.0),
            (Function.TAN, math.pi / 4, 1.0),
            (Function.ASIN, 1.0, math.pi / 2),
            (Function.ACOS, 1.0, 0.0),
            (Function.ATAN, 1.0, math.pi / 4),
            (Function.SINH, 0.0, 0.0),
            (Function.COSH, 0.0, 1.0),
            (Function.TANH, 0.0, 0.0),
            (Function.ASINH, 0.0, 0.0),
            (Function.ACOSH, 1.0, 0.0),
            (Function.ATANH, 0.0, 0.0),
        ],
    )
    def test_apply(self, func, arg, expected):
        assert func.apply(arg) == pytest.approx(expected, abs=1e-12)

    @pytest.mark.parametrize(
        "func,arg,message",
        [
            (Function.SQRT, -1.0, "Argument of sqrt function is negative"),
            (Function.LN, 0.0, "Argument of ln function is negative or null"),
            (Function.LOG10, -1.0, "Argument of log10 function is negative or null"),
            (Function.LOG2, 0.0, "Argument of log2 function is negative or null"),
            (Function.ASIN, 1.5, "Argument of asin function is not containing in [-1, 1]"),
            (Function.ACOS, -1.5, "Argument of acos function is not containing in [-1, 1]"),
        ],
    )
    def test_domain_errors(self, func, arg, message):
        with pytest.raises(DomainError) as exc_info:
            func.apply(arg)
        assert exc_info.value.message == message
        assert exc_info.value.details["function"] == func.value

    def test_domain_boundaries_are_accepted(self):
        assert Function.SQRT.apply(0.0) == 0.0
        assert Function.ASIN.apply(-1.0) == pytest.approx(-math.pi / 2)
        assert Function.ACOS.apply(-1.0) == pytest.approx(math.pi)

    @pytest.mark.parametrize("arg,expected", [(64.0, 4.0), (-1000.0, -10.0), (27.0, 3.0), (0.0, 0.0)])
    def test_cbrt_of_exact_cubes(self, arg, expected):
        """Test exact cubes give exact roots, not approximations."""
        assert Function.CBRT.apply(arg) == expected

    def test_tan_pole(self):
        """Test tan rejects an argument landing exactly on pi/2."""
        with pytest.raises(DomainError, match="Argument of tan function is not valid"):
            Function.TAN.apply(math.pi / 2)

    def test_unconstrained_functions_do_not_raise(self):
        assert math.isnan(Function.ACOSH.apply(0.5))
        assert Function.ATANH.apply(1.0) == math.inf
        assert Function.EXP.apply(1000.0) == math.inf
        assert math.isnan(Function.SIN.apply(math.inf))
