"""Tests for expression and root rendering."""

import pytest
import sympy as sp

from bhaskara_pkg import config
from bhaskara_pkg.display import (
    DisplayQuadraticExpression,
    display_expression,
    format_number,
    n_with_symbol,
)
from bhaskara_pkg.expression import QuadraticExpression
from bhaskara_pkg.types import QuadraticRoots, SingleRoot


@pytest.mark.parametrize(
    "value,expected",
    [
        (2.0, "2"),
        (-3.0, "-3"),
        (0.5, "0.5"),
        (-0.0, "0"),
        (1e-20, "1e-20"),
        (1e200, "1e+200"),
        (-1e16, "-1e+16"),
        (7, "7"),
        (complex(0, 1), "0+1i"),
        (complex(1.5, -2), "1.5-2i"),
        (complex(-0.0, -0.0), "0+0i"),
        (float("nan"), "NaN"),
        (sp.sqrt(2), "√(2)"),
        (-sp.sqrt(2), "-√(2)"),
        (sp.Rational(-1, 2), "-1/2"),
        (sp.I, "i"),
        (-sp.I, "-i"),
    ],
)
def test_format_number(value, expected) -> None:
    assert format_number(value) == expected


def test_format_number_precision(monkeypatch) -> None:
    assert format_number(3.14159265, precision=3) == "3.14"
    monkeypatch.setattr(config, "OUTPUT_PRECISION", 4)
    assert format_number(2.0 / 3.0) == "0.6667"


def test_sign_prefix() -> None:
    assert n_with_symbol(1.0) == "+1"
    assert n_with_symbol(0.0) == "+0"
    assert n_with_symbol(-2.5) == "-2.5"
    assert n_with_symbol(sp.Rational(1, 3)) == "+1/3"


def test_expression_renders_constant_term_c() -> None:
    expr = QuadraticExpression(1.0, -2.0, 3.0)
    assert display_expression(expr, "x") == "+1x^2-2x+3"


def test_expression_with_zero_and_negative_terms() -> None:
    assert display_expression(QuadraticExpression(-1.0, 0.0, -4.5), "t") == "-1t^2+0t-4.5"


def test_display_part_and_default_variable(monkeypatch) -> None:
    monkeypatch.setattr(config, "VARIABLE_SYMBOL", "y")
    display = DisplayQuadraticExpression(QuadraticExpression(2.0, 3.0, 1.0))
    assert display.display_part(-7.0) == "-7y"
    assert str(display) == "+2y^2+3y+1"


def test_expression_with_complex_coefficients_is_not_displayable() -> None:
    with pytest.raises(TypeError):
        display_expression(QuadraticExpression(1.0, 0.0, 1.0).to_complex(), "x")


def test_roots_display() -> None:
    assert str(SingleRoot(2.0)) == "(2)"
    assert str(QuadraticRoots(1.0, -3.0)) == "(1, -3)"
    assert str(QuadraticRoots(1j, -1j)) == "(0+1i, 0-1i)"
