"""Text rendering of expressions and roots.

Expressions render as ``+1x^2-2x+3``: every non-negative coefficient
(zero included) gets an explicit ``+``, negatives keep their own ``-``.
Roots render as ``(r)`` or ``(r1, r2)``.
"""

from __future__ import annotations

import math
import re
from typing import Any

import sympy as sp

from . import config
from .numeric import RealNumeric


def _format_real(value: Any, precision: int | None) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "0"  # also folds -0.0
    if precision:
        return "{:.{}g}".format(value, int(precision))
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _format_exact(value: sp.Basic) -> str:
    text = str(value).replace("sqrt(", "√(").replace("*I", "i")
    return re.sub(r"\bI\b", "i", text)


def format_number(val: Any, precision: int | None = None) -> str:
    """Format one coefficient or root value.

    Args:
        val: float, int, complex or SymPy number
        precision: Significant digits (default: config.OUTPUT_PRECISION,
            None prints the shortest exact representation)

    Returns:
        ``2`` for 2.0, ``0.5`` for 0.5, ``1-2i`` for (1-2j), ``√(2)`` for sqrt(2)
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    if isinstance(val, sp.Basic):
        return _format_exact(val)
    if isinstance(val, complex):
        imag = val.imag
        sign = "-" if imag < 0 else "+"
        return f"{_format_real(val.real, precision)}{sign}{_format_real(abs(imag), precision)}i"
    return _format_real(val, precision)


def n_with_symbol(n: RealNumeric) -> str:
    """Prefix non-negative values with ``+``; negatives already carry ``-``."""
    if n >= 0:
        return f"+{format_number(n)}"
    return format_number(n)


class DisplayQuadraticExpression:
    """Renders a real-valued expression with a caller-chosen variable symbol."""

    def __init__(self, expr: Any, variable: str | None = None):
        self.expr = expr
        self.variable = variable if variable is not None else config.VARIABLE_SYMBOL

    def display_part(self, n: Any) -> str:
        return f"{n_with_symbol(n)}{self.variable}"

    def __str__(self) -> str:
        return (
            f"{self.display_part(self.expr.a)}^2"
            f"{self.display_part(self.expr.b)}"
            f"{n_with_symbol(self.expr.c)}"
        )


def display_expression(expr: Any, variable: str | None = None) -> str:
    return str(DisplayQuadraticExpression(expr, variable))


def display_single_root(root: Any) -> str:
    return f"({format_number(root.value)})"


def display_roots(roots: Any) -> str:
    return f"({format_number(roots.first)}, {format_number(roots.second)})"
