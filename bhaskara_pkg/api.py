"""Public API for Bhaskara - returns structured objects without side effects."""

from __future__ import annotations

from typing import Any

from .display import display_expression, format_number
from .expression import QuadraticExpression
from .numeric import EXACT, FLOAT
from .solver import get_complex_roots, get_real_roots
from .types import (
    ComplexResult,
    QuadraticSolution,
    RealRootsResult,
    SingleRootResult,
    ValidationError,
)


def solve_quadratic(
    a: Any,
    b: Any,
    c: Any,
    variable: str | None = None,
    exact: bool = False,
    tolerance: float | None = None,
) -> QuadraticSolution:
    """Solve ``a*x^2 + b*x + c`` and describe the result.

    Args:
        a, b, c: Coefficients (numbers or numeric strings)
        variable: Symbol used when rendering the expression
        exact: Read coefficients as exact rationals (roots stay surds)
        tolerance: Discriminant tolerance (default: config.DELTA_TOLERANCE)

    Returns:
        QuadraticSolution; invalid coefficients give ``ok=False``

    Example:
        >>> from bhaskara_pkg.api import solve_quadratic
        >>> solve_quadratic(1, -3, 2).roots
        ['2', '1']
        >>> solve_quadratic(1, 2, 1).result_type
        'single'
    """
    kind = EXACT if exact else FLOAT
    try:
        expr = QuadraticExpression.from_scalars(a, b, c, kind)
    except (TypeError, ValueError, ZeroDivisionError) as e:
        return QuadraticSolution(ok=False, error=str(e), error_code="PARSE_ERROR")

    try:
        result = get_real_roots(expr, tolerance)
    except ValidationError as e:
        return QuadraticSolution(ok=False, error=e.message, error_code=e.code)

    if isinstance(result, SingleRootResult):
        result_type = "single"
        roots = [result.root.value]
    elif isinstance(result, RealRootsResult):
        result_type = "real"
        roots = list(result.roots)
    elif isinstance(result, ComplexResult):
        result_type = "complex"
        roots = list(get_complex_roots(result.expression))
    else:
        raise TypeError(f"Unexpected root result {result!r}")

    return QuadraticSolution(
        ok=True,
        result_type=result_type,
        expression=display_expression(expr, variable),
        delta=format_number(expr.delta()),
        roots=[format_number(r) for r in roots],
    )
