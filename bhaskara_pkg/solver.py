"""Root classification and solving.

- ``get_real_roots``: discriminant-based case analysis for real kinds
- ``get_complex_roots``: both roots of a complex-kind expression
- ``solve``: both steps chained, returning the roots to display

Raises ``ValidationError`` with code ``NOT_QUADRATIC`` when ``a`` is zero,
``NON_FINITE`` when a coefficient is nan or infinite and ``OVERFLOW``
when the discriminant does not fit the coefficient kind.
"""

from __future__ import annotations

from typing import Union

from . import config
from .expression import QuadraticExpression, SolvingVariant
from .logging_config import get_logger
from .types import (
    ComplexResult,
    QuadraticRoots,
    RealQuadraticRootResult,
    RealRootsResult,
    SingleRoot,
    SingleRootResult,
    SolverError,
    ValidationError,
)

logger = get_logger("solver")


def validate_expression(expr: QuadraticExpression) -> None:
    """Reject expressions the quadratic formula cannot solve.

    Raises:
        ValidationError: ``NON_FINITE`` or ``NOT_QUADRATIC``
    """
    kind = expr.kind
    for name, value in zip("abc", expr.coefficients()):
        if not kind.is_finite(value):
            raise ValidationError(
                f"Coefficient {name} must be a finite number, got {value}",
                code="NON_FINITE",
            )
    if kind.is_zero(expr.a):
        logger.warning("Rejected degenerate expression %r", expr)
        raise ValidationError(
            "Coefficient a must not be zero: the expression is not quadratic",
            code="NOT_QUADRATIC",
        )


def checked_delta(expr: QuadraticExpression):
    """The discriminant of ``expr``, rejected when it overflows the kind.

    Raises:
        ValidationError: ``OVERFLOW`` when b^2 - 4ac is not finite
    """
    delta = expr.delta()
    if not expr.kind.is_finite(delta):
        logger.warning("Discriminant of %r overflowed to %s", expr, delta)
        raise ValidationError(
            f"The discriminant b^2 - 4ac is too large to compute (got {delta})",
            code="OVERFLOW",
        )
    return delta


def get_real_roots(
    expr: QuadraticExpression, tolerance: float | None = None
) -> RealQuadraticRootResult:
    """Classify a real-kind expression by the sign of its discriminant.

    Args:
        expr: Expression over a real kind
        tolerance: |delta| at or below this counts as zero
            (default: config.DELTA_TOLERANCE; 0.0 compares exactly)

    Returns:
        ``RealRootsResult`` for delta > 0, ``SingleRootResult`` for
        delta == 0, ``ComplexResult`` (unsolved) for delta < 0
    """
    kind = expr.kind
    if kind.is_complex:
        raise SolverError(
            f"Expression over {kind.name} has no real classification; "
            "use get_complex_roots",
            code="COMPLEX_KIND",
        )
    validate_expression(expr)
    if tolerance is None:
        tolerance = config.DELTA_TOLERANCE

    delta = checked_delta(expr)
    if kind.is_zero(delta, tolerance):
        logger.debug("delta=%s: single root", delta)
        if tolerance > 0:
            # A residual delta inside the tolerance is dropped, it may be negative
            return SingleRootResult(
                SingleRoot(-expr.b / (kind.from_scalar(2) * expr.a))
            )
        # Both branches coincide when delta is exactly zero
        return SingleRootResult(
            SingleRoot(expr.get_single_root_unchecked(SolvingVariant.POSITIVE_PART))
        )
    if kind.is_positive(delta):
        logger.debug("delta=%s: two real roots", delta)
        return RealRootsResult(expr.get_all_roots_unchecked())
    logger.debug("delta=%s: complex roots", delta)
    return ComplexResult(expr.to_complex())


def get_complex_roots(expr: QuadraticExpression) -> QuadraticRoots:
    """Both roots of a complex-kind expression; the square root is principal."""
    if not expr.kind.is_complex:
        expr = expr.to_complex()
    validate_expression(expr)
    checked_delta(expr)
    return expr.get_all_roots_unchecked()


def solve(
    expr: QuadraticExpression, tolerance: float | None = None
) -> Union[SingleRoot, QuadraticRoots]:
    """Classify ``expr`` and solve the complex case if it comes up."""
    if expr.kind.is_complex:
        return get_complex_roots(expr)
    result = get_real_roots(expr, tolerance)
    if isinstance(result, SingleRootResult):
        return result.root
    if isinstance(result, RealRootsResult):
        return result.roots
    return get_complex_roots(result.expression)
