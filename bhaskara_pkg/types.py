"""Root types, result variants and error classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union

from .display import display_roots, display_single_root

if TYPE_CHECKING:
    from .expression import QuadraticExpression

T = TypeVar("T")


@dataclass(frozen=True)
class QuadraticRoots(Generic[T]):
    """Both roots of an expression: ``first`` from +√delta, ``second`` from -√delta."""

    first: T
    second: T

    def __iter__(self):
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return display_roots(self)


@dataclass(frozen=True)
class SingleRoot(Generic[T]):
    """The repeated root of an expression whose discriminant is zero."""

    value: T

    def __str__(self) -> str:
        return display_single_root(self)


@dataclass(frozen=True)
class SingleRootResult(Generic[T]):
    root: SingleRoot[T]


@dataclass(frozen=True)
class RealRootsResult(Generic[T]):
    roots: QuadraticRoots[T]


@dataclass(frozen=True)
class ComplexResult:
    """Negative discriminant: the expression re-expressed over complex coefficients.

    The expression is not solved yet; pass it to ``solver.get_complex_roots``.
    """

    expression: QuadraticExpression


RealQuadraticRootResult = Union[SingleRootResult, RealRootsResult, ComplexResult]


@dataclass
class QuadraticSolution:
    """Result of solving a quadratic through the public API."""

    ok: bool
    result_type: str | None = None  # "single", "real", "complex"
    expression: str | None = None
    delta: str | None = None
    roots: list[str] | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result_type is not None:
            result_dict["type"] = self.result_type
        if self.expression is not None:
            result_dict["expression"] = self.expression
        if self.delta is not None:
            result_dict["delta"] = self.delta
        if self.roots is not None:
            result_dict["roots"] = self.roots
        if self.error is not None:
            result_dict["error"] = self.error
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"QuadraticSolution(ok=False, error={self.error!r})"
        return (
            f"QuadraticSolution(ok=True, result_type={self.result_type!r}, "
            f"expression={self.expression!r}, roots={self.roots!r})"
        )


class ValidationError(Exception):
    """Raised when coefficients do not describe a solvable quadratic."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when user text cannot be read as coefficients."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class SolverError(Exception):
    """Raised when an expression reaches a solver that cannot handle its kind."""

    def __init__(self, message: str, code: str = "SOLVER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
