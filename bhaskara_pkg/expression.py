"""Quadratic expressions and the raw quadratic formula."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from .numeric import NumericKind, kind_of
from .types import QuadraticRoots

T = TypeVar("T")


class SolvingVariant(Enum):
    """Which sign of the ± in the quadratic formula to take."""

    POSITIVE_PART = "+"
    NEGATIVE_PART = "-"

    def get_operation(self) -> Callable[[Any, Any], Any]:
        if self is SolvingVariant.POSITIVE_PART:
            return operator.add
        return operator.sub


@dataclass(frozen=True)
class QuadraticExpression(Generic[T]):
    """The expression ``a*x^2 + b*x + c``.

    ``kind`` is inferred from the coefficients when omitted. It is stored
    because an exact expression promoted to complex has coefficients that
    look real but must be solved as complex.
    """

    a: T
    b: T
    c: T
    kind: NumericKind = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.kind is None:
            object.__setattr__(self, "kind", kind_of(self.a, self.b, self.c))

    @classmethod
    def from_scalars(cls, a: Any, b: Any, c: Any, kind: NumericKind | None = None):
        """Build an expression, converting each scalar into ``kind``."""
        if kind is None:
            kind = kind_of(a, b, c)
        return cls(kind.from_scalar(a), kind.from_scalar(b), kind.from_scalar(c), kind)

    def coefficients(self) -> tuple[T, T, T]:
        return (self.a, self.b, self.c)

    def convert(self, kind: NumericKind) -> QuadraticExpression:
        """Return a new expression over ``kind``; this one is left untouched."""
        return QuadraticExpression.from_scalars(self.a, self.b, self.c, kind)

    def to_complex(self) -> QuadraticExpression:
        return self.convert(self.kind.complex_kind)

    def real_part(self) -> QuadraticExpression:
        real_kind = self.kind.real_kind
        return QuadraticExpression(
            self.kind.real_part(self.a),
            self.kind.real_part(self.b),
            self.kind.real_part(self.c),
            real_kind,
        )

    def delta(self) -> T:
        """The discriminant ``b^2 - 4ac``."""
        return self.b * self.b - self.kind.from_scalar(4) * self.a * self.c

    def get_single_root_unchecked(self, solving: SolvingVariant) -> T:
        """``(-b ± sqrt(delta)) / 2a`` for one branch.

        Neither the sign of delta nor ``a == 0`` is checked: a real kind
        fails on a negative delta and any kind fails on a zero ``a``.
        """
        two = self.kind.from_scalar(2)
        return solving.get_operation()(-self.b, self.kind.sqrt(self.delta())) / (
            two * self.a
        )

    def get_all_roots_unchecked(self) -> QuadraticRoots[T]:
        return QuadraticRoots(
            self.get_single_root_unchecked(SolvingVariant.POSITIVE_PART),
            self.get_single_root_unchecked(SolvingVariant.NEGATIVE_PART),
        )

    def get_roots(self):
        """Real kinds classify the roots, complex kinds solve directly.

        Returns:
            A ``RealQuadraticRootResult`` variant for real kinds, a
            ``QuadraticRoots`` of complex values for complex kinds.
        """
        from .solver import get_complex_roots, get_real_roots

        if self.kind.is_complex:
            return get_complex_roots(self)
        return get_real_roots(self)

    def evaluate(self, x: Any) -> Any:
        """Value of the expression at ``x``."""
        return (self.a * x + self.b) * x + self.c
