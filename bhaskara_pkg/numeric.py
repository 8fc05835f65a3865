"""Numeric kinds usable as quadratic coefficients.

A coefficient value must support the arithmetic in ``Numeric``. What a
plain Python number cannot tell us (its zero, its square root, how to
widen it to complex and back) is provided by a ``NumericKind``:

- ``FLOAT``: IEEE doubles (Python ``float``)
- ``COMPLEX``: Python ``complex``, principal square root
- ``EXACT``: SymPy rationals; roots stay exact surds
- ``EXACT_COMPLEX``: SymPy values over the Gaussian extension (``sympy.I``)

Everything else in the package is written against this contract only.
"""

from __future__ import annotations

import cmath
import math
from abc import ABC, abstractmethod
from typing import Any, Protocol

import sympy as sp


class Numeric(Protocol):
    """Operations a coefficient value must support."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __pow__(self, other: Any) -> Any: ...

    def __eq__(self, other: object) -> bool: ...


class RealNumeric(Numeric, Protocol):
    """A coefficient value of a real kind, which is also ordered."""

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...

    def __ge__(self, other: Any) -> bool: ...


class NumericKind(ABC):
    """Capabilities of one concrete numeric representation."""

    name = "abstract"
    is_complex = False

    @property
    def zero(self) -> Numeric:
        return self.from_scalar(0)

    @abstractmethod
    def from_scalar(self, value: Any) -> Numeric:
        """Convert a scalar (or a value of another kind) into this kind."""

    @abstractmethod
    def sqrt(self, value: Numeric) -> Numeric:
        """Raise ``value`` to the power 1/2."""

    @abstractmethod
    def real_part(self, value: Numeric) -> Numeric:
        """Project ``value`` onto the real kind of this family."""

    @abstractmethod
    def is_finite(self, value: Numeric) -> bool: ...

    @property
    @abstractmethod
    def complex_kind(self) -> NumericKind: ...

    @property
    @abstractmethod
    def real_kind(self) -> NumericKind: ...

    def is_zero(self, value: Numeric, tolerance: float = 0.0) -> bool:
        if tolerance > 0:
            return bool(abs(value) <= tolerance)
        return bool(value == self.zero)

    def is_positive(self, value: RealNumeric) -> bool:
        if self.is_complex:
            raise TypeError(f"{self.name} values are not ordered")
        return bool(value > self.zero)

    def __repr__(self) -> str:
        return f"<NumericKind {self.name}>"


class FloatKind(NumericKind):
    name = "float"

    def from_scalar(self, value: Any) -> float:
        if isinstance(value, complex):
            raise TypeError(f"cannot convert complex {value!r} to float")
        return float(value)

    def sqrt(self, value: float) -> float:
        return math.sqrt(value)

    def real_part(self, value: Any) -> float:
        return float(value)

    def is_finite(self, value: float) -> bool:
        return math.isfinite(value)

    @property
    def complex_kind(self) -> NumericKind:
        return COMPLEX

    @property
    def real_kind(self) -> NumericKind:
        return self


class ComplexKind(NumericKind):
    name = "complex"
    is_complex = True

    def from_scalar(self, value: Any) -> complex:
        # Promotion keeps the value as real part with a zero imaginary part
        return complex(value)

    def sqrt(self, value: complex) -> complex:
        return cmath.sqrt(value)

    def real_part(self, value: Any) -> float:
        return complex(value).real

    def is_finite(self, value: complex) -> bool:
        return cmath.isfinite(value)

    @property
    def complex_kind(self) -> NumericKind:
        return self

    @property
    def real_kind(self) -> NumericKind:
        return FLOAT


class ExactKind(NumericKind):
    name = "exact"

    def from_scalar(self, value: Any) -> sp.Expr:
        if isinstance(value, sp.Basic):
            return value
        if isinstance(value, complex):
            return self.from_scalar(value.real) + self.from_scalar(value.imag) * sp.I
        if isinstance(value, float):
            # repr keeps the decimal the user typed: 0.1 -> 1/10
            return sp.Rational(repr(value))
        return sp.Rational(value)

    def sqrt(self, value: sp.Expr) -> sp.Expr:
        return sp.sqrt(value)

    def real_part(self, value: Any) -> sp.Expr:
        return sp.re(self.from_scalar(value))

    def is_finite(self, value: sp.Expr) -> bool:
        return bool(sp.sympify(value).is_finite)

    def is_zero(self, value: sp.Expr, tolerance: float = 0.0) -> bool:
        if tolerance > 0:
            return bool(sp.Abs(value) <= tolerance)
        return sp.simplify(value) == 0

    @property
    def complex_kind(self) -> NumericKind:
        return EXACT_COMPLEX

    @property
    def real_kind(self) -> NumericKind:
        return EXACT


class ExactComplexKind(ExactKind):
    name = "exact-complex"
    is_complex = True


FLOAT = FloatKind()
COMPLEX = ComplexKind()
EXACT = ExactKind()
EXACT_COMPLEX = ExactComplexKind()


def kind_of(*values: Any) -> NumericKind:
    """Infer the narrowest kind able to hold every value.

    Examples:
        >>> kind_of(1.0, 2, 3.5)
        <NumericKind float>
        >>> kind_of(1.0, 2j, 0)
        <NumericKind complex>
    """
    if any(isinstance(v, sp.Basic) for v in values):
        has_imaginary = any(
            isinstance(v, complex) or sp.sympify(v).is_real is False for v in values
        )
        return EXACT_COMPLEX if has_imaginary else EXACT
    if any(isinstance(v, complex) for v in values):
        return COMPLEX
    return FLOAT
