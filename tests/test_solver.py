"""Unit tests for root classification and the complex solver."""

import cmath
import itertools
import math
import unittest

import sympy as sp

from bhaskara_pkg import config
from bhaskara_pkg.expression import QuadraticExpression
from bhaskara_pkg.numeric import COMPLEX, EXACT, EXACT_COMPLEX
from bhaskara_pkg.solver import get_complex_roots, get_real_roots, solve
from bhaskara_pkg.types import (
    ComplexResult,
    QuadraticRoots,
    RealRootsResult,
    SingleRoot,
    SingleRootResult,
    SolverError,
    ValidationError,
)

COEFFICIENT_GRID = [-7.5, -2.0, -0.3, 0.0, 0.25, 1.0, 3.0, 10.0]


class TestClassification(unittest.TestCase):
    """One expression for each sign of the discriminant."""

    def test_positive_delta_gives_two_real_roots(self):
        result = get_real_roots(QuadraticExpression(1.0, -3.0, 2.0))
        self.assertIsInstance(result, RealRootsResult)
        self.assertEqual(result.roots, QuadraticRoots(2.0, 1.0))

    def test_zero_delta_gives_single_root(self):
        result = get_real_roots(QuadraticExpression(1.0, 2.0, 1.0))
        self.assertIsInstance(result, SingleRootResult)
        self.assertEqual(result.root, SingleRoot(-1.0))

    def test_negative_delta_hands_back_complex_expression(self):
        expr = QuadraticExpression(1.0, 0.0, 1.0)
        result = get_real_roots(expr)
        self.assertIsInstance(result, ComplexResult)
        self.assertIs(result.expression.kind, COMPLEX)
        self.assertEqual(result.expression.coefficients(), (1 + 0j, 0j, 1 + 0j))
        roots = get_complex_roots(result.expression)
        self.assertEqual(roots.first, 1j)
        self.assertEqual(roots.second, -1j)

    def test_get_roots_dispatches_on_kind(self):
        self.assertIsInstance(
            QuadraticExpression(1.0, -3.0, 2.0).get_roots(), RealRootsResult
        )
        roots = QuadraticExpression(1 + 0j, 0j, 1 + 0j).get_roots()
        self.assertIsInstance(roots, QuadraticRoots)

    def test_solve_chains_the_complex_step(self):
        self.assertEqual(solve(QuadraticExpression(1.0, 2.0, 1.0)), SingleRoot(-1.0))
        self.assertEqual(
            solve(QuadraticExpression(1.0, -3.0, 2.0)), QuadraticRoots(2.0, 1.0)
        )
        roots = solve(QuadraticExpression(1.0, 0.0, 1.0))
        self.assertEqual((roots.first, roots.second), (1j, -1j))

    def test_real_classifier_refuses_complex_kind(self):
        with self.assertRaises(SolverError) as ctx:
            get_real_roots(QuadraticExpression(1.0, 0.0, 1.0).to_complex())
        self.assertEqual(ctx.exception.code, "COMPLEX_KIND")


class TestDegenerateInput(unittest.TestCase):
    def test_zero_leading_coefficient_is_rejected(self):
        with self.assertRaises(ValidationError) as ctx:
            get_real_roots(QuadraticExpression(0.0, 2.0, 1.0))
        self.assertEqual(ctx.exception.code, "NOT_QUADRATIC")

    def test_zero_leading_coefficient_is_rejected_for_complex(self):
        with self.assertRaises(ValidationError) as ctx:
            get_complex_roots(QuadraticExpression(0j, 1 + 0j, 1 + 0j))
        self.assertEqual(ctx.exception.code, "NOT_QUADRATIC")

    def test_overflowing_discriminant_is_rejected(self):
        # b * b no longer fits a double; every coefficient is finite
        for coefficients in [(1.0, 1e200, 1.0), (1e300, 1.0, -1e300), (-1e308, 0.0, 1e308)]:
            with self.subTest(coefficients=coefficients):
                with self.assertRaises(ValidationError) as ctx:
                    get_real_roots(QuadraticExpression(*coefficients))
                self.assertEqual(ctx.exception.code, "OVERFLOW")

    def test_overflowing_discriminant_is_rejected_for_complex(self):
        with self.assertRaises(ValidationError) as ctx:
            get_complex_roots(QuadraticExpression(1 + 0j, 1e200 + 0j, 1 + 0j))
        self.assertEqual(ctx.exception.code, "OVERFLOW")

    def test_large_finite_coefficients_below_overflow_are_solved(self):
        result = get_real_roots(QuadraticExpression(1.0, 1e150, 1.0))
        self.assertIsInstance(result, RealRootsResult)
        first, second = result.roots
        self.assertTrue(math.isfinite(second))
        self.assertLess(second, -1e149)

    def test_exact_kind_does_not_overflow(self):
        expr = QuadraticExpression.from_scalars(1, 10**200, 1, EXACT)
        self.assertIsInstance(get_real_roots(expr), RealRootsResult)

    def test_non_finite_coefficients_are_rejected(self):
        for bad in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(bad=bad):
                with self.assertRaises(ValidationError) as ctx:
                    get_real_roots(QuadraticExpression(1.0, bad, 1.0))
                self.assertEqual(ctx.exception.code, "NON_FINITE")


class TestTolerance(unittest.TestCase):
    def setUp(self):
        # 0.2**2 rounds just above 4 * 0.01
        self.expr = QuadraticExpression(1.0, 0.2, 0.01)
        delta = self.expr.delta()
        self.assertNotEqual(delta, 0.0)
        self.assertLess(abs(delta), 1e-12)

    def test_exact_comparison_by_default(self):
        self.assertEqual(config.DELTA_TOLERANCE, 0.0)
        self.assertNotIsInstance(get_real_roots(self.expr), SingleRootResult)

    def test_tolerance_folds_tiny_delta_into_single_root(self):
        result = get_real_roots(self.expr, tolerance=1e-12)
        self.assertIsInstance(result, SingleRootResult)
        self.assertAlmostEqual(result.root.value, -0.1)

    def test_tolerance_from_config(self):
        original = config.DELTA_TOLERANCE
        config.DELTA_TOLERANCE = 1e-12
        try:
            self.assertIsInstance(get_real_roots(self.expr), SingleRootResult)
        finally:
            config.DELTA_TOLERANCE = original


class TestRootProperties(unittest.TestCase):
    """Roots satisfy the expression and follow the formula branches."""

    def test_every_case_over_a_grid(self):
        for a, b, c in itertools.product(COEFFICIENT_GRID, repeat=3):
            if a == 0:
                continue
            with self.subTest(a=a, b=b, c=c):
                expr = QuadraticExpression(a, b, c)
                delta = expr.delta()
                result = get_real_roots(expr)
                scale = max(abs(a), abs(b), abs(c), 1.0) ** 2
                if delta > 0:
                    self.assertIsInstance(result, RealRootsResult)
                    first, second = result.roots
                    self.assertEqual(first, (-b + math.sqrt(delta)) / (2 * a))
                    self.assertEqual(second, (-b - math.sqrt(delta)) / (2 * a))
                    for r in (first, second):
                        self.assertLess(abs(expr.evaluate(r)), 1e-9 * scale)
                elif delta == 0:
                    self.assertIsInstance(result, SingleRootResult)
                    self.assertEqual(result.root.value, -b / (2 * a))
                    self.assertLess(abs(expr.evaluate(result.root.value)), 1e-9 * scale)
                else:
                    self.assertIsInstance(result, ComplexResult)
                    z1, z2 = get_complex_roots(result.expression)
                    self.assertTrue(cmath.isclose(z1, z2.conjugate(), abs_tol=1e-12))
                    self.assertNotEqual(z1.imag, 0.0)
                    for z in (z1, z2):
                        self.assertLess(
                            abs(result.expression.evaluate(z)), 1e-9 * scale
                        )


class TestExactSolving(unittest.TestCase):
    def test_irrational_roots_stay_exact(self):
        expr = QuadraticExpression.from_scalars(1, 0, -2, EXACT)
        result = get_real_roots(expr)
        self.assertIsInstance(result, RealRootsResult)
        self.assertEqual(result.roots.first, sp.sqrt(2))
        self.assertEqual(result.roots.second, -sp.sqrt(2))

    def test_rational_single_root(self):
        expr = QuadraticExpression.from_scalars(4, 4, 1, EXACT)
        result = get_real_roots(expr)
        self.assertIsInstance(result, SingleRootResult)
        self.assertEqual(result.root.value, sp.Rational(-1, 2))

    def test_exact_complex_roots(self):
        expr = QuadraticExpression.from_scalars(1, 0, 1, EXACT)
        result = get_real_roots(expr)
        self.assertIsInstance(result, ComplexResult)
        self.assertIs(result.expression.kind, EXACT_COMPLEX)
        roots = get_complex_roots(result.expression)
        self.assertEqual((roots.first, roots.second), (sp.I, -sp.I))

    def test_decimal_input_hits_the_zero_branch_exactly(self):
        # As floats 0.2**2 != 4 * 0.01; as rationals they are equal
        expr = QuadraticExpression.from_scalars(1.0, 0.2, 0.01, EXACT)
        result = get_real_roots(expr)
        self.assertIsInstance(result, SingleRootResult)
        self.assertEqual(result.root.value, sp.Rational(-1, 10))


if __name__ == "__main__":
    unittest.main()
