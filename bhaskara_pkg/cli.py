from __future__ import annotations

import argparse
import json
import re
from typing import Any

from . import config
from .config import VERSION
from .display import DisplayQuadraticExpression
from .expression import QuadraticExpression
from .logging_config import get_logger
from .numeric import EXACT, FLOAT
from .types import (
    ComplexResult,
    ParseError,
    RealRootsResult,
    SingleRootResult,
    ValidationError,
)

logger = get_logger("cli")

GREETING = "Irei lhe ajudar a fazer equações de segundo grau..."
NOT_A_NUMBER = "Isto não é um número..."
ANOTHER_PROMPT = "Deseja saber o valor de outra equação de segundo grau? (S/N): "


def parse_scalar(text: str, exact: bool = False) -> Any:
    """Parse one coefficient typed by the user.

    Raises:
        ValueError: if ``text`` is not a number
    """
    text = text.strip()
    if not text:
        raise ValueError("empty input")
    if exact:
        try:
            return EXACT.from_scalar(text)
        except (TypeError, ZeroDivisionError) as e:
            # sympy reports "abc" as TypeError and "1/0" as ZeroDivisionError
            raise ValueError(str(e)) from e
    return float(text)


def parse_coefficients(text: str, exact: bool = False) -> tuple[Any, Any, Any]:
    """Parse ``"A B C"`` (spaces, commas or semicolons) into three coefficients.

    Raises:
        ParseError: if there are not exactly three numbers
    """
    parts = [p for p in re.split(r"[\s,;]+", text.strip()) if p]
    if len(parts) != 3:
        raise ParseError(
            f"Expected three coefficients 'A B C', got {len(parts)}",
            code="BAD_COEFFICIENTS",
        )
    try:
        a, b, c = (parse_scalar(p, exact) for p in parts)
    except ValueError as e:
        raise ParseError(
            f"Coefficients must be numbers: {text!r}", code="BAD_COEFFICIENTS"
        ) from e
    return a, b, c


def request_scalar(label: str, exact: bool = False) -> Any:
    """Prompt for one coefficient until the user types a number."""
    while True:
        raw = input(f"Valor de ({label}): ")
        try:
            return parse_scalar(raw, exact)
        except ValueError:
            logger.debug("Rejected input %r for %s", raw, label)
            print(NOT_A_NUMBER)


def request_yes_no(prompt: str) -> bool:
    response = input(prompt).strip()
    return response.lower() == config.AFFIRMATIVE_TOKEN.lower()


def solve_and_print(
    a: Any,
    b: Any,
    c: Any,
    variable: str | None = None,
    exact: bool = False,
    output_format: str = "human",
) -> bool:
    """Solve one expression and print its roots.

    Returns:
        False if the coefficients did not describe a quadratic
    """
    if output_format == "json":
        from .api import solve_quadratic

        solution = solve_quadratic(a, b, c, variable=variable, exact=exact)
        print(json.dumps(solution.to_dict(), ensure_ascii=False))
        return solution.ok

    expr = QuadraticExpression.from_scalars(a, b, c, EXACT if exact else FLOAT)
    display_expr = DisplayQuadraticExpression(expr, variable)

    try:
        result = expr.get_roots()
    except ValidationError as e:
        if e.code == "NOT_QUADRATIC":
            print(f"{display_expr} não é uma equação de segundo grau: {e}")
        else:
            print(f"{display_expr} não pode ser resolvida: {e}")
        return False

    if isinstance(result, SingleRootResult):
        print(f"{display_expr} possui uma raiz: {result.root}")
    elif isinstance(result, RealRootsResult):
        print(f"{display_expr} possui duas raizes: {result.roots}")
    elif isinstance(result, ComplexResult):
        roots = result.expression.get_roots()
        print(f"{display_expr} possui as seguintes raizes complexas: {roots}")
    return True


def repl_loop(
    variable: str | None = None, exact: bool = False, output_format: str = "human"
) -> None:
    """Ask for coefficients, print the roots, repeat while the user says yes."""
    print(GREETING)
    while True:
        try:
            a = request_scalar("a", exact)
            b = request_scalar("b", exact)
            c = request_scalar("c", exact)
            solve_and_print(a, b, c, variable, exact, output_format)
            if not request_yes_no(ANOTHER_PROMPT):
                break
        except (EOFError, KeyboardInterrupt):
            print()
            break


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Bhaskara health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        from .api import solve_quadratic

        result = solve_quadratic(1, -3, 2)
        if result.ok and result.roots == ["2", "1"]:
            print("[OK] Real roots work")
            checks_passed += 1
        else:
            print(f"[FAIL] Real roots check failed: {result}")
            checks_failed += 1

        result = solve_quadratic(1, 0, 1)
        if result.ok and result.roots == ["0+1i", "0-1i"]:
            print("[OK] Complex roots work")
            checks_passed += 1
        else:
            print(f"[FAIL] Complex roots check failed: {result}")
            checks_failed += 1

        result = solve_quadratic(1, 0, -2, exact=True)
        if result.ok and result.roots == ["√(2)", "-√(2)"]:
            print("[OK] Exact roots work")
            checks_passed += 1
        else:
            print(f"[FAIL] Exact roots check failed: {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Solving check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Health check complete: {checks_passed} passed, {checks_failed} failed")
    return 0 if checks_failed == 0 else 1


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Bhaskara CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="bhaskara")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Solve one expression given as 'A B C' and exit (non-interactive)",
        dest="eval_coefficients",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--variable", type=str, help="Variable symbol shown in the expression"
    )
    parser.add_argument(
        "--exact",
        action="store_true",
        help="Read coefficients as exact rationals and keep roots exact",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        help="Treat |delta| <= TOLERANCE as zero (default: exact comparison)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (default: WARNING or BHASKARA_LOG_LEVEL)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # CLI flags override module-level configuration
    if args.variable:
        config.VARIABLE_SYMBOL = args.variable
    if args.tolerance is not None and args.tolerance >= 0:
        config.DELTA_TOLERANCE = float(args.tolerance)
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    exact = args.exact or config.EXACT_MODE

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_coefficients:
        try:
            a, b, c = parse_coefficients(args.eval_coefficients, exact)
        except ParseError as e:
            if args.format == "json":
                print(json.dumps({"ok": False, "error": e.message, "error_code": e.code}))
            else:
                print(f"Error: {e}")
            return 1
        ok = solve_and_print(a, b, c, exact=exact, output_format=args.format)
        return 0 if ok else 1

    repl_loop(exact=exact, output_format=args.format)
    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main_entry())
