"""Bhaskara package: quadratic expressions, root classification, display and CLI."""

__all__ = [
    "api",
    "cli",
    "config",
    "display",
    "expression",
    "logging_config",
    "numeric",
    "solver",
    "types",
]

# Public API exports

__api_exports__ = [
    "solve_quadratic",
]
