"""Centralized configuration for Bhaskara.

This module defines:
- The variable symbol used when displaying expressions
- The discriminant tolerance used by the root classifier
- The affirmative token of the "solve another?" question
- Output precision for displayed numbers
- Whether coefficients are read as exact rationals
- The default logging level

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with BHASKARA_)
"""

import os

try:
    import importlib.metadata

    VERSION = importlib.metadata.version("bhaskara")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Display configuration
VARIABLE_SYMBOL = os.getenv("BHASKARA_VARIABLE_SYMBOL", "x")
_precision = os.getenv("BHASKARA_OUTPUT_PRECISION", "")
OUTPUT_PRECISION = int(_precision) if _precision else None  # None: shortest repr

# Solver configuration
DELTA_TOLERANCE = float(
    os.getenv("BHASKARA_DELTA_TOLERANCE", "0.0")
)  # |delta| <= tolerance counts as zero; 0.0 means exact comparison
EXACT_MODE = os.getenv("BHASKARA_EXACT_MODE", "false").lower() == "true"

# Logging
LOG_LEVEL = os.getenv("BHASKARA_LOG_LEVEL", "WARNING")

# Interactive loop
AFFIRMATIVE_TOKEN = os.getenv("BHASKARA_AFFIRMATIVE_TOKEN", "s")
