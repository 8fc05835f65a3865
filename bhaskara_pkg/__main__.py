"""Main entry point for running bhaskara_pkg as a module.

This allows running Bhaskara with:
    python -m bhaskara_pkg
    python -m bhaskara_pkg --health-check
    python -m bhaskara_pkg -e "1 -3 2"

This is equivalent to running:
    python -m bhaskara_pkg.cli
    python bhaskara.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
