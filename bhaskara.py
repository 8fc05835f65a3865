#!/usr/bin/env python3
"""
Bhaskara - Quadratic Equation Solver

Main entry point for the Bhaskara interactive solver. This file serves
as a thin wrapper that delegates all functionality to the bhaskara_pkg
package.

Usage:
    python bhaskara.py                      # Interactive loop
    python bhaskara.py -e "1 -3 2"          # Solve one expression
    python bhaskara.py --help               # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Bhaskara.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from bhaskara_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import bhaskara_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
