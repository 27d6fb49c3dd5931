#!/usr/bin/env python
"""
Run both calculators with the configured inputs.

Inputs come from settings (CALC_TOOL_COVER_PRICE, CALC_TOOL_NUMBER_OF_COPIES,
CALC_TOOL_DOLLAR_AMOUNT, a .env file, or the built-in defaults).

Usage:
    python scripts/run_calculators.py [--quiet]
"""
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from calc_tool.cli import run_configured


def main():
    verbose = '--quiet' not in sys.argv[1:]

    if verbose:
        print("=" * 60)
        print("CALC TOOL")
        print("=" * 60)
        print()

    status = run_configured(verbose=verbose)

    if status != 0:
        print("\n❌ CALCULATION FAILED (see errors above)", file=sys.stderr)
    sys.exit(status)


if __name__ == "__main__":
    main()
