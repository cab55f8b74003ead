#!/usr/bin/env python3
"""
Allow running the suite as a module: python -m sfshop_e2e

This enables the following usage:
    python -m sfshop_e2e [OPTIONS]

Which is equivalent to:
    sfshop-e2e [OPTIONS]
"""

from sfshop_e2e.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
