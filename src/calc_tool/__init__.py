"""
Calc Tool Package

Two small storefront calculators: bookstore wholesale cost / profit,
and dollar bill breakdown. Each computes an immutable result record
that is rendered to text separately.
"""

__version__ = "1.0.0"
