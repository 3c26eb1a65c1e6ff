# Top-level API for exact_rationals.
"""
Top-level API for exact_rationals.

Exact fractions over arbitrary-precision ints:
  - Rational: immutable canonical fraction (lowest terms, positive denominator)
  - parse_rational / render: "N" and "N/D" text forms
  - compare / RationalRange: ordering and inclusive range membership
"""

from __future__ import annotations

from .core import (
    Rational,
    div_by,
    parse_rational,
    render,
    compare,
    is_between,
    RationalRange,
    sort_rationals,
    RationalDomainError,
    RationalParseError,
    RationalDivisionByZero,
)

__all__ = [
    "Rational",
    "div_by",
    "parse_rational",
    "render",
    "compare",
    "is_between",
    "RationalRange",
    "sort_rationals",
    "RationalDomainError",
    "RationalParseError",
    "RationalDivisionByZero",
]
