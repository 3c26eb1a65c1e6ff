"""
exact_rationals Core
====================

Unified exports for the Rational primitive and its utilities.
All arithmetic is exact over Python ints; every value is kept in canonical
form (lowest terms, positive denominator). Decimal helpers are provided
*only* for display.
"""

# Grammar/display constants
from .constants import (
    RATIONAL_SEPARATOR,
    NEGATIVE_SIGN,
    INTEGER_PATTERN,
    DEFAULT_DECIMAL_PLACES,
)

# Integer-primitive helpers
from .intmath import (
    sign_of,
    gcd,
    trunc_div,
    widen,
    parse_int,
)

# Rational primitive
from .rational import (
    Rational,
    div_by,
)

# Parsing, rendering and display helpers
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    parse_rational,
    render,
    to_decimal,
)

# Ordering utilities: compare, ranges, stable sort
from .ordering import (
    compare,
    is_between,
    RationalRange,
    sort_rationals,
    min_rational,
    max_rational,
)

# Core exceptions
from .exc import RationalDomainError, RationalParseError, RationalDivisionByZero

__all__ = [
    # constants
    "RATIONAL_SEPARATOR",
    "NEGATIVE_SIGN",
    "INTEGER_PATTERN",
    "DEFAULT_DECIMAL_PLACES",
    # intmath
    "sign_of",
    "gcd",
    "trunc_div",
    "widen",
    "parse_int",
    # rational
    "Rational",
    "div_by",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "parse_rational",
    "render",
    "to_decimal",
    # ordering
    "compare",
    "is_between",
    "RationalRange",
    "sort_rationals",
    "min_rational",
    "max_rational",
    # exceptions
    "RationalDomainError",
    "RationalParseError",
    "RationalDivisionByZero",
]
