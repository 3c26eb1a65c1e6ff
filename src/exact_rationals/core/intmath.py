"""
Integer-primitive helpers used by the Rational core.

Python's built-in ``int`` is the arbitrary-precision primitive. These free
functions wrap the handful of operations the core needs (sign, gcd, truncating
division, explicit widening, strict decimal parsing) so that rational.py never
re-implements any of them inline.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from .constants import INTEGER_PATTERN
from .exc import RationalDomainError

_INTEGER_RE = re.compile(INTEGER_PATTERN)


def sign_of(n: int) -> int:
    """Return -1, 0 or +1 according to the sign of ``n``."""
    return (n > 0) - (n < 0)


def gcd(a: int, b: int) -> int:
    """Non-negative gcd; gcd(0, d) == |d|."""
    return math.gcd(a, b)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero (``//`` floors, so fix up for mixed signs)."""
    if b == 0:
        raise ZeroDivisionError("trunc_div by zero")
    q = abs(a) // abs(b)
    return q if sign_of(a) * sign_of(b) >= 0 else -q


def widen(value: object, name: str = "value") -> int:
    """Explicit machine-int -> arbitrary-precision conversion at the API boundary.

    Only genuine integers are accepted; ``bool`` and ``float`` are rejected
    rather than silently promoted.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise RationalDomainError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return int(value)


def parse_int(text: str) -> Optional[int]:
    """Parse ``-?[0-9]+`` strictly; return None when ``text`` does not match.

    ``int()`` on its own would also accept whitespace, '+' and '_' separators,
    none of which belong to the grammar.
    """
    if not isinstance(text, str) or _INTEGER_RE.fullmatch(text) is None:
        return None
    return int(text)


__all__ = [
    "sign_of",
    "gcd",
    "trunc_div",
    "widen",
    "parse_int",
]
