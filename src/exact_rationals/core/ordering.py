"""
Ordering utilities for Rational values (comparison, ranges, stable sorting).

Key behaviours:
- compare(a, b) is a tri-state result (-1, 0, 1) derived from cross-multiplication.
- Inclusive range membership is two ordering comparisons: lo <= x and x <= hi.
- Sorting is ascending and stable; equal values keep their input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, TypeVar

from .exc import RationalDomainError
from .rational import Rational

# Debug printing control
DEBUG_ORDERING = False

def _dbg(msg: str) -> None:
    if DEBUG_ORDERING:
        print(msg)

T = TypeVar("T")


def compare(a: Rational, b: Rational) -> int:
    """Return -1 if a < b, 0 if a == b, 1 if a > b."""
    if not isinstance(a, Rational) or not isinstance(b, Rational):
        raise RationalDomainError("compare(): expected Rational operands")
    c = a.compare_to(b)
    _dbg(f"compare: {a} vs {b} -> {c}")
    return c


def is_between(x: Rational, lo: Rational, hi: Rational) -> bool:
    """Inclusive membership test lo <= x <= hi (False for an empty range)."""
    return compare(lo, x) <= 0 and compare(x, hi) <= 0


@dataclass(frozen=True)
class RationalRange:
    """Closed interval [start, end] of Rationals; empty when start > end."""
    start: Rational
    end: Rational

    def __post_init__(self):
        if not isinstance(self.start, Rational) or not isinstance(self.end, Rational):
            raise RationalDomainError("RationalRange bounds must be Rational")

    def is_empty(self) -> bool:
        return compare(self.start, self.end) > 0

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, Rational):
            return False
        return is_between(x, self.start, self.end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


# ----------------------------
# Sorting and extrema
# ----------------------------

def sort_rationals(
    items: Iterable[T],
    *,
    key: Optional[Callable[[T], Rational]] = None,
    reverse: bool = False,
) -> List[T]:
    """Stable sort by Rational value (ascending unless ``reverse``).

    Python's built-in sort is stable, so items with equal value retain their
    original insertion order (also when ``reverse`` is set).
    """
    get = key if key is not None else (lambda x: x)
    return sorted(items, key=get, reverse=reverse)


def min_rational(items: Iterable[Rational]) -> Rational:
    """Smallest value; the first one wins among equals."""
    lst = list(items)
    if not lst:
        raise RationalDomainError("min_rational(): empty input")
    best = lst[0]
    for x in lst[1:]:
        if compare(x, best) < 0:
            best = x
    return best


def max_rational(items: Iterable[Rational]) -> Rational:
    """Largest value; the first one wins among equals."""
    lst = list(items)
    if not lst:
        raise RationalDomainError("max_rational(): empty input")
    best = lst[0]
    for x in lst[1:]:
        if compare(x, best) > 0:
            best = x
    return best


__all__ = [
    "compare",
    "is_between",
    "RationalRange",
    "sort_rationals",
    "min_rational",
    "max_rational",
]
