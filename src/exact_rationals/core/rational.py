"""
Rational primitive: exact fraction numerator/denominator over Python ints.

- Canonical form: lowest terms, denominator strictly positive, zero is 0/1.
- Every instance is canonicalised at construction; no operator mutates an operand.
- Arithmetic always re-reduces through the constructor; a naive combination of two
  canonical operands is never assumed to be in lowest terms.
- Ordering uses cross-multiplication, valid because both denominators are positive.

# Construction notes:
# - gcd is non-negative and gcd(0, d) == |d|, so 0/d always collapses to 0/1.
# - Multiplying both parts by sign(denominator) moves any sign onto the numerator
#   without changing the value.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .constants import RATIONAL_SEPARATOR
from .exc import RationalDomainError, RationalDivisionByZero
from .intmath import gcd, sign_of, trunc_div, widen

# Debug printing control
DEBUG_RATIONAL = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONAL:
        print(msg)


def _canonical(numerator: int, denominator: int) -> tuple[int, int]:
    """Reduce (n, d) to lowest terms with a positive denominator."""
    if denominator == 0:
        raise RationalDomainError(f"Denominator must be non-zero (numerator={numerator})")
    g = gcd(numerator, denominator)
    sign = sign_of(denominator)
    n = trunc_div(numerator, g) * sign
    d = trunc_div(denominator, g) * sign
    _dbg(f"canonical: ({numerator}, {denominator}) g={g} sign={sign} -> ({n}, {d})")
    return n, d


@dataclass(frozen=True)
class Rational:
    """Exact fraction in canonical form (immutable)."""
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        n = widen(self.numerator, "numerator")
        d = widen(self.denominator, "denominator")
        n, d = _canonical(n, d)
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Rational":
        return Rational(0, 1)

    @staticmethod
    def one() -> "Rational":
        return Rational(1, 1)

    @staticmethod
    def of(numerator: int, denominator: int = 1) -> "Rational":
        return div_by(numerator, denominator)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    def sign(self) -> int:
        return sign_of(self.numerator)

    # ------------- arithmetic -------------

    def _require(self, other: object, op: str) -> "Rational":
        if not isinstance(other, Rational):
            raise RationalDomainError(
                f"Rational {op} requires Rational operands, got {type(other).__name__}"
            )
        return other

    def add(self, other: "Rational") -> "Rational":
        o = self._require(other, "add")
        return Rational(
            self.numerator * o.denominator + self.denominator * o.numerator,
            self.denominator * o.denominator,
        )

    def subtract(self, other: "Rational") -> "Rational":
        o = self._require(other, "subtract")
        return self.add(o.negate())

    def multiply(self, other: "Rational") -> "Rational":
        o = self._require(other, "multiply")
        return Rational(self.numerator * o.numerator, self.denominator * o.denominator)

    def divide(self, other: "Rational") -> "Rational":
        o = self._require(other, "divide")
        den = self.denominator * o.numerator
        if den == 0:
            raise RationalDivisionByZero(self, o)
        return Rational(self.numerator * o.denominator, den)

    def negate(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def abs(self) -> "Rational":
        return self if self.numerator >= 0 else self.negate()

    def __add__(self, other: "Rational") -> "Rational":
        return self.add(other)

    def __sub__(self, other: "Rational") -> "Rational":
        return self.subtract(other)

    def __mul__(self, other: "Rational") -> "Rational":
        return self.multiply(other)

    def __truediv__(self, other: "Rational") -> "Rational":
        return self.divide(other)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __abs__(self) -> "Rational":
        return self.abs()

    # ------------- comparisons -------------

    def compare_to(self, other: "Rational") -> int:
        """Return -1, 0 or 1 by comparing a*d against c*b."""
        o = self._require(other, "compare")
        left = self.numerator * o.denominator
        right = o.numerator * self.denominator
        return (left > right) - (left < right)

    def __lt__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare_to(other) >= 0

    # ------------- conversions -------------

    def as_fraction(self) -> Fraction:
        """Exact ``fractions.Fraction`` view (interop with test oracles)."""
        return Fraction(self.numerator, self.denominator)

    def __str__(self) -> str:
        if self.denominator == 1:
            return f"{self.numerator}"
        return f"{self.numerator}{RATIONAL_SEPARATOR}{self.denominator}"


def div_by(numerator: int, denominator: int) -> Rational:
    """Build ``numerator/denominator`` from two ints; widening happens once, in the constructor."""
    return Rational(numerator, denominator)


__all__ = [
    "Rational",
    "div_by",
]
