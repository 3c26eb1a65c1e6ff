"""
String I/O and Decimal display helpers (non-core arithmetic).

Parsing and canonical rendering live here. Decimal is only used for
display/logging; it never feeds back into Rational arithmetic.
"""

from decimal import Decimal, ROUND_DOWN, localcontext

from .constants import DEFAULT_DECIMAL_PLACES, RATIONAL_SEPARATOR
from .exc import RationalDomainError, RationalParseError
from .intmath import parse_int
from .rational import Rational

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


#: Decimal context precision used for display conversions only.
DEFAULT_DECIMAL_PRECISION: int = 50


# ---------------------------------------------------------------------------
# Parsing: integer | integer "/" integer
# ---------------------------------------------------------------------------

def parse_rational(text: str) -> Rational:
    """Parse ``"N"`` or ``"N/D"`` into a canonical Rational.

    Raises RationalParseError when either side is not a plain integer or when
    more than one separator is present; a zero denominator raises
    RationalDomainError. Both messages carry the original text.
    """
    if not isinstance(text, str):
        raise RationalParseError(text)
    parts = text.split(RATIONAL_SEPARATOR)
    _dbg(f"parse_rational: {text!r} -> parts={parts}")
    if len(parts) == 1:
        n = parse_int(parts[0])
        if n is None:
            raise RationalParseError(text)
        return Rational(n, 1)
    if len(parts) != 2:
        raise RationalParseError(text)
    n = parse_int(parts[0])
    d = parse_int(parts[1])
    if n is None or d is None:
        raise RationalParseError(text)
    if d == 0:
        raise RationalDomainError(f"Denominator must be non-zero in '{text}'")
    return Rational(n, d)


def render(r: Rational) -> str:
    """Canonical text: ``"N"`` for integers, ``"N/D"`` otherwise."""
    if not isinstance(r, Rational):
        raise RationalDomainError("render(): expected Rational")
    return str(r)


# ---------------------------------------------------------------------------
# Logging/display conversion helpers
# ---------------------------------------------------------------------------

def to_decimal(r: Rational, places: int = DEFAULT_DECIMAL_PLACES) -> Decimal:
    """Decimal approximation truncated to ``places`` fractional digits (display only)."""
    if not isinstance(r, Rational):
        raise RationalDomainError("to_decimal(): expected Rational")
    if places < 0:
        raise RationalDomainError(f"to_decimal(): places must be >= 0, got {places}")
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(DEFAULT_DECIMAL_PRECISION, len(str(abs(r.numerator))) + places + 1)
        value = Decimal(r.numerator) / Decimal(r.denominator)
        _dbg(f"to_decimal: {r} ~ {value}")
        return value.quantize(quantum, rounding=ROUND_DOWN)


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "parse_rational",
    "render",
    "to_decimal",
]
