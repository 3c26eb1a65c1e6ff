"""
exact_rationals Core Constants
==============================

Grammar and display constants only. Arithmetic never depends on anything here
beyond the separator used for rendering and parsing.
"""

# ---------------------------------------------------------------------------
# Textual grammar: integer | integer "/" integer
# ---------------------------------------------------------------------------

#: Separator between numerator and denominator in the canonical string form.
RATIONAL_SEPARATOR: str = "/"

#: The only sign accepted in front of an integer part.
NEGATIVE_SIGN: str = "-"

#: Pattern for one integer part (optional leading '-', then ASCII digits).
INTEGER_PATTERN: str = r"-?[0-9]+"


# ---------------------------------------------------------------------------
# Display (formatting helpers)
# ---------------------------------------------------------------------------

#: Default number of fractional digits when a Rational is shown as a Decimal.
DEFAULT_DECIMAL_PLACES: int = 18


__all__ = [
    "RATIONAL_SEPARATOR",
    "NEGATIVE_SIGN",
    "INTEGER_PATTERN",
    "DEFAULT_DECIMAL_PLACES",
]
