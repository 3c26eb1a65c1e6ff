"""
Core exception types for exact_rationals.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "RationalDomainError",
    "RationalParseError",
    "RationalDivisionByZero",
]


class RationalDomainError(ValueError):
    """Raised when inputs violate a Rational precondition (e.g. zero denominator)."""
    pass


class RationalParseError(RationalDomainError):
    """Raised when text does not match the 'numerator/denominator' or 'numerator' form.

    Attributes
    ----------
    text : str
        The full offending input, exactly as received.
    """

    def __init__(self, text):
        super().__init__(
            f"Expecting rational in the form of 'numerator/denominator' or 'numerator' but was: '{text}'"
        )
        self.text = text


class RationalDivisionByZero(RationalDomainError, ZeroDivisionError):
    """Raised when dividing by a Rational whose numerator is zero.

    Attributes
    ----------
    dividend : Any
        Left-hand operand of the division.
    divisor : Any
        Right-hand (zero) operand of the division.
    """

    def __init__(self, dividend, divisor):
        super().__init__(f"Division by zero: {dividend} / {divisor}")
        self.dividend = dividend
        self.divisor = divisor
