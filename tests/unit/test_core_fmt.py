import pytest
from decimal import Decimal

from exact_rationals.core.rational import Rational, div_by
from exact_rationals.core.exc import RationalDomainError, RationalParseError
from exact_rationals.core.fmt import parse_rational, render, to_decimal


# -----------------------------
# parse_rational
# -----------------------------

@pytest.mark.parametrize(
    "text,expected",
    [
        ("117/1098", "13/122"),
        ("5", "5"),
        ("-5", "-5"),
        ("4/2", "2"),
        ("1/-2", "-1/2"),
        ("-1/-2", "1/2"),
        ("0/17", "0"),
        ("-0", "0"),
        ("912016490186296920119201192141970416029/1824032980372593840238402384283940832058", "1/2"),
    ],
)
def test_parse_valid(text, expected):
    r = parse_rational(text)
    print(f"[parse] {text!r} -> {r}, expect {expected!r}")
    assert str(r) == expected


@pytest.mark.parametrize(
    "text",
    ["", "/", "1/", "/2", "a/b", "1.5", "1/2/3", " 1/2", "1 / 2", "+1/2", "1/2 ", "1//2"],
)
def test_parse_invalid_raises_with_text(text):
    print(f"[parse-invalid] {text!r} -> expect RationalParseError carrying the input")
    with pytest.raises(RationalParseError) as ei:
        parse_rational(text)
    assert ei.value.text == text
    assert f"'{text}'" in str(ei.value)
    assert isinstance(ei.value, RationalDomainError)


@pytest.mark.parametrize("text", ["1/0", "-3/0", "0/0", "1/-0"])
def test_parse_zero_denominator_raises(text):
    print(f"[parse-zero-den] {text!r} -> expect RationalDomainError mentioning the input")
    with pytest.raises(RationalDomainError) as ei:
        parse_rational(text)
    assert text in str(ei.value)


def test_parse_non_string_raises():
    with pytest.raises(RationalParseError):
        parse_rational(12)  # type: ignore[arg-type]


# -----------------------------
# render
# -----------------------------

def test_render_matches_str_and_round_trips():
    for r in [Rational(2, 1), Rational(-2, 4), Rational(0), Rational(22, 7)]:
        text = render(r)
        print(f"[render] {r!r} -> {text!r}")
        assert text == str(r)
        assert parse_rational(text) == r


def test_render_requires_rational():
    with pytest.raises(RationalDomainError):
        render("1/2")  # type: ignore[arg-type]


# -----------------------------
# Decimal display helpers
# -----------------------------

def test_to_decimal_truncates_for_display():
    print("[to_decimal] 1/3 @ 6 places -> 0.333333; -1/2 -> -0.5; 2 -> 2")
    assert to_decimal(div_by(1, 3), places=6) == Decimal("0.333333")
    assert to_decimal(div_by(2, 3), places=4) == Decimal("0.6666")
    assert to_decimal(div_by(-1, 2), places=3) == Decimal("-0.500")
    assert to_decimal(Rational(2), places=0) == Decimal("2")


def test_to_decimal_large_numerator_keeps_integer_digits():
    r = Rational(10 ** 60 + 1, 2)
    d = to_decimal(r, places=1)
    assert d == Decimal("5" + "0" * 59 + ".5")


def test_to_decimal_negative_places_raises():
    with pytest.raises(RationalDomainError):
        to_decimal(div_by(1, 2), places=-1)
