# tests/example/test_examples_self_check.py
# Story-style examples mirroring the scripted self-check (scripts/demo.py).
# Each test names the scenario id it corresponds to for easy cross-checking.

import pytest

from exact_rationals import Rational, RationalRange, div_by, parse_rational, RationalDomainError

# We reuse fixtures defined in tests/conftest.py:
# - half
# - third
# - two_thirds


# R1..R5 — arithmetic on 1/2 and 1/3
def test_r_arithmetic(half, third):
    print("[R1-R5] 1/2 with 1/3 -> 5/6, 1/6, 1/6, 3/2; -(1/2) == -1/2")
    assert str(half + third) == "5/6"
    assert half - third == div_by(1, 6)
    assert half * third == div_by(1, 6)
    assert half / third == div_by(3, 2)
    assert -half == div_by(-1, 2)


# F1/F2 — rendering and parsing
@pytest.mark.parametrize(
    "value,text",
    [
        (div_by(2, 1), "2"),
        (div_by(-2, 4), "-1/2"),
        (parse_rational("117/1098"), "13/122"),
    ],
)
def test_f_rendering(value, text):
    assert str(value) == text


# O1 — ordering and range membership
def test_o_ordering(half, third, two_thirds):
    assert half < two_thirds
    assert half in RationalRange(third, two_thirds)


# B1/B2 — values beyond machine-word range
def test_b_big_integers(half):
    assert div_by(2000000000, 4000000000) == half
    assert Rational(
        int("912016490186296920119201192141970416029"),
        int("1824032980372593840238402384283940832058"),
    ) == half


# E — zero denominators are rejected, never defaulted
def test_e_zero_denominator():
    with pytest.raises(RationalDomainError):
        parse_rational("1/0")
    with pytest.raises(RationalDomainError):
        div_by(1, 0)
