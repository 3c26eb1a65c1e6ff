from __future__ import annotations

import pytest

from exact_rationals.core import Rational, div_by


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def half() -> Rational:
    return div_by(1, 2)


@pytest.fixture()
def third() -> Rational:
    return div_by(1, 3)


@pytest.fixture()
def two_thirds() -> Rational:
    return div_by(2, 3)


@pytest.fixture()
def mixed_values() -> list[Rational]:
    """Unsorted sample with duplicates in value but distinct construction."""
    return [
        Rational(3, 4),
        Rational(-1, 2),
        Rational(0),
        Rational(6, 8),
        Rational(5),
        Rational(-7, 3),
    ]
