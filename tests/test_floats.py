import math
from fractions import Fraction

import pytest

from naviz.floats import to_float


def test_fraction_converts_exactly_when_representable():
    assert to_float(Fraction(1, 2)) == 0.5


def test_integer_and_float_pass_through():
    assert to_float(3) == 3.0
    assert to_float(2.25) == 2.25


def test_negative_fraction_keeps_sign():
    assert to_float(Fraction(-3, 4)) == -0.75


def test_huge_fraction_saturates_to_infinity():
    assert to_float(Fraction(10**400, 1)) == math.inf
    assert to_float(Fraction(-(10**400), 1)) == -math.inf


@pytest.mark.parametrize("bad", ["1.5", None, True, [1]])
def test_non_numbers_are_rejected(bad):
    with pytest.raises(TypeError):
        to_float(bad)