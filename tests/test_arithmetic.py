from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from rcalc.config import ImaginaryDenominator
from rcalc.evaluation.arithmetic import add, adder, combine_checked, multiply
from rcalc.types.expression import Variable
from rcalc.types.value import Boolean, ComplexNumber, FALLBACK_VALUE, Function

ints = st.integers(min_value=-10**6, max_value=10**6)
denominators = ints.filter(lambda n: n != 0)
numbers = st.builds(ComplexNumber, ints, denominators, ints, denominators)

ONE = ComplexNumber(1, 1, 0, 1)


def as_complex(z: ComplexNumber) -> tuple[Fraction, Fraction]:
    return z.real, z.imag


# -----------------------------------------------------
# multiply
# -----------------------------------------------------

@pytest.mark.parametrize(
    "x,y,expected",
    [
        (ComplexNumber(2, 1, 0, 1), ComplexNumber(3, 1, 0, 1), ComplexNumber(6, 1, 0, 1)),
        (ComplexNumber(0, 1, 1, 1), ComplexNumber(0, 1, 1, 1), ComplexNumber(-1, 1, 0, 1)),
        (ComplexNumber(1, 2, 0, 1), ComplexNumber(1, 3, 0, 1), ComplexNumber(1, 6, 0, 6)),
        (ComplexNumber(1, 2, 1, 3), ComplexNumber(0, 1, 1, 1), ComplexNumber(-2, 6, 3, 6)),
    ]
)
def test_multiply_literal_results(x, y, expected):
    assert multiply(x, y) == expected


def test_multiply_does_not_reduce():
    # 1/2 * 2/1 is 1, but kept as 2/2 with a matching imaginary denominator.
    assert multiply(ComplexNumber(1, 2, 0, 1), ComplexNumber(2, 1, 0, 1)) == ComplexNumber(2, 2, 0, 2)


@given(numbers)
def test_multiplicative_identity(x):
    assert multiply(x, ONE).numerically_equal(x)
    assert multiply(ONE, x).numerically_equal(x)


@given(numbers, numbers)
def test_multiply_matches_exact_complex_product(x, y):
    xr, xi = as_complex(x)
    yr, yi = as_complex(y)
    assert as_complex(multiply(x, y)) == (xr * yr - xi * yi, xr * yi + xi * yr)


# -----------------------------------------------------
# add
# -----------------------------------------------------

def test_add_halves_and_thirds():
    result = add(ComplexNumber(1, 2, 0, 1), ComplexNumber(1, 3, 0, 1))
    assert result == ComplexNumber(5, 6, 0, 6)
    assert result.real == Fraction(5, 6)
    assert result.imag == 0


def test_add_does_not_reduce():
    assert add(ComplexNumber(1, 2, 0, 1), ComplexNumber(1, 2, 0, 1)) == ComplexNumber(2, 2, 0, 2)


def test_add_negative_denominators():
    result = add(ComplexNumber(1, -2, 0, 1), ComplexNumber(1, 3, 0, 1))
    assert result == ComplexNumber(1, -6, 0, -6)
    assert result.real == Fraction(-1, 6)


@pytest.mark.parametrize(
    "mode,expected",
    [
        # Shared: the imaginary numerator (scaled to lcm 2) is stored over the
        # real lcm (1), so i/2 + i/2 reads as 2i. Kept for historical results.
        (ImaginaryDenominator.SHARED, ComplexNumber(0, 1, 2, 1)),
        (ImaginaryDenominator.INDEPENDENT, ComplexNumber(0, 1, 2, 2)),
    ]
)
def test_imaginary_denominator_modes(mode, expected):
    half_i = ComplexNumber(0, 1, 1, 2)
    assert add(half_i, half_i, mode) == expected


def test_shared_mode_is_the_default():
    half_i = ComplexNumber(0, 1, 1, 2)
    assert add(half_i, half_i) == add(half_i, half_i, ImaginaryDenominator.SHARED)
    assert adder(ImaginaryDenominator.INDEPENDENT)(half_i, half_i).imag == 1


@given(numbers, numbers)
def test_independent_add_matches_exact_sum(x, y):
    result = add(x, y, ImaginaryDenominator.INDEPENDENT)
    assert result.real == x.real + y.real
    assert result.imag == x.imag + y.imag


@given(numbers, numbers)
def test_shared_add_real_part_is_exact(x, y):
    assert add(x, y, ImaginaryDenominator.SHARED).real == x.real + y.real


@given(numbers)
def test_independent_add_zero_is_identity(x):
    assert add(x, FALLBACK_VALUE, ImaginaryDenominator.INDEPENDENT).numerically_equal(x)


# -----------------------------------------------------
# fallback on mismatched operands
# -----------------------------------------------------

NON_NUMBERS = [Boolean(True), Boolean(False), Function(Variable("x"), Variable("x"))]


@pytest.mark.parametrize("other", NON_NUMBERS)
@pytest.mark.parametrize("op", [multiply, add])
def test_mismatch_returns_fallback(op, other):
    two = ComplexNumber(2, 1, 0, 1)
    assert op(two, other) == ComplexNumber(0, 1, 0, 1)
    assert op(other, two) is FALLBACK_VALUE
    assert op(other, other) is FALLBACK_VALUE


def test_combine_checked_flags_fallback():
    two = ComplexNumber(2, 1, 0, 1)
    assert combine_checked(multiply, two, two) == (ComplexNumber(4, 1, 0, 1), False)
    assert combine_checked(multiply, two, Boolean(True)) == (FALLBACK_VALUE, True)
