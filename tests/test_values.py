from fractions import Fraction

import pytest

from rcalc.errors import RcalcError, ZeroDenominatorError
from rcalc.types.expression import Variable
from rcalc.types.value import Boolean, ComplexNumber, FALLBACK_VALUE, Function


def test_fallback_value_is_canonical_zero():
    assert FALLBACK_VALUE == ComplexNumber(0, 1, 0, 1)
    assert FALLBACK_VALUE.real == 0 and FALLBACK_VALUE.imag == 0


@pytest.mark.parametrize("args", [(1, 0, 0, 1), (1, 1, 0, 0), (0, 0, 0, 0)])
def test_zero_denominator_rejected(args):
    with pytest.raises(ZeroDenominatorError):
        ComplexNumber(*args)


def test_zero_denominator_error_is_value_error():
    with pytest.raises(ValueError):
        ComplexNumber(1, 0, 0, 1)
    assert issubclass(ZeroDenominatorError, RcalcError)


def test_equality_is_structural_not_numeric():
    half = ComplexNumber(1, 2, 0, 1)
    two_quarters = ComplexNumber(2, 4, 0, 1)
    assert half != two_quarters
    assert half.numerically_equal(two_quarters)
    assert not half.numerically_equal(Boolean(True))


def test_parts_and_reduction():
    z = ComplexNumber(6, -4, 10, 15)
    assert z.real == Fraction(-3, 2)
    assert z.imag == Fraction(2, 3)
    assert z.reduced() == ComplexNumber(-3, 2, 2, 3)


@pytest.mark.parametrize(
    "value,text",
    [
        (ComplexNumber(2, 1, 0, 1), "2"),
        (ComplexNumber(5, 6, 0, 6), "5/6"),
        (ComplexNumber(0, 1, 1, 1), "1i"),
        (ComplexNumber(2, 1, 1, 2), "2 + 1/2i"),
        (ComplexNumber(2, 1, -1, 2), "2 - 1/2i"),
        (Boolean(True), "#t"),
        (Boolean(False), "#f"),
        (Function(Variable("x"), Variable("x")), "(λ x x)"),
    ]
)
def test_value_text(value, text):
    assert str(value) == text


def test_function_holds_expressions_verbatim():
    body = Variable("y")
    fn = Function(Variable("x"), body)
    assert fn.body is body
    assert not hasattr(fn, "env")
