"""Rational complex arithmetic.

Both combinators are total: an operand that is not a ComplexNumber yields
FALLBACK_VALUE (zero) instead of an error. Results are never reduced.
"""

from __future__ import annotations

from typing import Callable

from rcalc.config import ImaginaryDenominator
from rcalc.numeric import lcm
from rcalc.types.value import ComplexNumber, FALLBACK_VALUE, Value

Combinator = Callable[[Value, Value], Value]


def multiply(x: Value, y: Value) -> Value:
    match (x, y):
        case (ComplexNumber(a1, b1, c1, d1), ComplexNumber(a2, b2, c2, d2)):
            real_den = b1 * b2 * d1 * d2
            return ComplexNumber(
                a1 * a2 * d1 * d2 - c1 * c2 * b1 * b2,
                real_den,
                a1 * c2 * b2 * d1 + a2 * c1 * b1 * d2,
                real_den,
            )
    return FALLBACK_VALUE


def add(
    x: Value,
    y: Value,
    imaginary_denominator: ImaginaryDenominator = ImaginaryDenominator.SHARED,
) -> Value:
    """Sum two numbers over common denominators.

    With ImaginaryDenominator.SHARED the imaginary numerator is scaled to the
    imaginary parts' common denominator but stored over the real one; this
    reproduces historical results and is only numerically right when the two
    common denominators coincide. INDEPENDENT stores it over its own.
    """
    match (x, y):
        case (ComplexNumber(a1, b1, c1, d1), ComplexNumber(a2, b2, c2, d2)):
            real_den = lcm(b1, b2)
            real_num = a1 * (real_den // b1) + a2 * (real_den // b2)

            imag_lcm = lcm(d1, d2)
            imag_num = c1 * (imag_lcm // d1) + c2 * (imag_lcm // d2)
            if imaginary_denominator is ImaginaryDenominator.INDEPENDENT:
                imag_den = imag_lcm
            else:
                imag_den = real_den
            return ComplexNumber(real_num, real_den, imag_num, imag_den)
    return FALLBACK_VALUE


def adder(imaginary_denominator: ImaginaryDenominator) -> Combinator:
    """`add` with the imaginary-denominator mode fixed."""
    def _add(x: Value, y: Value) -> Value:
        return add(x, y, imaginary_denominator)
    return _add


def operands_match(x: Value, y: Value) -> bool:
    return isinstance(x, ComplexNumber) and isinstance(y, ComplexNumber)


def combine_checked(op: Combinator, x: Value, y: Value) -> tuple[Value, bool]:
    """Apply `op` and report whether the fallback path was taken."""
    if not operands_match(x, y):
        return FALLBACK_VALUE, True
    return op(x, y), False
