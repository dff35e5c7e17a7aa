"""Runtime values produced by the evaluator.

`ComplexNumber(a, b, c, d)` stands for a/b + (c/d)i. The four integers are kept
exactly as produced: nothing reduces them, so denominators grow across repeated
arithmetic. Equality is structural (1/2 != 2/4); numeric comparison goes
through `real`, `imag` or `numerically_equal`.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from rcalc.errors import ZeroDenominatorError
from rcalc.types.expression import Expression


@dataclass(frozen=True)
class ComplexNumber:
    a: int
    b: int
    c: int
    d: int

    def __post_init__(self):
        if self.b == 0 or self.d == 0:
            raise ZeroDenominatorError(
                f"ComplexNumber({self.a}, {self.b}, {self.c}, {self.d}) has a zero denominator"
            )

    @property
    def real(self) -> Fraction:
        return Fraction(self.a, self.b)

    @property
    def imag(self) -> Fraction:
        return Fraction(self.c, self.d)

    def reduced(self) -> ComplexNumber:
        """Lowest-terms copy with positive denominators."""
        re, im = self.real, self.imag
        return ComplexNumber(re.numerator, re.denominator, im.numerator, im.denominator)

    def numerically_equal(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return False
        return self.real == other.real and self.imag == other.imag

    def __str__(self) -> str:
        if self.c == 0:
            return _fraction_text(self.a, self.b)
        if self.a == 0:
            return f"{_fraction_text(self.c, self.d)}i"
        sign = "-" if (self.c < 0) != (self.d < 0) else "+"
        return f"{_fraction_text(self.a, self.b)} {sign} {_fraction_text(abs(self.c), abs(self.d))}i"


def _fraction_text(num: int, den: int) -> str:
    return str(num) if den == 1 else f"{num}/{den}"


@dataclass(frozen=True)
class Function:
    """An unapplied closure.

    Parameter and body are kept verbatim and no environment is captured: names
    in the body would resolve against whatever scope is current when (and if)
    the body is ever evaluated.
    """
    parameter: Expression
    body: Expression

    def __str__(self) -> str:
        return f"(λ {self.parameter} {self.body})"


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


Value = Union[ComplexNumber, Function, Boolean]

#: Returned by the arithmetic combinators when an operand is not a number.
FALLBACK_VALUE = ComplexNumber(0, 1, 0, 1)
