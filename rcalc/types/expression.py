"""Abstract syntax tree for rcalc expressions.

Nodes are immutable. Each carries an optional source offset (`position`) set by
the reader; it is ignored by equality so that trees built by hand compare equal
to parsed ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Expression:
    """Base class of every AST node."""


def _position():
    return field(default=None, compare=False, repr=False, kw_only=True)


@dataclass(frozen=True)
class Define(Expression):
    target: Expression
    value: Expression
    position: int | None = _position()

    def __str__(self) -> str:
        return f"(define {self.target} {self.value})"


@dataclass(frozen=True)
class Closure(Expression):
    parameter: Expression
    body: Expression
    position: int | None = _position()

    def __str__(self) -> str:
        return f"(lambda {self.parameter} {self.body})"


@dataclass(frozen=True)
class Multiply(Expression):
    left: Expression
    right: Expression
    position: int | None = _position()

    def __str__(self) -> str:
        return f"(* {self.left} {self.right})"


@dataclass(frozen=True)
class Add(Expression):
    left: Expression
    right: Expression
    position: int | None = _position()

    def __str__(self) -> str:
        return f"(+ {self.left} {self.right})"


@dataclass(frozen=True)
class Number(Expression):
    numerator: int
    denominator: int = 1
    position: int | None = _position()

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class ImaginaryConstant(Expression):
    position: int | None = _position()

    def __str__(self) -> str:
        return "i"


@dataclass(frozen=True)
class Variable(Expression):
    name: str
    position: int | None = _position()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Boolean(Expression):
    value: bool
    position: int | None = _position()

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True)
class Apply(Expression):
    # Parsed but never evaluated: closures have no call semantics.
    function: Expression
    argument: Expression
    position: int | None = _position()

    def __str__(self) -> str:
        return f"({self.function} {self.argument})"
