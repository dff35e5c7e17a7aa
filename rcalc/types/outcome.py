"""Explicit result of evaluating an expression.

The plain evaluator contract returns a list of values and degrades silently.
An Outcome keeps the same values but says *why* a result is short:

- VALUE:         at least one value was produced and nothing degraded.
- NO_VALUE:      nothing to produce (unbound name, empty operand).
- UNSUPPORTED:   a node kind the evaluator does not handle, or a define whose
                 target is not a variable.
- TYPE_MISMATCH: arithmetic saw a non-number operand.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rcalc.types.value import Value


class Status(str, Enum):
    VALUE = "value"
    NO_VALUE = "no-value"
    UNSUPPORTED = "unsupported"
    TYPE_MISMATCH = "type-mismatch"


@dataclass(frozen=True)
class Outcome:
    values: tuple[Value, ...]
    status: Status
    reason: str = ""

    @classmethod
    def of(cls, *values: Value) -> Outcome:
        return cls(values, Status.VALUE if values else Status.NO_VALUE)

    @classmethod
    def no_value(cls, reason: str) -> Outcome:
        return cls((), Status.NO_VALUE, reason)

    @property
    def ok(self) -> bool:
        return self.status is Status.VALUE

    def __iter__(self):
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
