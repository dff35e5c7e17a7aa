"""Tree-walking evaluator for rcalc expressions.

Every expression denotes an ordered, possibly empty sequence of values. Binary
arithmetic takes the cartesian combination of its operands' sequences
(left-major), so an empty operand empties the result.

Nothing in evaluation raises except running past `max_depth`: unbound names,
unsupported nodes, non-variable define targets and mismatched operand types
all degrade (to an empty sequence or FALLBACK_VALUE). `evaluate_outcome`
exposes which of those happened.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from rcalc.config import Settings, load_settings
from rcalc.errors import EvaluationDepthError, ParseError
from rcalc.evaluation.arithmetic import Combinator, adder, combine_checked, multiply
from rcalc.reader.parser import parse
from rcalc.types import expression as ast
from rcalc.types.outcome import Outcome, Status
from rcalc.types.scope import ScopeStack
from rcalc.types.value import Boolean, ComplexNumber, Function, Value

logger = logging.getLogger("rcalc.evaluator")


class Evaluator:
    """Evaluates expressions against a scope stack that lives as long as the instance."""

    def __init__(self, settings: Optional[Settings] = None, **overrides):
        """
        Args:
            settings: explicit Settings; defaults to `load_settings()` (RCALC_* env vars).
            overrides: individual Settings fields (max_depth, strict, imaginary_denominator).
        """
        if settings is None:
            settings = load_settings(**overrides)
        elif overrides:
            settings = settings.with_overrides(**overrides)
        self.settings: Settings = settings
        self.scopes = ScopeStack()
        self._depth = 0
        self._multiply: Combinator = multiply
        self._add: Combinator = adder(self.settings.imaginary_denominator)

    # --- Entry points ---
    def evaluate(self, code: str) -> list[Value]:
        """Parse `code` and evaluate it. Parse errors are logged and yield []."""
        try:
            expression = parse(code)
        except ParseError as e:
            logger.error("Error: %s", e)
            return []
        return self.evaluate_expression(expression)

    def evaluate_expression(self, expr: ast.Expression) -> list[Value]:
        return list(self._run(expr).values)

    def evaluate_outcome(self, expr: ast.Expression | str) -> Outcome:
        """Evaluate and report why the result is short, if it is.

        A string is parsed first; a parse failure becomes an UNSUPPORTED outcome.
        """
        if isinstance(expr, str):
            try:
                expr = parse(expr)
            except ParseError as e:
                logger.error("Error: %s", e)
                return Outcome((), Status.UNSUPPORTED, f"parse error: {e}")
        return self._run(expr)

    def definitions(self) -> Mapping[str, ast.Expression]:
        """Every visible binding (innermost frame wins)."""
        return self.scopes.visible()

    # --- Scope primitives ---
    def increase_scope(self) -> None:
        self.scopes.push()

    def decrease_scope(self) -> None:
        self.scopes.pop()

    def get_definition(self, name: str) -> Optional[ast.Expression]:
        return self.scopes.lookup(name)

    # --- Core ---
    def _run(self, expr: ast.Expression) -> Outcome:
        try:
            return self._evaluate(expr)
        except RecursionError as e:
            self._depth = 0
            logger.error("Evaluation aborted: depth limit %d exceeded", self.settings.max_depth)
            if isinstance(e, EvaluationDepthError):
                raise
            # The interpreter stack ran out before max_depth did.
            raise EvaluationDepthError(
                f"Evaluation exhausted the interpreter stack below max_depth={self.settings.max_depth}"
            ) from e

    def _evaluate(self, expr: ast.Expression) -> Outcome:
        if self._depth >= self.settings.max_depth:
            raise EvaluationDepthError(
                f"Evaluation exceeded the maximum depth of {self.settings.max_depth}"
            )
        self._depth += 1
        try:
            return self._dispatch(expr)
        finally:
            self._depth -= 1

    def _dispatch(self, expr: ast.Expression) -> Outcome:
        match expr:
            case ast.Number(numerator, denominator):
                return Outcome.of(ComplexNumber(numerator, denominator, 0, 1))
            case ast.ImaginaryConstant():
                return Outcome.of(ComplexNumber(0, 1, 1, 1))
            case ast.Boolean(value):
                return Outcome.of(Boolean(value))
            case ast.Closure(parameter, body):
                return Outcome.of(Function(parameter, body))
            case ast.Variable(name):
                bound = self.scopes.lookup(name)
                if bound is None:
                    return Outcome.no_value(f"'{name}' is not defined")
                return self._evaluate(bound)
            case ast.Define(target, value):
                return self._define(target, value)
            case ast.Multiply(left, right):
                return self._combine(self._multiply, left, right)
            case ast.Add(left, right):
                return self._combine(self._add, left, right)
        return Outcome((), Status.UNSUPPORTED, f"{type(expr).__name__} is not evaluated")

    def _define(self, target: ast.Expression, value: ast.Expression) -> Outcome:
        if isinstance(target, ast.Variable):
            self.scopes.define(target.name, value)
            return self._evaluate(value)
        # The value is still produced; only the binding is skipped.
        result = self._evaluate(value)
        reason = f"define target {target} is not a variable"
        if result.status is not Status.VALUE:
            reason = f"{reason}; {result.reason}"
        return Outcome(result.values, Status.UNSUPPORTED, reason)

    def _combine(self, op: Combinator, x_expr: ast.Expression, y_expr: ast.Expression) -> Outcome:
        xs = self._evaluate(x_expr)
        ys = self._evaluate(y_expr)
        if not xs.values:
            return Outcome((), _empty_status(xs), xs.reason)
        if not ys.values:
            return Outcome((), _empty_status(ys), ys.reason)

        values: list[Value] = []
        mismatches = 0
        for x in xs.values:
            for y in ys.values:
                result, mismatched = combine_checked(op, x, y)
                if mismatched:
                    mismatches += 1
                    if self.settings.strict:
                        continue
                values.append(result)

        if mismatches:
            return Outcome(
                tuple(values),
                Status.TYPE_MISMATCH,
                f"{mismatches} operand pair(s) were not both numbers",
            )
        for side in (xs, ys):
            if side.status is not Status.VALUE:
                return Outcome(tuple(values), side.status, side.reason)
        return Outcome.of(*values)


def _empty_status(outcome: Outcome) -> Status:
    return Status.NO_VALUE if outcome.status is Status.VALUE else outcome.status
