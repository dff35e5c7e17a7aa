import pytest

from rcalc.evaluation.evaluator import Evaluator
from rcalc.types import expression as ast
from rcalc.types.outcome import Outcome, Status
from rcalc.types.value import ComplexNumber, FALLBACK_VALUE


@pytest.mark.parametrize(
    "source,status",
    [
        ("2", Status.VALUE),
        ("(+ 1 i)", Status.VALUE),
        ("(lambda x x)", Status.VALUE),
        ("missing", Status.NO_VALUE),
        ("(* missing 2)", Status.NO_VALUE),
        ("(* 2 missing)", Status.NO_VALUE),
        ("(f 2)", Status.UNSUPPORTED),
        ("(+ (f 2) 1)", Status.UNSUPPORTED),
        ("(define 3 4)", Status.UNSUPPORTED),
        ("(* #t 2)", Status.TYPE_MISMATCH),
        ("(+ 1 (* #f 2))", Status.TYPE_MISMATCH),
        ("(+ 1 (define 2 3))", Status.UNSUPPORTED),
    ]
)
def test_status(evaluator, source, status):
    assert evaluator.evaluate_outcome(source).status is status


def test_outcome_values_match_plain_contract(evaluator):
    for source in ("2", "(* #t 2)", "missing", "(define 3 4)", "(f 1)"):
        outcome = evaluator.evaluate_outcome(source)
        assert list(outcome.values) == Evaluator().evaluate(source)


def test_no_value_reason_names_the_variable(evaluator):
    outcome = evaluator.evaluate_outcome(ast.Variable("ghost"))
    assert outcome.values == ()
    assert "ghost" in outcome.reason


def test_type_mismatch_keeps_fallback_in_compatibility_mode(evaluator):
    outcome = evaluator.evaluate_outcome("(* #t 2)")
    assert outcome.values == (FALLBACK_VALUE,)
    assert not outcome.ok


def test_type_mismatch_drops_fallback_in_strict_mode(strict_evaluator):
    outcome = strict_evaluator.evaluate_outcome("(* #t 2)")
    assert outcome.values == ()
    assert outcome.status is Status.TYPE_MISMATCH


def test_non_variable_target_keeps_value(evaluator):
    outcome = evaluator.evaluate_outcome("(define 3 4)")
    assert outcome.values == (ComplexNumber(4, 1, 0, 1),)
    assert "not a variable" in outcome.reason


def test_parse_error_outcome(evaluator):
    outcome = evaluator.evaluate_outcome("(+ 1")
    assert outcome.status is Status.UNSUPPORTED
    assert outcome.reason.startswith("parse error")


def test_outcome_helpers():
    assert Outcome.of().status is Status.NO_VALUE
    one = Outcome.of(FALLBACK_VALUE)
    assert one.ok
    assert list(one) == [FALLBACK_VALUE]
    assert len(one) == 1
