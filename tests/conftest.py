import pytest

from rcalc.evaluation.evaluator import Evaluator

# Every test starts from default settings: RCALC_* variables in the developer's
# shell must not leak into evaluator behavior.
RCALC_ENV_VARS = (
    "RCALC_MAX_DEPTH",
    "RCALC_IMAGINARY_DENOMINATOR",
    "RCALC_STRICT",
    "RCALC_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_rcalc_env(monkeypatch):
    for var in RCALC_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def evaluator():
    """Fresh evaluator with default settings."""
    return Evaluator()


@pytest.fixture
def strict_evaluator():
    return Evaluator(strict=True)
