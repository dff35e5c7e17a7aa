from rcalc.evaluation.arithmetic import add, multiply
from rcalc.evaluation.evaluator import Evaluator

__all__ = ["add", "multiply", "Evaluator"]
