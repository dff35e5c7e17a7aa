# rcalc: an evaluator for rational complex arithmetic expressions.
#
# Layout:
# - rcalc.types:      values, AST nodes, scope frames and evaluation outcomes.
# - rcalc.reader:     lexer and parser producing the AST.
# - rcalc.evaluation: the arithmetic combinators and the tree-walking Evaluator.
#
# Values are exact: numbers are held as four Python ints (a/b + c/d i) and are
# never reduced implicitly, so two equal-looking numbers may compare unequal
# structurally. Use ComplexNumber.numerically_equal for numeric comparisons.

__version__ = "0.1.0"
