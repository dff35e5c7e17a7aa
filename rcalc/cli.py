"""
rcalc - Command Line Interface

Usage:
    rcalc EXPR [EXPR ...] [--strict] [--imaginary-denominator shared|independent]
                          [--max-depth N] [--log-level LEVEL] [--no-color] [--reduce]
                          [--show-scope]
    python -m rcalc EXPR ...

Expressions are evaluated in order against a single evaluator, so later
expressions see earlier definitions:

    rcalc "(define x 3/4)" "(* x i)"
"""

import argparse
import logging
import sys

from rcalc.config import ImaginaryDenominator, load_settings
from rcalc.debug_utils.pprint import DEFAULT_OPTIONS, format_values
from rcalc.errors import ConfigError, EvaluationDepthError, ParseError
from rcalc.evaluation.evaluator import Evaluator
from rcalc.reader.parser import parse

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_DEPTH_EXCEEDED = 2
EXIT_CONFIG_ERROR = 3


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcalc",
        description="Evaluate rational complex arithmetic expressions",
    )
    parser.add_argument("expressions", nargs="+", metavar="EXPR", help="Expression to evaluate")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Drop fallback zeros produced by non-number operands",
    )
    parser.add_argument(
        "--imaginary-denominator",
        choices=[m.value for m in ImaginaryDenominator],
        dest="imaginary_denominator",
        help="Denominator used for the imaginary part of a sum (default: shared)",
    )
    parser.add_argument("--max-depth", type=int, dest="max_depth", help="Evaluation depth limit")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default: WARNING)")
    parser.add_argument("--no-color", action="store_true", dest="no_color", help="Disable ANSI colors")
    parser.add_argument("--reduce", action="store_true", help="Print numbers in lowest terms")
    parser.add_argument(
        "--show-scope",
        action="store_true",
        dest="show_scope",
        help="Print the visible definitions after evaluating",
    )
    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(
            strict=args.strict,
            imaginary_denominator=args.imaginary_denominator,
            max_depth=args.max_depth,
            log_level=args.log_level,
        )
    except ConfigError as e:
        print(f"rcalc: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    evaluator = Evaluator(settings)
    options = {**DEFAULT_OPTIONS, "color": not args.no_color and sys.stdout.isatty(), "reduce": args.reduce}

    status = EXIT_OK
    for source in args.expressions:
        try:
            expression = parse(source)
        except ParseError as e:
            print(f"rcalc: {source!r}: {e}", file=sys.stderr)
            status = EXIT_PARSE_ERROR
            continue
        try:
            values = evaluator.evaluate_expression(expression)
        except EvaluationDepthError as e:
            print(f"rcalc: {source!r}: {e}", file=sys.stderr)
            return EXIT_DEPTH_EXCEEDED
        print(format_values(values, options))

    if args.show_scope:
        for name, bound in evaluator.definitions().items():
            print(f"{name} = {bound}")
    return status


if __name__ == "__main__":
    sys.exit(main())
