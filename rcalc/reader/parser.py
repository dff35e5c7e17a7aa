"""
  rcalc Reader: Lexer and Parser

- Prefix s-expression syntax, read into the immutable AST in rcalc.types.expression
- Every node records the source offset of its first token

    - 2, -7        -> Number(2, 1), Number(-7, 1)
    - 3/4          -> Number(3, 4)
    - 1.25         -> Number(125, 100)   (kept unreduced)
    - i            -> ImaginaryConstant
    - #t #f        -> Boolean   (also true / false)
    - name         -> Variable
    - (define t v) -> Define
    - (lambda p b) -> Closure
    - (+ a b ...)  -> Add, folded left
    - (* a b ...)  -> Multiply, folded left
    - (f x ...)    -> Apply, curried left
    - ; comment    -> ignored up to end of line
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from rcalc.errors import ParseError
from rcalc.types.expression import (
    Add, Apply, Boolean, Closure, Define, Expression, ImaginaryConstant,
    Multiply, Number, Variable,
)

logger = logging.getLogger("rcalc.reader")

Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s();]+)"  # numbers, symbols, booleans
    r")",
)

INTEGER_RE = re.compile(r"-?\d+")
RATIONAL_RE = re.compile(r"(-?\d+)/(\d+)")
DECIMAL_RE = re.compile(r"(-?)(\d+)\.(\d+)")

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "#f": False,
    "true": True,
    "false": False,
}

BINARY_FORMS = {"+": Add, "*": Multiply}
KEYWORDS = {"define", "lambda", *BINARY_FORMS}


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.end() == pos:
            if source[pos:].strip() == "":
                break
            raise ParseError(f"Unexpected character {source[pos]!r}", pos)
        pos = m.end()
        for name in ("lparen", "rparen", "atom"):
            if m.group(name):
                yield name, m.group(name), m.start(name)
                break


def read_atom(text: str, position: int) -> Expression:
    """Turn a single atom token into a leaf node."""
    if INTEGER_RE.fullmatch(text):
        return Number(int(text), 1, position=position)
    m = RATIONAL_RE.fullmatch(text)
    if m:
        numerator, denominator = int(m.group(1)), int(m.group(2))
        if denominator == 0:
            raise ParseError(f"Zero denominator in {text!r}", position)
        return Number(numerator, denominator, position=position)
    m = DECIMAL_RE.fullmatch(text)
    if m:
        sign, whole, frac = m.groups()
        numerator = int(whole + frac)
        return Number(-numerator if sign else numerator, 10 ** len(frac), position=position)
    if text == "i":
        return ImaginaryConstant(position=position)
    if text in BOOLEANS:
        return Boolean(BOOLEANS[text], position=position)
    if text in KEYWORDS:
        raise ParseError(f"'{text}' can only appear at the head of a list", position)
    if text[0].isdigit() or (text[0] == "-" and text[1:2].isdigit()):
        raise ParseError(f"Malformed number {text!r}", position)
    return Variable(text, position=position)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str], Optional[int]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], Optional[int]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, None))

    def parse_expr(self) -> Optional[Expression]:
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            return read_atom(tok_val, pos)

        if tok_type == "rparen":
            raise ParseError("Unmatched ')'", pos)

        # List form
        self.advance()
        items: list[Expression] = []
        head_kw: Optional[str] = None
        first_type, first_val, _ = self.peek()
        if first_type == "atom" and first_val in KEYWORDS:
            head_kw = first_val
            self.advance()
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                raise ParseError("Unmatched '('", pos)
            if tok_type == "rparen":
                self.advance()
                break
            items.append(self.parse_expr())
        return self._build_form(head_kw, items, pos)

    def _build_form(self, head_kw: Optional[str], items: list[Expression], pos: int) -> Expression:
        if head_kw == "define":
            if len(items) != 2:
                raise ParseError(f"define expects a target and a value, got {len(items)} operand(s)", pos)
            return Define(items[0], items[1], position=pos)
        if head_kw == "lambda":
            if len(items) != 2:
                raise ParseError(f"lambda expects a parameter and a body, got {len(items)} operand(s)", pos)
            return Closure(items[0], items[1], position=pos)
        if head_kw in BINARY_FORMS:
            if len(items) < 2:
                raise ParseError(f"'{head_kw}' expects at least two operands, got {len(items)}", pos)
            node_type = BINARY_FORMS[head_kw]
            result = items[0]
            for operand in items[1:]:
                result = node_type(result, operand, position=pos)
            return result
        if not items:
            raise ParseError("Empty list", pos)
        if len(items) == 1:
            raise ParseError("Application needs an argument", pos)
        result = items[0]
        for argument in items[1:]:
            result = Apply(result, argument, position=pos)
        return result

    def parse_all(self) -> Iterator[Expression]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse_all(source: str) -> list[Expression]:
    """Read every expression in `source`."""
    try:
        return list(TokenStream(lex(source)).parse_all())
    except RecursionError:
        raise ParseError("Expression nested too deeply") from None


def parse(source: str) -> Expression:
    """Read exactly one expression from `source`.

    Raises ParseError on empty input, malformed input or trailing tokens.
    """
    stream = TokenStream(lex(source))
    try:
        expr = stream.parse_expr()
    except RecursionError:
        raise ParseError("Expression nested too deeply") from None
    if expr is None:
        raise ParseError("Empty input")
    tok_type, tok_val, pos = stream.peek()
    if tok_type is not None:
        raise ParseError(f"Unexpected trailing input {tok_val!r}", pos)
    logger.debug("parsed %s", expr)
    return expr
