from __future__ import annotations

"""
Lightweight indexer for rcalc files without evaluating code.

The buffer is read with the real parser, expression by expression, and we keep:
- definitions: top-level (define name ...) forms
- the first parse error, with its offset, for diagnostics
- the parenthesis balance, so an unterminated buffer still gets a useful message

Reading stops at the first parse error; definitions before it are kept so that
hover and completion keep working while the user is mid-edit.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from rcalc.errors import ParseError
from rcalc.reader.parser import TokenStream, lex
from rcalc.types.expression import Closure, Define, Expression, Variable


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int
    expression: Expression


@dataclass
class ParseProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    expressions: List[Expression] = field(default_factory=list)
    errors: List[ParseProblem] = field(default_factory=list)
    paren_balance: int = 0


def position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _paren_balance(text: str) -> int:
    balance = 0
    try:
        for tok_type, _, _ in lex(text):
            if tok_type == "lparen":
                balance += 1
            elif tok_type == "rparen":
                balance -= 1
    except ParseError:
        pass
    return balance


def _record_definition(idx: DocumentIndex, text: str, expr: Expression) -> None:
    if not isinstance(expr, Define) or not isinstance(expr.target, Variable):
        return
    offset = expr.target.position if expr.target.position is not None else (expr.position or 0)
    line, col = position_from_offset(text, offset)
    kind = "function" if isinstance(expr.value, Closure) else "var"
    idx.symbols[expr.target.name] = SymbolDef(
        name=expr.target.name, kind=kind, line=line, col=col, expression=expr.value
    )


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex(paren_balance=_paren_balance(text))
    stream = TokenStream(lex(text))
    try:
        for expr in stream.parse_all():
            idx.expressions.append(expr)
            _record_definition(idx, text, expr)
    except ParseError as e:
        line, col = position_from_offset(text, e.position if e.position is not None else len(text))
        idx.errors.append(ParseProblem(message=str(e), line=line, col=col))
    except RecursionError:
        idx.errors.append(ParseProblem(message="Expression nested too deeply", line=0, col=0))
    return idx


def lookup_symbol(idx: DocumentIndex, word: str) -> Optional[SymbolDef]:
    return idx.symbols.get(word)


# Keyword signatures for quick hover/signature help without eval
KEYWORD_SIGNATURES: Dict[str, str] = {
    "define": "(define name value)",
    "lambda": "(lambda parameter body)",
    "+": "(+ x y &rest more)",
    "*": "(* x y &rest more)",
    "i": "i - the imaginary unit, 0/1 + 1/1 i",
    "#t": "#t - boolean true",
    "#f": "#f - boolean false",
}
