from __future__ import annotations

"""
A minimal pygls-based Language Server for rcalc.

Features:
- Initialize/Shutdown/Exit
- Text synchronization and document store
- Diagnostics: parse errors, unmatched parens
- Hover: keyword signatures and locally defined names (with their definition)
- Completion: keywords and locally defined names
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TextDocumentSyncKind,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    Hover,
    MarkupContent,
    MarkupKind,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    HoverParams,
    DocumentSymbolParams,
    DocumentSymbol,
    SymbolKind,
)

from rcalc_lsp.indexer import build_index, KEYWORD_SIGNATURES, DocumentIndex

logger = logging.getLogger("rcalc.lsp")

SOURCE = "rcalc-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class RcalcLanguageServer(LanguageServer):
    CMD_NAME = "rcalc-ls"

    def __init__(self):
        # Full sync: every didChange carries the whole buffer.
        super().__init__(self.CMD_NAME, "v0.1", text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = RcalcLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("indexed %s: %d definition(s), %d error(s)", uri, len(idx.symbols), len(idx.errors))
    ls.publish_diagnostics(uri, collect_diagnostics(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def collect_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for problem in idx.errors:
        diags.append(
            Diagnostic(
                range=_mk_range(problem.line, problem.col),
                message=problem.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    if idx.paren_balance != 0 and not idx.errors:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    return diags


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None

    if word in KEYWORD_SIGNATURES:
        contents = KEYWORD_SIGNATURES[word]
    elif word in state.index.symbols:
        sdef = state.index.symbols[word]
        contents = f"{word} = {sdef.expression} — {sdef.kind} (defined at {sdef.line+1}:{sdef.col+1})"
    else:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []
    for name, sig in KEYWORD_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind, detail=str(sdef.expression)))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature("textDocument/documentSymbol")
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == "function" else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def extract_word_at(text: str, line_no: int, character: int) -> Optional[str]:
    lines = text.splitlines(True)
    if line_no >= len(lines):
        return None
    line = lines[line_no]
    # expand to word boundaries (anything but whitespace, parens and comments)
    start = min(character, len(line))
    while start > 0 and line[start - 1] not in " \t()\n\r;":
        start -= 1
    end = character
    while end < len(line) and line[end] not in " \t()\n\r;":
        end += 1
    word = line[start:end]
    return word or None


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
