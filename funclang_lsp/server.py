"""
A minimal pygls-based Language Server for FuncLang.

Features:
- Text synchronization and document store
- Diagnostics: syntax errors reported by the reader
- Hover: builtin form signatures and top-level definitions
- Completion: builtin forms and top-level definitions
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
    TextDocumentSyncKind,
)
from pygls.server import LanguageServer

from funclang_lsp.indexer import BUILTIN_SIGNATURES, DocumentIndex, build_index

logger = logging.getLogger(__name__)

SOURCE = "funclang-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class FuncLangLanguageServer(LanguageServer):
    CMD_NAME = "funclang-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1", text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = FuncLangLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: FuncLangLanguageServer, params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(ls, uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: FuncLangLanguageServer, params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # Full sync: the last change carries the whole text
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(ls, uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: FuncLangLanguageServer, params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(server: FuncLangLanguageServer, uri: str, text: str) -> None:
    idx = build_index(text)
    server.documents[uri] = DocumentState(text=text, index=idx)
    server.publish_diagnostics(uri, diagnostics_for(idx))


# --- Diagnostics ---
def diagnostics_for(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    problem = idx.syntax_error
    if problem is not None:
        logger.debug("syntax error at %d:%d: %s", problem.line, problem.col, problem.message)
        diags.append(
            Diagnostic(
                range=Range(
                    start=Position(line=problem.line, character=problem.col),
                    end=Position(line=problem.line, character=problem.col + 1),
                ),
                message=problem.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )
    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: FuncLangLanguageServer, params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = word_at(state.text, params.position)
    contents = hover_text(state.index, word) if word else None
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def hover_text(idx: DocumentIndex, word: str) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    return None


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION)
def on_completion(ls: FuncLangLanguageServer, params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == "function" else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(ls: FuncLangLanguageServer, params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
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
def word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    start = end = min(pos.character, len(line))
    # expand to word boundaries
    while start > 0 and line[start - 1] not in " \t()\n\r\"":
        start -= 1
    while end < len(line) and line[end] not in " \t()\n\r\"":
        end += 1
    return line[start:end] or None


def main() -> None:
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
