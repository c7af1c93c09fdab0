from __future__ import annotations

"""
A minimal pygls-based Language Server for Atto.

Features:
- Initialize/Shutdown/Exit (capabilities derived by pygls from the registered features)
- Text synchronization and document store
- Diagnostics: lexer and parser errors at their position
- Hover: builtin and function signatures (arity is what decides grouping)
- Completion: builtins, core library and document functions
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

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

from atto_lsp.indexer import build_index, describe, core_signatures, BUILTIN_SIGNATURES, DocumentIndex


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class AttoLanguageServer(LanguageServer):
    CMD_NAME = "atto-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.3", text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}


ls = AttoLanguageServer()


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    text = params.text_document.text or ""
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents.get(uri, DocumentState("", build_index(""))).text
    ls.documents[uri] = DocumentState(text=text, index=build_index(text))
    _publish_diagnostics(uri)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def build_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=_mk_range(p.line, p.col),
            message=p.message,
            severity=DiagnosticSeverity.Error,
            source="atto-ls",
        )
        for p in idx.problems
    ]


def _publish_diagnostics(uri: str):
    ls.publish_diagnostics(uri, build_diagnostics(ls.documents[uri].index))


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position)
    if not word:
        return None

    contents = describe(word, state.index)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = []

    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))
    for name, sig in core_signatures().items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    if state:
        for name, sdef in state.index.symbols.items():
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sdef.signature))

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
                detail=sdef.signature,
                kind=SymbolKind.Function,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---

def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to whitespace boundaries; tokens have no other separators
    start = min(pos.character, len(line))
    while start > 0 and not line[start - 1].isspace():
        start -= 1
    end = pos.character
    while end < len(line) and not line[end].isspace():
        end += 1
    word = line[start:end]
    return word or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
