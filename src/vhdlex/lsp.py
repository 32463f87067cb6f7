"""Minimal LSP server for VHDL, lexical diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from vhdlex import __version__
from vhdlex.diagnostics import check
from vhdlex.errors import source_line
from vhdlex.log import get_logger

logger = get_logger(__name__)

server = LanguageServer(
    "vhdlex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _utf16_len(text: str) -> int:
    """Length of *text* in UTF-16 code units, the LSP column unit."""
    return len(text.encode("utf-16-le")) // 2


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for err in check(doc.source):
        line = err.position.line - 1
        text = source_line(doc.source, err.position.line)
        col = err.position.column - 1
        start = _utf16_len(text[:col])
        end = start + _utf16_len(text[col : col + err.length])
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=start),
                    end=Position(line=line, character=end),
                ),
                message=err.message,
                severity=DiagnosticSeverity.Error,
                source="vhdlex",
            )
        )

    logger.debug("%s: publishing %d diagnostic(s)", uri, len(diagnostics))
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
