"""pygls language server for A=B source files.

Wires the ``DocumentValidationCoordinator`` to the LSP transport:

- ``initialize`` negotiates related-information support
- ``textDocument/didOpen`` and ``textDocument/didChange`` re-validate
- ``textDocument/didClose`` clears diagnostics

pygls owns document synchronization; the coordinator only ever sees the
full current text of a document.
"""
from __future__ import annotations

import logging

from lsprotocol import types
from pygls.server import LanguageServer

from aeqb import __version__
from aeqb.lsp.converters import to_lsp_diagnostics
from aeqb.lsp.coordinator import DocumentValidationCoordinator
from aeqb.validator.diagnostics import DEFAULT_SOURCE, Diagnostic

logger = logging.getLogger(__name__)

SERVER_NAME = "aeqb-lang"


def supports_related_information(capabilities: types.ClientCapabilities) -> bool:
    """Return True if the client accepts ``relatedInformation`` on diagnostics."""
    text_document = capabilities.text_document
    if text_document is None or text_document.publish_diagnostics is None:
        return False
    return bool(text_document.publish_diagnostics.related_information)


class AeqbLanguageServer(LanguageServer):
    """Language server that publishes A=B syntax diagnostics.

    Each server instance owns its own coordinator, so several servers
    (for example in tests) never share capability state.
    """

    def __init__(self, name: str = SERVER_NAME, version: str = f"v{__version__}") -> None:
        super().__init__(
            name,
            version,
            text_document_sync_kind=types.TextDocumentSyncKind.Incremental,
        )
        self.coordinator = DocumentValidationCoordinator(
            publish=self._publish, source=DEFAULT_SOURCE
        )

    def _publish(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        if diagnostics:
            document = self.workspace.get_text_document(uri)
            self.publish_diagnostics(uri, to_lsp_diagnostics(diagnostics, document))
        else:
            self.publish_diagnostics(uri, [])


def create_server() -> AeqbLanguageServer:
    """Build a language server with all features registered."""
    server = AeqbLanguageServer()

    @server.feature(types.INITIALIZE)
    def initialize(ls: AeqbLanguageServer, params: types.InitializeParams) -> None:
        ls.coordinator.initialize(supports_related_information(params.capabilities))

    @server.feature(types.TEXT_DOCUMENT_DID_OPEN)
    def did_open(ls: AeqbLanguageServer, params: types.DidOpenTextDocumentParams) -> None:
        ls.coordinator.on_content_changed(
            ls.workspace.get_text_document(params.text_document.uri)
        )

    @server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
    def did_change(
        ls: AeqbLanguageServer, params: types.DidChangeTextDocumentParams
    ) -> None:
        ls.coordinator.on_content_changed(
            ls.workspace.get_text_document(params.text_document.uri)
        )

    @server.feature(types.TEXT_DOCUMENT_DID_CLOSE)
    def did_close(ls: AeqbLanguageServer, params: types.DidCloseTextDocumentParams) -> None:
        ls.coordinator.on_closed(params.text_document.uri)

    return server


def serve() -> None:
    """Start a language server on stdin/stdout and block until exit."""
    logger.info("Starting %s %s over stdio", SERVER_NAME, __version__)
    create_server().start_io()
