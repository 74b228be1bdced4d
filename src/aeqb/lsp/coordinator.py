"""Document validation coordinator.

The coordinator decides *when* documents are validated and *what* gets
published.  Every content change re-validates the full text and
publishes a complete replacement list; closing a document publishes an
empty list.  It knows nothing about the transport: diagnostics leave
through the ``publish`` callable supplied by the host.

Usage
-----
::

    coordinator = DocumentValidationCoordinator(publish=send)
    coordinator.initialize(related_information=True)
    coordinator.on_content_changed(document)
    coordinator.on_closed(document.uri)
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from aeqb.errors import CoordinatorError
from aeqb.validator.diagnostics import DEFAULT_SOURCE, Diagnostic
from aeqb.validator.validator import Validator

logger = logging.getLogger(__name__)

Publisher = Callable[[str, list[Diagnostic]], None]


class SourceDocument(Protocol):
    """The part of a synchronized text document the coordinator reads."""

    @property
    def uri(self) -> str: ...

    @property
    def source(self) -> str: ...


class DocumentValidationCoordinator:
    """Re-validates documents on change and publishes their diagnostics.

    Parameters
    ----------
    publish:
        Called as ``publish(uri, diagnostics)`` once per change and once
        per close.  The list always replaces whatever was published for
        ``uri`` before.
    source:
        Name recorded on every diagnostic.
    """

    def __init__(self, publish: Publisher, source: str = DEFAULT_SOURCE) -> None:
        self._publish = publish
        self._source = source
        self._related_information: bool | None = None
        self._published: dict[str, list[Diagnostic]] = {}

    # ------------------------------------------------------------------
    # Capability negotiation
    # ------------------------------------------------------------------

    def initialize(self, related_information: bool) -> None:
        """Record whether the client accepts related information.

        Raises
        ------
        CoordinatorError
            If the coordinator has already been initialized.
        """
        if self._related_information is not None:
            raise CoordinatorError("Coordinator has already been initialized")
        self._related_information = related_information
        logger.debug("Client supports related information: %s", related_information)

    @property
    def related_information(self) -> bool:
        """Negotiated capability; ``False`` until ``initialize`` is called."""
        return bool(self._related_information)

    # ------------------------------------------------------------------
    # Document events
    # ------------------------------------------------------------------

    def on_content_changed(self, document: SourceDocument) -> list[Diagnostic]:
        """Validate the full text of ``document`` and publish the result.

        Also used for freshly opened documents.

        Returns
        -------
        list[Diagnostic]
            The list that was published.
        """
        validator = Validator(
            related_information=self.related_information,
            source=self._source,
        )
        diagnostics = validator.validate(document.source)
        logger.debug(
            "Validated %s: %d diagnostic(s)", document.uri, len(diagnostics)
        )
        self._send(document.uri, diagnostics)
        return diagnostics

    def on_closed(self, uri: str) -> None:
        """Clear every diagnostic published for ``uri``."""
        logger.debug("Closed %s: clearing diagnostics", uri)
        self._send(uri, [])
        del self._published[uri]

    def published(self, uri: str) -> list[Diagnostic]:
        """Return the diagnostics currently published for ``uri``."""
        return list(self._published.get(uri, []))

    def _send(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        self._published[uri] = diagnostics
        self._publish(uri, list(diagnostics))
