"""Language-server integration.

``coordinator`` is transport-independent; ``server`` and ``converters``
bind it to pygls and lsprotocol.  Import ``aeqb.lsp.server`` explicitly
to pull in the LSP stack.
"""
from __future__ import annotations

from aeqb.lsp.coordinator import DocumentValidationCoordinator, SourceDocument

__all__ = ["DocumentValidationCoordinator", "SourceDocument"]
