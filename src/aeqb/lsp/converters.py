"""Conversion of aeqb ``Diagnostic`` objects into LSP diagnostics.

Spans carry character offsets into the Python string.  LSP positions
are ``(line, character)`` pairs whose character unit is negotiated with
the client (UTF-16 by default), so conversion goes through the
document's position codec.
"""
from __future__ import annotations

import bisect
import re
from typing import Final

from lsprotocol import types
from pygls.workspace import TextDocument

from aeqb.validator.diagnostics import Diagnostic, DiagnosticSeverity

# LSP only recognises these three line terminators.
_LSP_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

_SEVERITY_MAP: Final[dict[DiagnosticSeverity, types.DiagnosticSeverity]] = {
    DiagnosticSeverity.ERROR: types.DiagnosticSeverity.Error,
    DiagnosticSeverity.WARNING: types.DiagnosticSeverity.Warning,
    DiagnosticSeverity.INFORMATION: types.DiagnosticSeverity.Information,
    DiagnosticSeverity.HINT: types.DiagnosticSeverity.Hint,
}


class PositionMapper:
    """Map character offsets of a document to LSP positions.

    Parameters
    ----------
    document:
        The synchronized pygls document.
    """

    def __init__(self, document: TextDocument) -> None:
        self._source: str = document.source
        self._codec = document.position_codec
        self._line_starts: list[int] = [0] + [
            m.end() for m in _LSP_NEWLINE.finditer(self._source)
        ]

    def position_at(self, offset: int) -> types.Position:
        """Return the client position of ``offset``, clamped to the text."""
        offset = max(0, min(offset, len(self._source)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line]
        character = self._codec.client_num_units(self._source[line_start:offset])
        return types.Position(line=line, character=character)

    def range_of(self, start: int, end: int) -> types.Range:
        return types.Range(start=self.position_at(start), end=self.position_at(end))


def to_lsp_diagnostic(
    diagnostic: Diagnostic, uri: str, mapper: PositionMapper
) -> types.Diagnostic:
    """Convert one aeqb ``Diagnostic`` to an ``lsprotocol`` diagnostic."""
    span = diagnostic.span
    lsp_range = mapper.range_of(span.start, span.end)
    related = [
        types.DiagnosticRelatedInformation(
            location=types.Location(
                uri=uri, range=mapper.range_of(info.span.start, info.span.end)
            ),
            message=info.message,
        )
        for info in diagnostic.related
    ]
    return types.Diagnostic(
        range=lsp_range,
        message=diagnostic.message,
        severity=_SEVERITY_MAP[diagnostic.severity],
        source=diagnostic.source,
        related_information=related or None,
    )


def to_lsp_diagnostics(
    diagnostics: list[Diagnostic], document: TextDocument
) -> list[types.Diagnostic]:
    """Convert every diagnostic of ``document`` in order."""
    if not diagnostics:
        return []
    mapper = PositionMapper(document)
    return [to_lsp_diagnostic(d, document.uri, mapper) for d in diagnostics]
