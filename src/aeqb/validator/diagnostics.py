"""Diagnostic types produced by the A=B validator.

A ``Diagnostic`` marks one invalid instruction line.  Its primary
message is always the generic ``"Syntax Error"``; the individual
reasons are kept in ``errors`` and, when the editor supports it,
mirrored as ``related`` entries on the same span.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from aeqb.validator.scanner import Span

SYNTAX_ERROR: Final[str] = "Syntax Error"
DEFAULT_SOURCE: Final[str] = "aeqb"


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostics, numbered as in LSP."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


@dataclass(frozen=True)
class RelatedInformation:
    """A secondary message attached to a ``Diagnostic``."""

    span: Span
    message: str


@dataclass(frozen=True)
class Diagnostic:
    """A single invalid instruction line.

    Parameters
    ----------
    span:
        Source location of the instruction, comment and trailing
        whitespace excluded.
    errors:
        The validator's messages for this line, in check order.
    related:
        One ``RelatedInformation`` per error, or empty when the client
        cannot display related information.
    severity:
        Always ``ERROR`` for syntax problems.
    message:
        Primary message shown by the editor.
    source:
        Name of the tool that produced the diagnostic.
    """

    span: Span
    errors: tuple[str, ...]
    related: tuple[RelatedInformation, ...] = field(default=())
    severity: DiagnosticSeverity = field(default=DiagnosticSeverity.ERROR)
    message: str = field(default=SYNTAX_ERROR)
    source: str = field(default=DEFAULT_SOURCE)

    def __str__(self) -> str:
        loc = f"{self.span.line}:{self.span.col}"
        return f"{self.severity.name} at {loc}: {self.message} ({'; '.join(self.errors)})"

    @property
    def is_error(self) -> bool:
        """Return True if this diagnostic should fail a check run."""
        return self.severity == DiagnosticSeverity.ERROR

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-data representation suitable for JSON or YAML."""
        return {
            "line": self.span.line,
            "col": self.span.col,
            "start": self.span.start,
            "end": self.span.end,
            "severity": self.severity.name,
            "message": self.message,
            "source": self.source,
            "errors": list(self.errors),
        }
