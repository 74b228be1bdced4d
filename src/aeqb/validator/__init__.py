"""A=B validator module.

Exports the pure line validator, the document ``Validator`` with its
``diagnose`` convenience function, the line scanner and the
``Diagnostic`` types.
"""
from __future__ import annotations

from aeqb.validator.diagnostics import (
    SYNTAX_ERROR,
    Diagnostic,
    DiagnosticSeverity,
    RelatedInformation,
)
from aeqb.validator.line import KEYWORD_MARKERS, normalize_side, validate
from aeqb.validator.scanner import InstructionLine, Span, scan_lines
from aeqb.validator.validator import Validator, diagnose

__all__ = [
    "validate",
    "normalize_side",
    "KEYWORD_MARKERS",
    "scan_lines",
    "InstructionLine",
    "Span",
    "Validator",
    "diagnose",
    "Diagnostic",
    "DiagnosticSeverity",
    "RelatedInformation",
    "SYNTAX_ERROR",
]
