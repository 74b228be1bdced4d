"""Document validator: run the line validator over a whole A=B source.

Usage
-----
::

    from aeqb.validator import Validator

    validator = Validator()
    diagnostics = validator.validate(source)
    for d in diagnostics:
        print(d)
"""
from __future__ import annotations

from aeqb.validator.diagnostics import DEFAULT_SOURCE, Diagnostic, RelatedInformation
from aeqb.validator.line import validate as validate_line
from aeqb.validator.scanner import scan_lines


class Validator:
    """Syntax validator for complete A=B documents.

    Parameters
    ----------
    related_information:
        When ``True`` each diagnostic carries one ``RelatedInformation``
        entry per error message.  Editors that cannot display related
        information should be served with ``False``.
    source:
        Name recorded on every diagnostic.
    """

    def __init__(
        self,
        related_information: bool = True,
        source: str = DEFAULT_SOURCE,
    ) -> None:
        self._related_information: bool = related_information
        self._source: str = source

    @property
    def related_information(self) -> bool:
        return self._related_information

    def validate(self, text: str) -> list[Diagnostic]:
        """Validate every non-blank line of ``text``.

        Parameters
        ----------
        text:
            Complete document text.

        Returns
        -------
        list[Diagnostic]
            One diagnostic per invalid line, in source order.  Empty if
            the document is valid.
        """
        diagnostics: list[Diagnostic] = []
        for line in scan_lines(text):
            errors = validate_line(line.text)
            if not errors:
                continue
            span = line.span
            related = (
                tuple(RelatedInformation(span=span, message=e) for e in errors)
                if self._related_information
                else ()
            )
            diagnostics.append(
                Diagnostic(
                    span=span,
                    errors=tuple(errors),
                    related=related,
                    source=self._source,
                )
            )
        return diagnostics


def diagnose(text: str, related_information: bool = True) -> list[Diagnostic]:
    """Convenience function: validate ``text`` with a default ``Validator``.

    Parameters
    ----------
    text:
        Complete document text.
    related_information:
        Whether to attach related-information entries.

    Returns
    -------
    list[Diagnostic]
        One diagnostic per invalid line.
    """
    return Validator(related_information=related_information).validate(text)
