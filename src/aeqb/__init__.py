"""aeqb-lang — syntax validation and language server for A=B programs.

An A=B program is a list of rewrite instructions, one per line, of the
form ``LEFT=RIGHT``.  Either side may start with one of the keywords
``(return)``, ``(start)``, ``(end)`` or ``(once)``; ``#`` starts a
comment.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import aeqb

    aeqb.validate_line("(once)a=b")
    []
    aeqb.validate_line("a=(once)b")
    ['(once) is allowed only in left side.']

    diagnostics = aeqb.diagnose("a=b\\nx=y=z\\n")
    str(diagnostics[0])
    'ERROR at 2:1: Syntax Error (Each instruction must include exactly one equal sign.)'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from aeqb.validator.diagnostics import Diagnostic


def validate_line(line: str) -> list[str]:
    """Return the syntax errors of a single instruction line.

    Parameters
    ----------
    line:
        One line of source text.

    Returns
    -------
    list[str]
        Error messages in check order; empty if the line is valid.
    """
    from aeqb.validator.line import validate as _validate

    return _validate(line)


def diagnose(text: str, related_information: bool = True) -> list["Diagnostic"]:
    """Validate a complete A=B source text.

    Parameters
    ----------
    text:
        Complete document text.
    related_information:
        Attach one related-information entry per error message.

    Returns
    -------
    list[Diagnostic]
        One diagnostic per invalid line, in source order.
    """
    from aeqb.validator.validator import diagnose as _diagnose

    return _diagnose(text, related_information=related_information)


__all__ = [
    "__version__",
    "validate_line",
    "diagnose",
]
