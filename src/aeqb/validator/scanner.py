"""Split A=B source text into instruction lines.

The scanner makes a single linear pass over the text and returns every
maximal run of non-newline characters together with its offsets.
Blank lines contain no such run and therefore never appear in the
result.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from aeqb.validator.line import strip_comment

# Line terminators recognised by editors speaking LSP.
_LINE_CONTENT: Final[re.Pattern[str]] = re.compile(r"[^\n\r\u2028\u2029]+")
_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\r\n|[\n\r\u2028\u2029]")


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range ``[start, end)`` within the source text.

    Parameters
    ----------
    start:
        0-based offset of the first character.
    end:
        0-based offset *past* the last character.
    line:
        1-based line number of the first character.
    col:
        1-based column number of the first character.
    """

    start: int
    end: int
    line: int
    col: int

    def __repr__(self) -> str:
        return f"Span({self.line}:{self.col})"


@dataclass(frozen=True, slots=True)
class InstructionLine:
    """One non-blank line of source text.

    ``end`` excludes the comment and any trailing whitespace before it,
    so a diagnostic on this line underlines only the instruction itself.
    """

    text: str
    start: int
    end: int
    line: int

    @property
    def span(self) -> Span:
        return Span(start=self.start, end=self.end, line=self.line, col=1)


def scan_lines(text: str) -> list[InstructionLine]:
    """Return every non-blank line of ``text`` in source order.

    Parameters
    ----------
    text:
        Complete document text.

    Returns
    -------
    list[InstructionLine]
        One entry per maximal run of non-newline characters.
    """
    lines: list[InstructionLine] = []
    line_number = 1
    cursor = 0
    for match in _LINE_CONTENT.finditer(text):
        line_number += len(_NEWLINE.findall(text, cursor, match.start()))
        cursor = match.end()
        content = match.group()
        start = match.start()
        lines.append(
            InstructionLine(
                text=content,
                start=start,
                end=start + len(strip_comment(content).rstrip()),
                line=line_number,
            )
        )
    return lines
