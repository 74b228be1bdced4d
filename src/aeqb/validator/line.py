"""Line validator: syntax checks for a single A=B instruction line.

An instruction has the form ``LEFT=RIGHT``.  Either side may begin with
one keyword: ``(return)``, ``(start)``, ``(end)`` or ``(once)``.  A ``#``
starts a comment that runs to the end of the line.

Before the positional checks run, each side is *normalized*: every
keyword is replaced by a two-character marker (``#r``, ``#s``, ``#e``,
``#o``).  Because ``#`` can never survive comment stripping, any ``#``
left in a normalized side is a keyword marker.

All checks are additive so a single line can report several problems at
once.  The only exception is the equal-sign count, without which there
are no sides to inspect.
"""
from __future__ import annotations

import re
from typing import Final

COMMENT_MARKER: Final[str] = "#"

KEYWORD_MARKERS: Final[dict[str, str]] = {
    "(return)": "#r",
    "(start)": "#s",
    "(end)": "#e",
    "(once)": "#o",
}

RETURN_MARKER: Final[str] = KEYWORD_MARKERS["(return)"]
ONCE_MARKER: Final[str] = KEYWORD_MARKERS["(once)"]

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

NON_ASCII: Final[str] = "Instruction cannot contain non-ascii characters."
EQUAL_SIGN_COUNT: Final[str] = "Each instruction must include exactly one equal sign."
OPEN_PAREN: Final[str] = "( is invalid."
CLOSE_PAREN: Final[str] = ") is invalid."
MULTIPLE_KEYWORDS: Final[str] = "Each side cannot contain more than one keyword."
KEYWORD_POSITION: Final[str] = "Keywords must occur at the start of left side or right side."
RETURN_ON_LEFT: Final[str] = "(return) is allowed only in right side."
ONCE_ON_RIGHT: Final[str] = "(once) is allowed only in left side."
ONCE_EXCLUSIVE: Final[str] = "(once) and another keyword cannot be used at the same time."
RETURN_EXCLUSIVE: Final[str] = "(return) and another keyword cannot be used at the same time."

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")
_PRINTABLE_ASCII: Final[re.Pattern[str]] = re.compile(r"[ -~]*")


def strip_comment(line: str) -> str:
    """Return ``line`` with the comment marker and everything after it removed."""
    return line.split(COMMENT_MARKER, 1)[0]


def normalize_side(side: str) -> str:
    """Replace every keyword token in ``side`` with its marker."""
    for keyword, marker in KEYWORD_MARKERS.items():
        side = side.replace(keyword, marker)
    return side


def validate(line: str) -> list[str]:
    """Check one instruction line and return its syntax errors.

    Parameters
    ----------
    line:
        Raw text of a single line, without the trailing newline.

    Returns
    -------
    list[str]
        Error messages in the order the checks were evaluated.  An empty
        list means the line is valid; blank and comment-only lines are
        always valid.
    """
    expr = _WHITESPACE.sub("", strip_comment(line))
    if not expr:
        return []

    errors: list[str] = []
    if not _PRINTABLE_ASCII.fullmatch(expr):
        errors.append(NON_ASCII)

    hands = expr.split("=")
    if len(hands) != 2:
        errors.append(EQUAL_SIGN_COUNT)
        return errors

    left, right = sides = [normalize_side(h) for h in hands]

    if any("(" in side for side in sides):
        errors.append(OPEN_PAREN)
    if any(")" in side for side in sides):
        errors.append(CLOSE_PAREN)
    if any(side.count(COMMENT_MARKER) > 1 for side in sides):
        errors.append(MULTIPLE_KEYWORDS)
    if any(COMMENT_MARKER in side[1:] for side in sides):
        errors.append(KEYWORD_POSITION)

    if left.startswith(RETURN_MARKER):
        errors.append(RETURN_ON_LEFT)
    if right.startswith(ONCE_MARKER):
        errors.append(ONCE_ON_RIGHT)
    if left.startswith(ONCE_MARKER) and right.startswith(COMMENT_MARKER):
        errors.append(ONCE_EXCLUSIVE)
    if right.startswith(RETURN_MARKER) and left.startswith(COMMENT_MARKER):
        errors.append(RETURN_EXCLUSIVE)

    return errors
