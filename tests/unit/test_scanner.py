"""Unit tests for aeqb.validator.scanner — splitting text into lines."""
from __future__ import annotations

from aeqb.validator.scanner import InstructionLine, Span, scan_lines


class TestScanLines:
    def test_empty_text(self) -> None:
        assert scan_lines("") == []

    def test_only_newlines(self) -> None:
        assert scan_lines("\n\n\r\n") == []

    def test_single_line_without_newline(self) -> None:
        assert scan_lines("a=b") == [InstructionLine(text="a=b", start=0, end=3, line=1)]

    def test_blank_lines_are_skipped_but_counted(self, sample_program: str) -> None:
        lines = scan_lines(sample_program)
        assert [l.line for l in lines] == [1, 2, 4, 5, 6]

    def test_offsets(self, sample_program: str) -> None:
        lines = scan_lines(sample_program)
        assert lines[1] == InstructionLine(text="ba=ab", start=15, end=20, line=2)
        assert sample_program[lines[3].start:lines[3].end] == "a=b=c"

    def test_end_excludes_comment_and_trailing_whitespace(self, sample_program: str) -> None:
        line = scan_lines(sample_program)[2]
        assert line.text == "(once)a=(return)x   # two keywords"
        assert sample_program[line.start:line.end] == "(once)a=(return)x"

    def test_comment_only_line_has_empty_range(self) -> None:
        (line,) = scan_lines("   # note")
        assert line.start == line.end == 0

    def test_whitespace_only_line_is_scanned(self) -> None:
        lines = scan_lines("a=b\n   \nx=y")
        assert [l.text for l in lines] == ["a=b", "   ", "x=y"]

    def test_crlf_line_endings(self) -> None:
        lines = scan_lines("a=b\r\nc=d\r\n")
        assert [(l.text, l.start, l.line) for l in lines] == [("a=b", 0, 1), ("c=d", 5, 2)]

    def test_lone_carriage_return_separates_lines(self) -> None:
        lines = scan_lines("a=b\rc=d")
        assert [(l.text, l.line) for l in lines] == [("a=b", 1), ("c=d", 2)]

    def test_unicode_line_separator(self) -> None:
        lines = scan_lines("a=b\u2028c=d")
        assert [l.text for l in lines] == ["a=b", "c=d"]

    def test_is_restartable(self, sample_program: str) -> None:
        assert scan_lines(sample_program) == scan_lines(sample_program)


class TestSpan:
    def test_line_span(self) -> None:
        line = InstructionLine(text="a=b  ", start=10, end=13, line=3)
        assert line.span == Span(start=10, end=13, line=3, col=1)

    def test_repr(self) -> None:
        assert repr(Span(start=0, end=1, line=2, col=1)) == "Span(2:1)"
