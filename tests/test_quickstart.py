"""Test that the quickstart API works for aeqb-lang."""
from __future__ import annotations


def test_quickstart_import() -> None:
    import aeqb

    assert callable(aeqb.validate_line)
    assert callable(aeqb.diagnose)


def test_version(expected_version: str) -> None:
    import aeqb

    assert aeqb.__version__ == expected_version


def test_quickstart_validate_line() -> None:
    import aeqb

    assert aeqb.validate_line("(once)a=b") == []
    assert aeqb.validate_line("a=(once)b") == ["(once) is allowed only in left side."]


def test_quickstart_diagnose() -> None:
    import aeqb

    diagnostics = aeqb.diagnose("a=b\nx=y=z\n")
    assert len(diagnostics) == 1
    assert str(diagnostics[0]) == (
        "ERROR at 2:1: Syntax Error (Each instruction must include exactly one equal sign.)"
    )
