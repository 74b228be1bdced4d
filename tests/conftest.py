"""Shared test fixtures for aeqb-lang.

Fixtures defined here are available to all tests in the suite without
needing an explicit import.
"""
from __future__ import annotations

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "aeqb"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string."""
    return "0.1.0"


@pytest.fixture()
def sample_program() -> str:
    """A short A=B program mixing valid, invalid, blank and comment lines."""
    return (
        "# sort a and b\n"
        "ba=ab\n"
        "\n"
        "(once)a=(return)x   # two keywords\n"
        "a=b=c\n"
        "(start)=done\n"
    )
