#!/usr/bin/env python3
"""Example: A=B syntax validation

Validates a short A=B program line by line and as a whole document,
printing every diagnostic with its individual error messages.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install aeqb-lang
"""
from __future__ import annotations

import aeqb

PROGRAM = """\
# Move every b to the right of every a.
ba=ab

(once)a=(return)done   # two keywords on one instruction
a=b=c
(start)=x
"""


def main() -> None:
    print(f"aeqb-lang version: {aeqb.__version__}")

    print("\nSingle lines:")
    for line in ["ba=ab", "(return)=a", "a=(once)b"]:
        errors = aeqb.validate_line(line)
        print(f"  {line!r}: {errors or 'valid'}")

    diagnostics = aeqb.diagnose(PROGRAM)
    print(f"\nDocument ({len(diagnostics)} diagnostics):")
    for diag in diagnostics:
        print(f"  {diag}")
        for info in diag.related:
            print(f"    - {info.message}")


if __name__ == "__main__":
    main()
