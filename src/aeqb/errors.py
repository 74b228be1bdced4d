"""Exception types for aeqb-lang.

Instruction syntax errors are never raised: they are returned as plain
message lists by the line validator and surfaced as diagnostics.  The
exceptions below signal misuse of the library itself.
"""
from __future__ import annotations


class AeqbError(Exception):
    """Base class for all exceptions raised by aeqb-lang."""


class CoordinatorError(AeqbError):
    """Raised when a ``DocumentValidationCoordinator`` is driven out of order.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.coordinator_message = message
