"""
challonge_client/errors.py — Error Types
----------------------------------------
Every error raised by the client derives from ChallongeError so callers
can catch the whole family with one except clause.
"""

from __future__ import annotations

from typing import Optional, Sequence


class ChallongeError(Exception):
    """Base class for client errors."""


class RemoteError(ChallongeError):
    """Raised when the service answers with a non-empty error list.

    Attributes:
        errors: Every error string the service returned
        message: The first error, which is what gets reported
    """

    def __init__(self, errors: Sequence[str], context: Optional[str] = None):
        self.errors = list(errors)
        self.message = self.errors[0] if self.errors else "unknown error"
        self.context = context
        if context:
            super().__init__(f"{context}: {self.message}")
        else:
            super().__init__(self.message)


class TransportError(ChallongeError):
    """Raised when the HTTP exchange itself fails.

    Attributes:
        status: HTTP status code (503 for network errors)
        message: Response body or network error text
    """

    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"Challonge transport error [{status}]: {message}")


class NotFoundError(ChallongeError):
    """Raised when a named participant or match lookup finds nothing."""


class InvariantViolation(ChallongeError):
    """Raised in strict mode when a match winner is neither of its players."""


class TournamentStateError(ChallongeError):
    """Raised when the tournament is not in the state an operation expects."""

    def __init__(self, state: str, message: str):
        self.state = state
        super().__init__(message)
