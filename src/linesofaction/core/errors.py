"""Exceptions raised by the rules engine."""

from __future__ import annotations


class LinesOfActionError(Exception):
    """Base class for rules-engine errors."""


class IllegalMoveError(LinesOfActionError):
    """Raised when asked to make a move that is not legal in the position.

    This signals a caller bug; the position is left untouched.
    """


class EmptyHistoryError(LinesOfActionError):
    """Raised when retracting with no moves left in the history."""


class MoveLimitError(LinesOfActionError, ValueError):
    """Raised when a move limit would not exceed the moves already made."""
