"""Core enumerations for the Lines of Action domain."""

from __future__ import annotations

from enum import IntEnum


class Piece(IntEnum):
    """Contents of a single cell.

    ``BLACK`` and ``WHITE`` double as the two sides. ``EMPTY`` is also the
    winner reported for a drawn game.
    """

    BLACK = 0
    WHITE = 1
    EMPTY = 2

    @property
    def opposite(self) -> Piece:
        """The other side; ``EMPTY`` is its own opposite."""
        if self is Piece.EMPTY:
            return Piece.EMPTY
        return Piece(1 - self.value)

    @property
    def abbrev(self) -> str:
        """Single-character form used in board diagrams."""
        return _ABBREVS[self.value]

    @property
    def full_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its abbreviation, e.g. 'w' → WHITE."""
        try:
            return cls(_ABBREVS.index(char))
        except ValueError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    def __str__(self) -> str:
        return self.full_name


_ABBREVS = ("b", "w", "-")


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    BLACK_WINS = 1
    WHITE_WINS = 2
    DRAW = 3

    @classmethod
    def from_winner(cls, winner: Piece | None) -> GameResult:
        """Translate the ``None`` / ``EMPTY`` / side winner form."""
        if winner is None:
            return cls.IN_PROGRESS
        if winner is Piece.EMPTY:
            return cls.DRAW
        return cls.BLACK_WINS if winner is Piece.BLACK else cls.WHITE_WINS

    @property
    def winner(self) -> Piece | None:
        """Inverse of :meth:`from_winner`."""
        return _RESULT_WINNERS[self.value]


_RESULT_WINNERS = (None, Piece.BLACK, Piece.WHITE, Piece.EMPTY)
