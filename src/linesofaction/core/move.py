"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from linesofaction.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single ply.

    ``is_capture`` records whether the destination held an opposing piece
    when the move was proposed. :meth:`Position.make_move` recomputes it, so
    history always reflects what actually happened on the board.
    """

    from_sq: Square
    to_sq: Square
    is_capture: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"

    @classmethod
    def between(cls, from_name: str, to_name: str, is_capture: bool = False) -> Move:
        """Build a move from two square names, e.g. ``Move.between('b1', 'b3')``."""
        return cls(parse_square(from_name), parse_square(to_name), is_capture)
