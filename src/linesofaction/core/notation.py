"""Text layouts for positions (a FEN-like one-line format).

A layout lists ranks 8 to 1 separated by ``/``. Each rank uses ``b`` and
``w`` for pieces and a digit 1–8 for a run of empty cells (``-`` is also
accepted for a single empty cell). A space and the side to move follow::

    1bbbbbb1/w6w/w6w/w6w/w6w/w6w/w6w/1bbbbbb1 b
"""

from __future__ import annotations

from linesofaction.core.board import Board
from linesofaction.core.enums import Piece
from linesofaction.core.position import DEFAULT_MOVE_LIMIT, Position
from linesofaction.core.types import make_square

STARTING_LAYOUT = "1bbbbbb1/w6w/w6w/w6w/w6w/w6w/w6w/1bbbbbb1 b"


def position_from_text(text: str, move_limit: int = DEFAULT_MOVE_LIMIT) -> Position:
    """Parse a layout string into a :class:`Position`."""
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Invalid layout (need 2 fields): {text!r}")

    placement, side_part = parts

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid layout board (must contain 8 ranks): {text!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid layout digit {ch!r}: {text!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid layout rank width: {text!r}")
                board[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid layout rank width: {text!r}")
        if file != 8:
            raise ValueError(f"Invalid layout rank width: {text!r}")

    # 2. Side to move
    side = Piece.from_char(side_part) if side_part in ("b", "w") else None
    if side is None:
        raise ValueError(f"Invalid layout side-to-move field: {side_part!r}")

    return Position(board, side, move_limit)


def position_to_text(pos: Position) -> str:
    """Serialise the cells and side to move of *pos*."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece == Piece.EMPTY:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.abbrev
        if empty:
            row += str(empty)
        rows.append(row)
    return f"{'/'.join(rows)} {pos.side_to_move.abbrev}"
