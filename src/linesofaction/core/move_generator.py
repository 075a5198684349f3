"""Move legality and legal move generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesofaction.core.enums import Piece
from linesofaction.core.move import Move
from linesofaction.core.types import Direction, Square, direction, distance, ray

if TYPE_CHECKING:
    from linesofaction.core.position import Position


class MoveGenerator:
    """Checks and generates legal moves for a given :class:`Position`.

    A piece moves in a straight line exactly as many squares as there are
    pieces (of either side, itself included) on the whole line it travels
    along. It may jump over friendly pieces but not over enemy ones, and
    captures by landing on an enemy piece.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether *from_sq*-*to_sq* is legal for the side to move."""
        dir_ = direction(from_sq, to_sq)
        if dir_ is None:
            return False
        board = self._board
        mover = board[from_sq]
        if mover != self._pos.side_to_move:
            return False
        if mover == Piece.EMPTY:
            return False
        if board[to_sq] == mover:
            return False
        span = distance(from_sq, to_sq)
        if self.is_blocked(from_sq, dir_, span):
            return False
        return self.line_count(from_sq, dir_) == span

    def is_legal_move(self, move: Move) -> bool:
        """Legality of *move*; its ``is_capture`` flag is ignored."""
        return self.is_legal(move.from_sq, move.to_sq)

    def generate_legal_moves(self) -> list[Move]:
        """All legal moves for the side to move, ordered by origin then target."""
        moves: list[Move] = []
        board = self._board
        append = moves.append
        for from_sq in board.pieces(self._pos.side_to_move):
            for dir_ in Direction:
                to_sq = self._target(from_sq, dir_)
                if to_sq is not None:
                    append(Move(from_sq, to_sq, not board.is_empty(to_sq)))
        moves.sort(key=lambda m: (m.from_sq, m.to_sq))
        return moves

    # -- Line of action -----------------------------------------------------

    def line_count(self, sq: Square, dir_: Direction) -> int:
        """Pieces on the full line through *sq* along *dir_*, *sq* included."""
        board = self._board
        count = 1
        for line_dir in (dir_, dir_.opposite):
            for other in ray(sq, line_dir):
                if not board.is_empty(other):
                    count += 1
        return count

    def is_blocked(self, from_sq: Square, dir_: Direction, span: int) -> bool:
        """Whether an enemy piece sits strictly between *from_sq* and its target."""
        board = self._board
        enemy = board[from_sq].opposite
        for between in ray(from_sq, dir_)[: span - 1]:
            if board[between] == enemy:
                return True
        return False

    # -- Internal -----------------------------------------------------------

    def _target(self, from_sq: Square, dir_: Direction) -> Square | None:
        """The only square a piece on *from_sq* could reach along *dir_*."""
        span = self.line_count(from_sq, dir_)
        squares = ray(from_sq, dir_)
        if span > len(squares):
            return None
        to_sq = squares[span - 1]
        if self.is_legal(from_sq, to_sq):
            return to_sq
        return None
