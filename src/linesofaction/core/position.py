"""Position — complete game state (board + side to move + history) with make/retract."""

from __future__ import annotations

import logging

from linesofaction.core.board import Board
from linesofaction.core.enums import GameResult, Piece
from linesofaction.core.errors import (
    EmptyHistoryError,
    IllegalMoveError,
    MoveLimitError,
)
from linesofaction.core.move import Move
from linesofaction.core.move_generator import MoveGenerator
from linesofaction.core.rules import Rules
from linesofaction.core.types import Square, make_square
from linesofaction.core.zobrist import piece_key as zobrist_piece_key
from linesofaction.core.zobrist import side_to_move_key as zobrist_side_to_move_key

_LOGGER = logging.getLogger(__name__)

# Default number of moves for each side that results in a draw.
DEFAULT_MOVE_LIMIT = 60


class Position:
    """Full Lines of Action game state.

    Moves are undone from the history stack alone: each recorded move knows
    whether it captured, and the captured piece always belongs to the side
    opposite the mover. The grid passed to the constructor is copied, so a
    position never shares cells with another owner.

    Region sizes and the winner are computed lazily and cached; every
    mutation (:meth:`make_move`, :meth:`retract`, :meth:`set`,
    :meth:`clear`) invalidates both caches.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "_move_limit",
        "_history",
        "_zobrist_hash",
        "_regions",
        "_winner",
        "_winner_known",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Piece = Piece.BLACK,
        move_limit: int = DEFAULT_MOVE_LIMIT,
    ) -> None:
        if side_to_move == Piece.EMPTY:
            raise ValueError("Side to move must be black or white")
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = Piece(side_to_move)
        self._move_limit = 2 * move_limit
        self._history: list[Move] = []
        self._zobrist_hash = self._compute_zobrist_hash()
        self._regions: tuple[list[int], list[int]] | None = None
        self._winner: Piece | None = None
        self._winner_known = False

    # ── Cell access ──────────────────────────────────────────────────────

    def get(self, sq: Square) -> Piece:
        """Contents of *sq*."""
        return self.board[sq]

    def set(self, sq: Square, piece: Piece, next_side: Piece | None = None) -> None:
        """Put *piece* on *sq* without any legality check.

        When *next_side* is given it becomes the side to move. Intended for
        setting up positions, not for play.
        """
        piece = Piece(piece)
        if next_side == Piece.EMPTY:
            raise ValueError("Side to move must be black or white")
        self._place(sq, piece)
        if next_side is not None and next_side != self.side_to_move:
            self.side_to_move = Piece(next_side)
            self._zobrist_hash ^= zobrist_side_to_move_key()
        self._invalidate()

    # ── Move limit ───────────────────────────────────────────────────────

    @property
    def move_limit(self) -> int:
        """Half-moves (both sides combined) after which the game is drawn."""
        return self._move_limit

    def set_move_limit(self, limit: int) -> None:
        """Limit each side to *limit* moves; ``2 * limit`` must exceed :attr:`moves_made`."""
        if 2 * limit <= self.moves_made:
            _LOGGER.warning(
                "Rejected move limit %d: %d moves already made", limit, self.moves_made
            )
            raise MoveLimitError(
                f"Move limit too small: {limit} per side with "
                f"{self.moves_made} moves made"
            )
        self._move_limit = 2 * limit
        self._winner_known = False
        _LOGGER.debug("Move limit set to %d half-moves", self._move_limit)

    # ── Legality / generation ────────────────────────────────────────────

    def is_legal(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether *from_sq*-*to_sq* is legal for the side to move."""
        return MoveGenerator(self).is_legal(from_sq, to_sq)

    def is_legal_move(self, move: Move) -> bool:
        """Whether *move* is legal; ``move.is_capture`` is ignored."""
        return MoveGenerator(self).is_legal_move(move)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self).generate_legal_moves()

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply the legal *move*, pushing it onto the history stack."""
        if not self.is_legal_move(move):
            raise IllegalMoveError(f"Illegal move: {move}")

        is_capture = not self.board.is_empty(move.to_sq)
        if is_capture != move.is_capture:
            move = Move(move.from_sq, move.to_sq, is_capture)
        self._history.append(move)

        self._place(move.to_sq, self.board[move.from_sq])
        self._place(move.from_sq, Piece.EMPTY)
        self._switch_side()
        self._invalidate()

    def retract(self) -> Move:
        """Undo the last :meth:`make_move` and return the retracted move."""
        if not self._history:
            raise EmptyHistoryError("No moves to retract")
        move = self._history.pop()

        mover = self.board[move.to_sq]
        self._place(move.from_sq, mover)
        self._place(move.to_sq, mover.opposite if move.is_capture else Piece.EMPTY)
        self._switch_side()
        self._invalidate()
        return move

    @property
    def moves_made(self) -> int:
        """Moves made and not retracted."""
        return len(self._history)

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    # ── Game outcome ─────────────────────────────────────────────────────

    def region_sizes(self, side: Piece) -> list[int]:
        """Sizes of *side*'s connected groups, largest first."""
        black, white = self._compute_regions()
        return list(black if side == Piece.BLACK else white)

    def pieces_contiguous(self, side: Piece) -> bool:
        """Whether all of *side*'s pieces form a single group."""
        black, white = self._compute_regions()
        return len(black if side == Piece.BLACK else white) == 1

    def winner(self) -> Piece | None:
        """The winning side, ``Piece.EMPTY`` for a draw, ``None`` while in progress."""
        if not self._winner_known:
            black, white = self._compute_regions()
            self._winner = Rules.outcome(
                black, white, self.moves_made, self._move_limit
            )
            self._winner_known = True
            if self._winner is not None:
                _LOGGER.debug(
                    "Game decided after %d moves: %s",
                    self.moves_made,
                    GameResult.from_winner(self._winner).name,
                )
        return self._winner

    def result(self) -> GameResult:
        return GameResult.from_winner(self.winner())

    def is_game_over(self) -> bool:
        return self.winner() is not None

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy including history."""
        pos = Position(board=self.board, side_to_move=self.side_to_move)
        pos._move_limit = self._move_limit
        pos._history = self._history.copy()
        pos._zobrist_hash = self._zobrist_hash
        if self._regions is not None:
            pos._regions = (self._regions[0].copy(), self._regions[1].copy())
        pos._winner = self._winner
        pos._winner_known = self._winner_known
        return pos

    def clear(self) -> None:
        """Reset to the standard opening with black to move."""
        self.board = Board.initial()
        self.side_to_move = Piece.BLACK
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._history.clear()
        self._zobrist_hash = self._compute_zobrist_hash()
        self._invalidate()

    @property
    def zobrist_hash(self) -> int:
        """Current Zobrist key of the cells and side to move."""
        return self._zobrist_hash

    # ── Internal ─────────────────────────────────────────────────────────

    def _place(self, sq: Square, piece: Piece) -> None:
        board = self.board
        self._zobrist_hash ^= zobrist_piece_key(board[sq], sq)
        board[sq] = piece
        self._zobrist_hash ^= zobrist_piece_key(piece, sq)

    def _switch_side(self) -> None:
        self.side_to_move = self.side_to_move.opposite
        self._zobrist_hash ^= zobrist_side_to_move_key()

    def _invalidate(self) -> None:
        self._regions = None
        self._winner_known = False

    def _compute_regions(self) -> tuple[list[int], list[int]]:
        if self._regions is None:
            self._regions = (
                Rules.region_sizes(self.board, Piece.BLACK),
                Rules.region_sizes(self.board, Piece.WHITE),
            )
        return self._regions

    def _compute_zobrist_hash(self) -> int:
        key = 0
        if self.side_to_move == Piece.WHITE:
            key ^= zobrist_side_to_move_key()
        for sq in range(64):
            key ^= zobrist_piece_key(self.board[sq], sq)
        return key

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.side_to_move == other.side_to_move and self.board == other.board

    def __str__(self) -> str:
        lines = ["==="]
        for rank in range(7, -1, -1):
            cells = " ".join(self.board[make_square(f, rank)].abbrev for f in range(8))
            lines.append(f"    {cells}")
        lines.append(f"Next move: {self.side_to_move.full_name}")
        lines.append("===")
        return "\n".join(lines)
