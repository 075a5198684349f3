"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Sequence

from linesofaction.core.enums import Piece
from linesofaction.core.types import BOARD_SIZE, Square, make_square

_SIDE_COUNT = 2


class Board:
    """Mutable 64-square board with incremental per-side occupancy indexes."""

    __slots__ = ("_squares", "_side_bitboards")

    def __init__(self) -> None:
        self._squares: list[Piece] = [Piece.EMPTY] * 64
        # [side] -> bitboard of squares occupied by that side.
        self._side_bitboards: list[int] = [0] * _SIDE_COUNT

    @staticmethod
    def _squares_from_bitboard(bitboard: int) -> list[Square]:
        squares: list[Square] = []
        while bitboard:
            lsb = bitboard & -bitboard
            squares.append(lsb.bit_length() - 1)
            bitboard ^= lsb
        return squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        old_piece = self._squares[sq]
        if old_piece == piece:
            return

        mask = 1 << sq
        if old_piece != Piece.EMPTY:
            self._side_bitboards[old_piece] &= ~mask

        self._squares[sq] = piece

        if piece != Piece.EMPTY:
            self._side_bitboards[piece] |= mask

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] == Piece.EMPTY

    # -- Query helpers ------------------------------------------------------

    def pieces_bitboard(self, side: Piece) -> int:
        """Bitboard of all squares occupied by *side*."""
        return self._side_bitboards[side]

    def pieces(self, side: Piece) -> list[Square]:
        """Squares occupied by *side*, in index order."""
        return self._squares_from_bitboard(self.pieces_bitboard(side))

    def count(self, side: Piece) -> int:
        return self.pieces_bitboard(side).bit_count()

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._side_bitboards = self._side_bitboards.copy()
        return b

    def clear(self) -> None:
        self._squares = [Piece.EMPTY] * 64
        self._side_bitboards = [0] * _SIDE_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position.

        Black fills ranks 1 and 8 on files b–g, white fills files a and h on
        ranks 2–7; the four corners stay empty.
        """
        b = cls()
        for i in range(1, BOARD_SIZE - 1):
            b[make_square(i, 0)] = Piece.BLACK
            b[make_square(i, 7)] = Piece.BLACK
            b[make_square(0, i)] = Piece.WHITE
            b[make_square(7, i)] = Piece.WHITE
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece]]) -> Board:
        """Build a board from an 8x8 grid given bottom rank first.

        The result satisfies ``board[make_square(c, r)] == rows[r][c]``.
        """
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("Board layout must be 8x8")
        b = cls()
        for rank, row in enumerate(rows):
            for file, piece in enumerate(row):
                b[make_square(file, rank)] = Piece(piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [self[make_square(file, rank)].abbrev for file in range(8)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
