"""High-level rules: connectivity analysis, win and draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesofaction.core.enums import Piece
from linesofaction.core.types import adjacent

if TYPE_CHECKING:
    from linesofaction.core.board import Board


class Rules:
    """Static rule-checker for the connectivity win condition."""

    @staticmethod
    def region_sizes(board: Board, side: Piece) -> list[int]:
        """Sizes of *side*'s 8-connected groups, largest first."""
        remaining = board.pieces_bitboard(side)
        sizes: list[int] = []
        while remaining:
            seed = (remaining & -remaining).bit_length() - 1
            remaining &= ~(1 << seed)
            stack = [seed]
            size = 0
            while stack:
                sq = stack.pop()
                size += 1
                for neighbour in adjacent(sq):
                    mask = 1 << neighbour
                    if remaining & mask:
                        remaining &= ~mask
                        stack.append(neighbour)
            sizes.append(size)
        sizes.sort(reverse=True)
        return sizes

    @staticmethod
    def outcome(
        black_regions: list[int],
        white_regions: list[int],
        moves_made: int,
        move_limit: int,
    ) -> Piece | None:
        """Winner given both sides' region sizes.

        A side with a single group wins (black checked first). Otherwise the
        game is drawn (``Piece.EMPTY``) once the move limit is reached, and
        still in progress (``None``) before that.
        """
        if len(black_regions) == 1:
            return Piece.BLACK
        if len(white_regions) == 1:
            return Piece.WHITE
        if moves_made >= move_limit:
            return Piece.EMPTY
        return None
