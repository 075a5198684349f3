"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from linesofaction.core.board import Board
from linesofaction.core.enums import Piece
from linesofaction.core.position import Position
from linesofaction.core.types import parse_square

PositionFactory = Callable[..., Position]


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from square names on an otherwise empty board."""

    def _make(
        black: Iterable[str] = (),
        white: Iterable[str] = (),
        side_to_move: Piece = Piece.BLACK,
    ) -> Position:
        board = Board()
        for name in black:
            board[parse_square(name)] = Piece.BLACK
        for name in white:
            board[parse_square(name)] = Piece.WHITE
        return Position(board, side_to_move)

    return _make
