"""Tests for Move and Piece value objects."""

import pytest

from linesofaction.core.enums import Piece
from linesofaction.core.move import Move
from linesofaction.core.types import A1, A3, B1, H1


class TestMove:
    def test_str(self) -> None:
        assert str(Move(B1, H1)) == "b1-h1"

    def test_structural_equality(self) -> None:
        assert Move(A1, A3) == Move(A1, A3)
        assert Move(A1, A3) != Move(A1, A3, is_capture=True)
        assert len({Move(A1, A3), Move(A1, A3)}) == 1

    def test_between(self) -> None:
        assert Move.between("a1", "a3", True) == Move(A1, A3, True)
        with pytest.raises(ValueError):
            Move.between("a1", "z9")


class TestPiece:
    def test_opposite(self) -> None:
        assert Piece.BLACK.opposite == Piece.WHITE
        assert Piece.WHITE.opposite == Piece.BLACK
        assert Piece.EMPTY.opposite == Piece.EMPTY

    def test_abbrev_roundtrip(self) -> None:
        for piece in Piece:
            assert Piece.from_char(piece.abbrev) == piece

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_names(self) -> None:
        assert str(Piece.BLACK) == "black"
        assert Piece.WHITE.full_name == "white"
