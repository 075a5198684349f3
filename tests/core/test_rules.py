"""Tests for Rules: connectivity, win and draw detection."""

from linesofaction.core.board import Board
from linesofaction.core.enums import GameResult, Piece
from linesofaction.core.move import Move
from linesofaction.core.position import Position
from linesofaction.core.rules import Rules


class TestRegionSizes:
    def test_opening_regions(self) -> None:
        pos = Position()
        assert pos.region_sizes(Piece.BLACK) == [6, 6]
        assert pos.region_sizes(Piece.WHITE) == [6, 6]

    def test_sorted_largest_first(self, make_position) -> None:
        pos = make_position(black=["h8", "a1", "a2", "b3", "e5", "f4"])
        assert pos.region_sizes(Piece.BLACK) == [3, 2, 1]

    def test_diagonal_contact_connects(self) -> None:
        board = Board()
        for sq in (0, 9, 18, 27):  # a1, b2, c3, d4
            board[sq] = Piece.WHITE
        assert Rules.region_sizes(board, Piece.WHITE) == [4]

    def test_sizes_partition_pieces(self) -> None:
        pos = Position()
        for _ in range(5):
            pos.make_move(pos.legal_moves()[0])
            for side in (Piece.BLACK, Piece.WHITE):
                assert sum(pos.region_sizes(side)) == pos.board.count(side)

    def test_no_pieces_means_no_regions(self) -> None:
        assert Rules.region_sizes(Board(), Piece.BLACK) == []

    def test_returned_list_is_a_copy(self) -> None:
        pos = Position()
        pos.region_sizes(Piece.BLACK).append(99)
        assert pos.region_sizes(Piece.BLACK) == [6, 6]


class TestWinner:
    def test_opening_in_progress(self) -> None:
        pos = Position()
        assert pos.winner() is None
        assert not pos.is_game_over()
        assert pos.result() == GameResult.IN_PROGRESS

    def test_single_cluster_wins(self, make_position) -> None:
        pos = make_position(
            black=["a1", "a2", "b1", "b2"], white=["d4", "f6", "h8", "d8"]
        )
        assert pos.pieces_contiguous(Piece.BLACK)
        assert not pos.pieces_contiguous(Piece.WHITE)
        assert pos.winner() == Piece.BLACK
        assert pos.is_game_over()
        assert pos.result() == GameResult.BLACK_WINS

    def test_white_cluster_wins(self, make_position) -> None:
        pos = make_position(black=["a1", "c1"], white=["e5", "f6"])
        assert pos.winner() == Piece.WHITE
        assert pos.result() == GameResult.WHITE_WINS

    def test_both_contiguous_black_reported_first(self, make_position) -> None:
        pos = make_position(black=["a1"], white=["h8"])
        assert pos.winner() == Piece.BLACK

    def test_winning_move_and_retract(self, make_position) -> None:
        pos = make_position(black=["a1", "c1"], white=["h8", "h6"])
        assert pos.winner() is None
        pos.make_move(Move.between("c1", "b2"))
        assert pos.winner() == Piece.BLACK
        pos.retract()
        assert pos.winner() is None

    def test_repeated_queries_agree(self) -> None:
        pos = Position()
        first = pos.winner()
        assert pos.winner() == first
        assert pos.region_sizes(Piece.WHITE) == pos.region_sizes(Piece.WHITE)


class TestMoveLimitDraw:
    def test_draw_at_limit(self) -> None:
        pos = Position()
        pos.set_move_limit(1)
        pos.make_move(Move.between("b1", "b3"))
        assert pos.winner() is None
        pos.make_move(Move.between("a2", "c2"))
        assert pos.moves_made == pos.move_limit
        assert pos.winner() == Piece.EMPTY
        assert pos.result() == GameResult.DRAW
        assert pos.is_game_over()

    def test_retract_below_limit_resumes(self) -> None:
        pos = Position()
        pos.set_move_limit(1)
        pos.make_move(Move.between("b1", "b3"))
        pos.make_move(Move.between("a2", "c2"))
        assert pos.winner() == Piece.EMPTY
        pos.retract()
        assert pos.winner() is None

    def test_contiguous_side_beats_limit(self, make_position) -> None:
        pos = make_position(black=["a1", "c1"], white=["h8", "h6"])
        pos.set_move_limit(1)
        pos.make_move(Move.between("c1", "b2"))
        pos.make_move(Move.between("h8", "g8"))
        assert pos.moves_made >= pos.move_limit
        assert pos.winner() == Piece.BLACK

    def test_raising_limit_reopens_game(self) -> None:
        pos = Position()
        pos.set_move_limit(1)
        pos.make_move(Move.between("b1", "b3"))
        pos.make_move(Move.between("a2", "c2"))
        assert pos.winner() == Piece.EMPTY
        pos.set_move_limit(2)
        assert pos.winner() is None


class TestGameResult:
    def test_from_winner(self) -> None:
        assert GameResult.from_winner(None) == GameResult.IN_PROGRESS
        assert GameResult.from_winner(Piece.EMPTY) == GameResult.DRAW
        assert GameResult.from_winner(Piece.BLACK) == GameResult.BLACK_WINS
        assert GameResult.from_winner(Piece.WHITE) == GameResult.WHITE_WINS

    def test_winner_inverse(self) -> None:
        for result in GameResult:
            assert GameResult.from_winner(result.winner) == result
