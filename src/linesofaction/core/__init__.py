"""Core domain layer — pure Lines of Action rules with zero external dependencies.

Quick start::

    from linesofaction.core import Position

    pos = Position()
    for move in pos.legal_moves():
        print(move)
"""

from linesofaction.core.board import Board
from linesofaction.core.enums import GameResult, Piece
from linesofaction.core.errors import (
    EmptyHistoryError,
    IllegalMoveError,
    LinesOfActionError,
    MoveLimitError,
)
from linesofaction.core.move import Move
from linesofaction.core.move_generator import MoveGenerator
from linesofaction.core.notation import (
    STARTING_LAYOUT,
    position_from_text,
    position_to_text,
)
from linesofaction.core.position import DEFAULT_MOVE_LIMIT, Position
from linesofaction.core.rules import Rules
from linesofaction.core.types import (
    Direction,
    Square,
    direction,
    distance,
    file_of,
    is_aligned,
    make_square,
    move_dest,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Direction",
    "GameResult",
    "Piece",
    # Types / helpers
    "Square",
    "direction",
    "distance",
    "file_of",
    "is_aligned",
    "make_square",
    "move_dest",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "DEFAULT_MOVE_LIMIT",
    "Move",
    "MoveGenerator",
    "Position",
    "Rules",
    # Errors
    "EmptyHistoryError",
    "IllegalMoveError",
    "LinesOfActionError",
    "MoveLimitError",
    # Notation
    "STARTING_LAYOUT",
    "position_from_text",
    "position_to_text",
]
