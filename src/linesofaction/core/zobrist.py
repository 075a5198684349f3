"""Zobrist hashing keys for incremental position hashing."""

from __future__ import annotations

from typing import Final

from linesofaction.core.enums import Piece
from linesofaction.core.types import Square

_SEED: Final = 0x6C0A5D3B9E71F24C
_MASK_64: Final = 0xFFFFFFFFFFFFFFFF


def _splitmix64(state: int) -> int:
    """Deterministic 64-bit bit-mixer suitable for static key generation."""
    z = (state + 0x9E3779B97F4A7C15) & _MASK_64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK_64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK_64
    return z ^ (z >> 31)


def _nth_key(index: int) -> int:
    return _splitmix64(_SEED + index)


_PIECE_KEYS: Final = tuple(
    tuple(_nth_key((side * 64) + sq) for sq in range(64)) for side in range(2)
)
_SIDE_TO_MOVE_KEY: Final = _nth_key(2 * 64)


def piece_key(piece: Piece, sq: Square) -> int:
    """Hash key for a piece on a square; empty cells contribute nothing."""
    if piece == Piece.EMPTY:
        return 0
    return _PIECE_KEYS[piece][sq]


def side_to_move_key() -> int:
    """Hash toggle key applied while white is to move."""
    return _SIDE_TO_MOVE_KEY
