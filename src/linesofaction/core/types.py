"""Square type alias, compass directions and board geometry helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Final, TypeAlias

Square: TypeAlias = int  # 0–63

BOARD_SIZE: Final = 8

# Pattern describing a valid square designator (file letter, rank digit).
SQUARE_PATTERN: Final = re.compile(r"^[a-h][1-8]$")


class Direction(IntEnum):
    """The eight compass directions, clockwise from north."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    @property
    def opposite(self) -> Direction:
        return Direction((self.value + 4) % 8)

    @property
    def delta(self) -> tuple[int, int]:
        """(file, rank) step taken by one move in this direction."""
        return _DELTAS[self.value]


_DELTAS: Final = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * 8 + file


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chr(ord("a") + file_of(sq)) + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if not SQUARE_PATTERN.fullmatch(name):
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


# ── Geometry ────────────────────────────────────────────────────────────────


def direction(from_sq: Square, to_sq: Square) -> Direction | None:
    """Direction leading from *from_sq* to *to_sq*.

    ``None`` when the squares coincide or do not share a row, column or
    diagonal.
    """
    df = file_of(to_sq) - file_of(from_sq)
    dr = rank_of(to_sq) - rank_of(from_sq)
    if df == 0 and dr == 0:
        return None
    if df != 0 and dr != 0 and abs(df) != abs(dr):
        return None
    step = ((df > 0) - (df < 0), (dr > 0) - (dr < 0))
    return Direction(_DELTAS.index(step))


def distance(from_sq: Square, to_sq: Square) -> int:
    """Chebyshev distance between two squares."""
    return max(
        abs(file_of(to_sq) - file_of(from_sq)),
        abs(rank_of(to_sq) - rank_of(from_sq)),
    )


def is_aligned(from_sq: Square, to_sq: Square) -> bool:
    """Whether the squares are distinct and share a row, column or diagonal."""
    return direction(from_sq, to_sq) is not None


def move_dest(sq: Square, dir_: Direction, steps: int) -> Square | None:
    """Square reached after *steps* moves in *dir_*, or ``None`` off the board."""
    df, dr = dir_.delta
    f = file_of(sq) + df * steps
    r = rank_of(sq) + dr * steps
    if not (0 <= f < BOARD_SIZE and 0 <= r < BOARD_SIZE):
        return None
    return make_square(f, r)


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for dir_ in Direction:
            ray_squares: list[Square] = []
            steps = 1
            dest = move_dest(sq, dir_, steps)
            while dest is not None:
                ray_squares.append(dest)
                steps += 1
                dest = move_dest(sq, dir_, steps)
            square_rays.append(tuple(ray_squares))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_RAYS: Final = _build_rays()
_ADJACENT: Final = tuple(
    tuple(square_rays[0] for square_rays in rays if square_rays) for rays in _RAYS
)


def ray(sq: Square, dir_: Direction) -> tuple[Square, ...]:
    """Squares from *sq* (exclusive) to the board edge in *dir_*, nearest first."""
    return _RAYS[sq][dir_]


def adjacent(sq: Square) -> tuple[Square, ...]:
    """The up-to-eight squares touching *sq*."""
    return _ADJACENT[sq]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
