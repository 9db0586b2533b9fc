"""Board squares, their names and fixed board geometry."""

from __future__ import annotations

__all__ = [
    "INITIAL_POS",
    "ALL_SQUARES",
    "FILES",
    "SQUARE_NAMES",
    "CASTLING_PATH",
    "CASTLING_ATTACK_PATH",
    "square_bb",
    "square_name",
]

INITIAL_POS = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

ALL_SQUARES = 0xFFFF_FFFF_FFFF_FFFF

FILES = "abcdefgh"

# Square indices, A1 = 0 through H8 = 63.
A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)

SQUARE_NAMES = tuple(f"{file}{rank}" for rank in "12345678" for file in FILES)

# Squares between king and rook that must be empty, including the king
# square, for white O-O, white O-O-O, black O-O and black O-O-O.
CASTLING_PATH = (0x70, 0x1E, 0x7000000000000000, 0x1E00000000000000)

# Squares the king passes through that must not be attacked, in the same order.
CASTLING_ATTACK_PATH = (0x70, 0x1C, 0x7000000000000000, 0x1C00000000000000)


def _check_square(square: int) -> int:
    value = int(square)
    if not 0 <= value < 64:
        raise ValueError(f"square index out of range: {square!r}")
    return value


def square_bb(square: int) -> int:
    """Bitboard with only the given square set."""
    return 1 << _check_square(square)


def square_name(square: int) -> str:
    """Algebraic name of the square, such as 'e4'."""
    return SQUARE_NAMES[_check_square(square)]