"""Attack patterns of every piece kind on 64-bit bitboards."""

from __future__ import annotations

from functools import lru_cache

from .bitutil import MASK64
from .types import Color

__all__ = [
    "NOT_A_FILE",
    "NOT_H_FILE",
    "NOT_AB_FILE",
    "NOT_GH_FILE",
    "NOT_1ST_RANK",
    "NOT_8TH_RANK",
    "RANK_1",
    "RANK_2",
    "RANK_7",
    "RANK_8",
    "PAWN_ATTACKS",
    "KNIGHT_ATTACKS",
    "KING_ATTACKS",
    "pawn_attacks",
    "knight_attacks",
    "king_attacks",
    "bishop_mask",
    "rook_mask",
    "bishop_attacks",
    "rook_attacks",
    "queen_attacks",
]

NOT_A_FILE = 0xFEFEFEFEFEFEFEFE
NOT_H_FILE = 0x7F7F7F7F7F7F7F7F
NOT_AB_FILE = 0xFCFCFCFCFCFCFCFC
NOT_GH_FILE = 0x3F3F3F3F3F3F3F3F
NOT_1ST_RANK = 0xFFFFFFFFFFFFFF00
NOT_8TH_RANK = 0x00FFFFFFFFFFFFFF
RANK_1 = 0xFF
RANK_2 = 0xFF00
RANK_7 = 0xFF000000000000
RANK_8 = 0xFF00000000000000

_BISHOP_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))
_ROOK_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def pawn_attacks(bitboard: int, color: int) -> int:
    """Squares attacked by all pawns of the given colour on the bitboard."""
    if int(color) == Color.WHITE:
        return (((bitboard & NOT_A_FILE) << 7) | ((bitboard & NOT_H_FILE) << 9)) & MASK64
    return ((bitboard & NOT_A_FILE) >> 9) | ((bitboard & NOT_H_FILE) >> 7)


def knight_attacks(bitboard: int) -> int:
    """Squares attacked by all knights on the bitboard."""
    return (
        ((bitboard & NOT_A_FILE) >> 17)
        | ((bitboard & NOT_H_FILE) >> 15)
        | ((bitboard & NOT_AB_FILE) >> 10)
        | ((bitboard & NOT_GH_FILE) >> 6)
        | ((bitboard & NOT_AB_FILE) << 6)
        | ((bitboard & NOT_GH_FILE) << 10)
        | ((bitboard & NOT_A_FILE) << 15)
        | ((bitboard & NOT_H_FILE) << 17)
    ) & MASK64


def king_attacks(bitboard: int) -> int:
    """Squares attacked by all kings on the bitboard."""
    return (
        ((bitboard & NOT_A_FILE) >> 9)
        | (bitboard >> 8)
        | ((bitboard & NOT_H_FILE) >> 7)
        | ((bitboard & NOT_A_FILE) >> 1)
        | ((bitboard & NOT_H_FILE) << 1)
        | ((bitboard & NOT_A_FILE) << 7)
        | (bitboard << 8)
        | ((bitboard & NOT_H_FILE) << 9)
    ) & MASK64


# Attacks of a single piece standing on each square.
PAWN_ATTACKS = (
    tuple(pawn_attacks(1 << square, Color.WHITE) for square in range(64)),
    tuple(pawn_attacks(1 << square, Color.BLACK) for square in range(64)),
)
KNIGHT_ATTACKS = tuple(knight_attacks(1 << square) for square in range(64))
KING_ATTACKS = tuple(king_attacks(1 << square) for square in range(64))


def _on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def _ray_attacks(square: int, occupancy: int, directions) -> int:
    file, rank = square % 8, square // 8
    attacks = 0
    for df, dr in directions:
        f, r = file + df, rank + dr
        while _on_board(f, r):
            bb = 1 << (r * 8 + f)
            attacks |= bb
            if occupancy & bb:
                break
            f += df
            r += dr
    return attacks


def _relevant_mask(square: int, directions) -> int:
    """Ray squares whose occupancy can block a slider; board edges excluded."""
    file, rank = square % 8, square // 8
    mask = 0
    for df, dr in directions:
        f, r = file + df, rank + dr
        while _on_board(f + df, r + dr):
            mask |= 1 << (r * 8 + f)
            f += df
            r += dr
    return mask


_BISHOP_MASKS = tuple(_relevant_mask(sq, _BISHOP_DIRECTIONS) for sq in range(64))
_ROOK_MASKS = tuple(_relevant_mask(sq, _ROOK_DIRECTIONS) for sq in range(64))


def _check_square(square: int) -> int:
    value = int(square)
    if not 0 <= value < 64:
        raise ValueError(f"square index out of range: {square!r}")
    return value


def bishop_mask(square: int) -> int:
    """Squares whose occupancy matters for a bishop on the square."""
    return _BISHOP_MASKS[_check_square(square)]


def rook_mask(square: int) -> int:
    """Squares whose occupancy matters for a rook on the square."""
    return _ROOK_MASKS[_check_square(square)]


@lru_cache(maxsize=None)
def _bishop_lookup(square: int, blockers: int) -> int:
    return _ray_attacks(square, blockers, _BISHOP_DIRECTIONS)


@lru_cache(maxsize=None)
def _rook_lookup(square: int, blockers: int) -> int:
    return _ray_attacks(square, blockers, _ROOK_DIRECTIONS)


def bishop_attacks(square: int, occupancy: int) -> int:
    """Squares a bishop on the square attacks, blockers included."""
    return _bishop_lookup(square, occupancy & _BISHOP_MASKS[square])


def rook_attacks(square: int, occupancy: int) -> int:
    """Squares a rook on the square attacks, blockers included."""
    return _rook_lookup(square, occupancy & _ROOK_MASKS[square])


def queen_attacks(square: int, occupancy: int) -> int:
    """Squares a queen on the square attacks, blockers included."""
    return bishop_attacks(square, occupancy) | rook_attacks(square, occupancy)