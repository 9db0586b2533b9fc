"""Legal move generation."""

from __future__ import annotations

import dataclasses
from itertools import chain
from typing import Iterator, Sequence

from .attacks import (
    KING_ATTACKS,
    KNIGHT_ATTACKS,
    PAWN_ATTACKS,
    RANK_1,
    RANK_2,
    RANK_7,
    RANK_8,
    bishop_attacks,
    king_attacks,
    knight_attacks,
    pawn_attacks,
    queen_attacks,
    rook_attacks,
)
from .bitutil import MASK64, bit_scan, iter_bits
from .position import OCCUPANCY, WHITE_PIECES, Position
from .squares import A1, A8, C1, C8, G1, G8, H1, H8
from .types import (
    Castling,
    Color,
    Move,
    MoveType,
    Piece,
    Promotion,
    new_move,
    new_promotion_move,
)

__all__ = ["gen_legal_moves", "checks_count", "attacked_squares"]

_PROMOTIONS = (Promotion.KNIGHT, Promotion.BISHOP, Promotion.ROOK, Promotion.QUEEN)

# Per colour: (castling side, rook square, king destination).
_CASTLES = (
    ((Castling.WHITE_SHORT, H1, G1), (Castling.WHITE_LONG, A1, C1)),
    ((Castling.BLACK_SHORT, H8, G8), (Castling.BLACK_LONG, A8, C8)),
)

_SLIDER_ATTACKS = {
    Piece.W_BISHOP: bishop_attacks,
    Piece.W_ROOK: rook_attacks,
    Piece.W_QUEEN: queen_attacks,
}


def gen_legal_moves(position: Position) -> list[Move]:
    """All legal moves of the side to move, king moves first."""
    color = int(position.active_color)
    moves = _king_moves(position)
    if checks_count(position.bitboards, color ^ 1) > 2:
        return moves

    for move in chain(_pawn_moves(position), _normal_moves(position)):
        after = dataclasses.replace(position, bitboards=list(position.bitboards))
        after.make_move(move)
        if checks_count(after.bitboards, color ^ 1) == 0:
            moves.append(move)
    return moves


def checks_count(bitboards: Sequence[int], color: int) -> int:
    """Number of piece kinds of the given colour checking the enemy king."""
    color = int(color)
    king = bit_scan(bitboards[Piece.W_KING + (color ^ 1)])
    occupancy = bitboards[OCCUPANCY]
    threats = (
        (PAWN_ATTACKS[color ^ 1][king], Piece.W_PAWN),
        (KNIGHT_ATTACKS[king], Piece.W_KNIGHT),
        (bishop_attacks(king, occupancy), Piece.W_BISHOP),
        (rook_attacks(king, occupancy), Piece.W_ROOK),
        (queen_attacks(king, occupancy), Piece.W_QUEEN),
    )
    return sum(1 for attacks, piece in threats if attacks & bitboards[piece + color])


def attacked_squares(bitboards: Sequence[int], color: int) -> int:
    """Squares attacked by the pieces of the given colour.

    The enemy king should be left out of the occupancy bitboard so that
    sliders attack through it; otherwise the king could step back along
    a checking line.
    """
    color = int(color)
    occupancy = bitboards[OCCUPANCY]
    attacks = 0
    for base, lookup in _SLIDER_ATTACKS.items():
        for square in iter_bits(bitboards[base + color]):
            attacks |= lookup(square, occupancy)
    attacks |= pawn_attacks(bitboards[Piece.W_PAWN + color], color)
    attacks |= knight_attacks(bitboards[Piece.W_KNIGHT + color])
    attacks |= king_attacks(bitboards[Piece.W_KING + color])
    return attacks


def _king_moves(position: Position) -> list[Move]:
    color = int(position.active_color)
    bitboards = position.bitboards
    king_piece = Piece.W_KING + color
    king_bb = bitboards[king_piece]

    without_king = list(bitboards)
    without_king[king_piece] ^= king_bb
    without_king[WHITE_PIECES + color] ^= king_bb
    without_king[OCCUPANCY] ^= king_bb
    attacked = attacked_squares(without_king, color ^ 1)

    king = bit_scan(king_bb)
    dests = KING_ATTACKS[king] & ~attacked & ~bitboards[WHITE_PIECES + color] & MASK64
    moves = [new_move(to, king, MoveType.NORMAL) for to in iter_bits(dests)]

    occupancy = bitboards[OCCUPANCY] ^ king_bb
    rook_bb = bitboards[Piece.W_ROOK + color]
    for side, rook_square, destination in _CASTLES[color]:
        if position.can_castle(side, attacked, occupancy) and rook_bb >> rook_square & 1:
            moves.append(new_move(destination, king, MoveType.CASTLING))
    return moves


def _pawn_moves(position: Position) -> Iterator[Move]:
    color = int(position.active_color)
    bitboards = position.bitboards
    occupancy = bitboards[OCCUPANCY]
    ep = 1 << position.ep_target if position.ep_target > 0 else 0
    enemies = bitboards[WHITE_PIECES + (color ^ 1)]

    if color == Color.WHITE:
        step, init_rank, promo_rank = 8, RANK_2, RANK_8
    else:
        step, init_rank, promo_rank = -8, RANK_7, RANK_1

    for pawn in iter_bits(bitboards[Piece.W_PAWN + color]):
        forward = pawn + step
        if 0 <= forward < 64 and not occupancy >> forward & 1:
            if promo_rank >> forward & 1:
                for promo in _PROMOTIONS:
                    yield new_promotion_move(forward, pawn, promo)
            else:
                yield new_move(forward, pawn, MoveType.NORMAL)
            double = pawn + 2 * step
            if init_rank >> pawn & 1 and not occupancy >> double & 1:
                yield new_move(double, pawn, MoveType.NORMAL)

        for to in iter_bits(PAWN_ATTACKS[color][pawn] & (enemies | ep)):
            if promo_rank >> to & 1:
                for promo in _PROMOTIONS:
                    yield new_promotion_move(to, pawn, promo)
            elif ep >> to & 1:
                yield new_move(to, pawn, MoveType.EN_PASSANT)
            else:
                yield new_move(to, pawn, MoveType.NORMAL)


def _normal_moves(position: Position) -> Iterator[Move]:
    color = int(position.active_color)
    bitboards = position.bitboards
    allies = bitboards[WHITE_PIECES + color]
    occupancy = bitboards[OCCUPANCY]

    for base in (Piece.W_KNIGHT, Piece.W_BISHOP, Piece.W_ROOK, Piece.W_QUEEN):
        for origin in iter_bits(bitboards[base + color]):
            if base == Piece.W_KNIGHT:
                dests = KNIGHT_ATTACKS[origin]
            else:
                dests = _SLIDER_ATTACKS[base](origin, occupancy)
            for to in iter_bits(dests & ~allies & MASK64):
                yield new_move(to, origin, MoveType.NORMAL)