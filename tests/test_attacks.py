import random

import pytest

from chegopy.attacks import (
    NOT_A_FILE,
    NOT_AB_FILE,
    NOT_H_FILE,
    NOT_GH_FILE,
    RANK_1,
    RANK_2,
    RANK_8,
    bishop_attacks,
    bishop_mask,
    king_attacks,
    knight_attacks,
    pawn_attacks,
    queen_attacks,
    rook_attacks,
    rook_mask,
)
from chegopy.bitutil import count_bits, iter_bits
from chegopy.squares import A1, A3, A4, B3, C2, D4, D5, H1
from chegopy.types import Color

BISHOP_BIT_COUNT = [
    6, 5, 5, 5, 5, 5, 5, 6,
    5, 5, 5, 5, 5, 5, 5, 5,
    5, 5, 7, 7, 7, 7, 5, 5,
    5, 5, 7, 9, 9, 7, 5, 5,
    5, 5, 7, 9, 9, 7, 5, 5,
    5, 5, 7, 7, 7, 7, 5, 5,
    5, 5, 5, 5, 5, 5, 5, 5,
    6, 5, 5, 5, 5, 5, 5, 6,
]

ROOK_BIT_COUNT = [
    12, 11, 11, 11, 11, 11, 11, 12,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    11, 10, 10, 10, 10, 10, 10, 11,
    12, 11, 11, 11, 11, 11, 11, 12,
]


@pytest.mark.parametrize("square", range(64))
def test_mask_bit_counts_match_tables(square):
    assert count_bits(bishop_mask(square)) == BISHOP_BIT_COUNT[square]
    assert count_bits(rook_mask(square)) == ROOK_BIT_COUNT[square]


def test_masks_are_subsets_of_empty_board_attacks():
    for square in range(64):
        assert bishop_mask(square) & ~bishop_attacks(square, 0) == 0
        assert rook_mask(square) & ~rook_attacks(square, 0) == 0
        assert bishop_mask(square) >> square & 1 == 0


def test_mask_rejects_bad_square():
    with pytest.raises(ValueError):
        bishop_mask(64)
    with pytest.raises(ValueError):
        rook_mask(-1)


def test_knight_from_a1():
    assert knight_attacks(1 << A1) == (1 << B3) | (1 << C2)


def test_white_pawns_on_second_rank():
    assert pawn_attacks(RANK_2, Color.WHITE) == 0xFF0000


def test_pawn_attacks_color_inverse():
    for square in range(8, 56):
        for target in iter_bits(pawn_attacks(1 << square, Color.WHITE)):
            assert pawn_attacks(1 << target, Color.BLACK) >> square & 1 == 1


def test_knight_and_king_do_not_wrap():
    h_file = ~NOT_H_FILE
    a_file = ~NOT_A_FILE
    for square in range(7, 64, 8):
        assert knight_attacks(1 << square) & ~NOT_AB_FILE == 0
        assert king_attacks(1 << square) & a_file == 0
    for square in range(0, 64, 8):
        assert knight_attacks(1 << square) & ~NOT_GH_FILE == 0
        assert king_attacks(1 << square) & h_file == 0


def test_king_attacks_symmetric():
    for square in range(64):
        for target in iter_bits(king_attacks(1 << square)):
            assert king_attacks(1 << target) >> square & 1 == 1
        for target in iter_bits(knight_attacks(1 << square)):
            assert knight_attacks(1 << target) >> square & 1 == 1


def test_setwise_attacks_are_union_of_single():
    bitboard = RANK_1 | RANK_8
    expected = 0
    for square in iter_bits(bitboard):
        expected |= king_attacks(1 << square)
    assert king_attacks(bitboard) == expected


def test_sliders_symmetric_on_empty_board():
    for square in range(64):
        for target in iter_bits(queen_attacks(square, 0)):
            assert queen_attacks(target, 0) >> square & 1 == 1
        assert queen_attacks(square, 0) >> square & 1 == 0


def test_rook_blocker_included_and_stops_ray():
    attacks = rook_attacks(A1, 1 << A3)
    assert attacks >> A3 & 1 == 1
    assert attacks >> A4 & 1 == 0
    assert attacks >> H1 & 1 == 1


def test_occupancy_outside_mask_is_ignored():
    rng = random.Random(7)
    for _ in range(200):
        square = rng.randrange(64)
        occupancy = rng.getrandbits(64)
        assert rook_attacks(square, occupancy) == rook_attacks(
            square, occupancy & rook_mask(square)
        )
        assert bishop_attacks(square, occupancy) == bishop_attacks(
            square, occupancy & bishop_mask(square)
        )


def test_queen_is_union_of_bishop_and_rook():
    occupancy = (1 << B3) | (1 << D5)
    assert queen_attacks(D4, occupancy) == bishop_attacks(D4, occupancy) | rook_attacks(
        D4, occupancy
    )
    assert bishop_attacks(D4, occupancy) & rook_attacks(D4, occupancy) == 0