import pytest

from chegopy import squares
from chegopy.squares import (
    ALL_SQUARES,
    CASTLING_ATTACK_PATH,
    CASTLING_PATH,
    FILES,
    SQUARE_NAMES,
    square_bb,
    square_name,
)


def test_corner_names():
    assert square_name(squares.A1) == "a1"
    assert square_name(squares.H8) == "h8"
    assert square_name(squares.E4) == "e4"


def test_square_bitboards_cover_board_once():
    total = 0
    for sq in range(64):
        bb = square_bb(sq)
        assert total & bb == 0
        total |= bb
    assert total == ALL_SQUARES


def test_square_bb_matches_index():
    assert square_bb(squares.A1) == 1
    assert square_bb(squares.H8) == 1 << 63


def test_names_are_unique_and_ordered():
    assert len(set(SQUARE_NAMES)) == 64
    for sq in range(64):
        name = square_name(sq)
        assert FILES.index(name[0]) == sq % 8
        assert int(name[1]) == sq // 8 + 1


@pytest.mark.parametrize("bad", [-1, 64, 100])
def test_out_of_range_rejected(bad):
    with pytest.raises(ValueError):
        square_bb(bad)
    with pytest.raises(ValueError):
        square_name(bad)


def test_castling_paths_contain_king_square():
    e1 = square_bb(squares.E1)
    e8 = square_bb(squares.E8)
    for path in CASTLING_PATH[:2]:
        assert path & e1 == e1
    for path in CASTLING_PATH[2:]:
        assert path & e8 == e8


def test_castling_attack_path_within_path():
    for attack, path in zip(CASTLING_ATTACK_PATH, CASTLING_PATH):
        assert attack & ~path == 0
    b1 = square_bb(squares.B1)
    assert CASTLING_ATTACK_PATH[1] & b1 == 0
    assert CASTLING_PATH[1] & b1 == b1


def test_initial_position_fields():
    fields = squares.INITIAL_POS.split(" ")
    assert len(fields) == 6
    assert fields[1] == "w"
    assert fields[2] == "KQkq"