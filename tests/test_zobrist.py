import pytest

from chegopy.fen import parse_fen
from chegopy.squares import B1, C3, C6, B8, F3, G1, INITIAL_POS
from chegopy.types import MoveType, new_move
from chegopy.zobrist import ZobristHasher

SAMPLE_FENS = [
    INITIAL_POS,
    "4k3/8/8/8/8/8/8/4K3 w - - 0 1",
    "4k3/8/8/8/8/8/8/4K3 b - - 0 1",
    "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1",
]


@pytest.fixture
def hasher():
    return ZobristHasher(1234)


def test_same_seed_gives_same_keys():
    positions = [parse_fen(fen) for fen in SAMPLE_FENS]
    first = [ZobristHasher(7).key(position) for position in positions]
    second = [ZobristHasher(7).key(position) for position in positions]
    assert first == second
    assert len(set(first)) == len(SAMPLE_FENS)


def test_different_seeds_give_different_keys():
    position = parse_fen(INITIAL_POS)
    assert ZobristHasher(1).key(position) != ZobristHasher(2).key(position)


def test_returning_to_a_position_gives_its_key():
    hasher = ZobristHasher()
    start = parse_fen(INITIAL_POS)
    expected = hasher.key(start)
    position = start.copy()
    for move in (
        new_move(F3, G1, MoveType.NORMAL),
        new_move(C6, B8, MoveType.NORMAL),
        new_move(G1, F3, MoveType.NORMAL),
        new_move(B8, C6, MoveType.NORMAL),
    ):
        position.make_move(move)
    assert position.fullmove_cnt == 3
    assert hasher.key(position) == expected


def test_key_fits_in_64_bits(hasher):
    key = hasher.key(parse_fen(INITIAL_POS))
    assert 0 <= key < 1 << 64


def test_side_to_move_changes_key(hasher):
    white = parse_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
    black = parse_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
    assert hasher.key(white) != hasher.key(black)
    assert hasher.key(white) ^ hasher.key(black) == hasher.color_key


def test_en_passant_target_changes_key(hasher):
    without = parse_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1")
    with_ep = parse_fen("rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1")
    assert hasher.key(without) != hasher.key(with_ep)


def test_castling_rights_change_key(hasher):
    full = parse_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    partial = parse_fen("r3k2r/8/8/8/8/8/8/R3K2R w Kq - 0 1")
    assert hasher.key(full) != hasher.key(partial)


def test_counters_do_not_change_key(hasher):
    first = parse_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
    later = parse_fen("4k3/8/8/8/8/8/8/4K3 w - - 12 40")
    assert hasher.key(first) == hasher.key(later)


def test_piece_placement_changes_key(hasher):
    first = parse_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
    moved = parse_fen("4k3/8/8/8/8/8/8/3K4 w - - 0 1")
    assert hasher.key(first) != hasher.key(moved)


def test_transposition_gives_same_key(hasher):
    first = parse_fen(INITIAL_POS)
    for move in (
        new_move(F3, G1, MoveType.NORMAL),
        new_move(C6, B8, MoveType.NORMAL),
        new_move(C3, B1, MoveType.NORMAL),
    ):
        first.make_move(move)
    second = parse_fen(INITIAL_POS)
    for move in (
        new_move(C3, B1, MoveType.NORMAL),
        new_move(C6, B8, MoveType.NORMAL),
        new_move(F3, G1, MoveType.NORMAL),
    ):
        second.make_move(move)
    assert hasher.key(first) == hasher.key(second)


def test_key_does_not_modify_position(hasher):
    position = parse_fen(INITIAL_POS)
    before = list(position.bitboards)
    hasher.key(position)
    assert position.bitboards == before