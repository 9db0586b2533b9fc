import pytest

from chegopy.types import (
    PIECE_SYMBOLS,
    Castling,
    Color,
    Move,
    MoveType,
    Piece,
    Promotion,
    new_move,
    new_promotion_move,
    piece_color,
    piece_symbol,
)


@pytest.mark.parametrize("move_type", list(MoveType))
@pytest.mark.parametrize("to, origin", [(0, 0), (28, 12), (63, 0), (0, 63), (62, 4)])
def test_new_move_round_trip(to, origin, move_type):
    move = new_move(to, origin, move_type)
    assert move.to() == to
    assert move.origin() == origin
    assert move.move_type() == move_type
    assert move.promo_piece() == Promotion.QUEEN


@pytest.mark.parametrize("promo", list(Promotion))
def test_new_promotion_move_round_trip(promo):
    move = new_promotion_move(57, 49, promo)
    assert move.to() == 57
    assert move.origin() == 49
    assert move.promo_piece() == promo
    assert move.move_type() == MoveType.PROMOTION


def test_move_fits_sixteen_bits():
    move = new_move(63, 63, MoveType.EN_PASSANT)
    assert 0 <= move <= 0xFFFF
    assert Move(int(move) + 0x10000) == move


def test_moves_compare_as_integers():
    assert new_move(28, 12, MoveType.NORMAL) == new_move(28, 12, MoveType.NORMAL)
    assert new_move(28, 12, MoveType.NORMAL) != new_move(20, 12, MoveType.NORMAL)


def test_piece_symbols_follow_table():
    assert [piece_symbol(p) for p in Piece if p != Piece.NONE] == list(PIECE_SYMBOLS)
    assert piece_symbol(Piece.W_KNIGHT) == "N"
    assert piece_symbol(Piece.B_KING) == "k"


def test_piece_colour_alternates():
    for piece in Piece:
        if piece == Piece.NONE:
            continue
        expected = Color.WHITE if piece_symbol(piece).isupper() else Color.BLACK
        assert piece_color(piece) == expected


@pytest.mark.parametrize("bad", [Piece.NONE, 12, -5])
def test_invalid_piece_rejected(bad):
    with pytest.raises(ValueError):
        piece_symbol(bad)
    with pytest.raises(ValueError):
        piece_color(bad)


def test_castling_rights_from_value():
    rights = Castling(0xF)
    assert rights == Castling.ALL
    assert rights & ~Castling.WHITE_LONG == 0xD
    assert Castling(0x1) == Castling.WHITE_SHORT
    assert Castling(0x8) == Castling.BLACK_LONG