"""Core value types: pieces, colours, move encoding and game results."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "Piece",
    "Color",
    "MoveType",
    "Promotion",
    "Castling",
    "Result",
    "Move",
    "MAX_MOVES",
    "PIECE_SYMBOLS",
    "new_move",
    "new_promotion_move",
    "piece_symbol",
    "piece_color",
]

# Largest number of legal moves any chess position can have.
MAX_MOVES = 218

# Symbol of each piece, indexed by the piece value.
PIECE_SYMBOLS = "PpNnBbRrQqKk"


class Piece(IntEnum):
    """Piece kinds; white pieces are even, black pieces are odd."""

    W_PAWN = 0
    B_PAWN = 1
    W_KNIGHT = 2
    B_KNIGHT = 3
    W_BISHOP = 4
    B_BISHOP = 5
    W_ROOK = 6
    B_ROOK = 7
    W_QUEEN = 8
    B_QUEEN = 9
    W_KING = 10
    B_KING = 11
    NONE = -1


class Color(IntEnum):
    """Side colours."""

    WHITE = 0
    BLACK = 1
    BOTH = 2


class MoveType(IntEnum):
    """Kinds of move stored in the top two bits of a move."""

    NORMAL = 0
    CASTLING = 1
    PROMOTION = 2
    EN_PASSANT = 3


class Promotion(IntEnum):
    """Promotion piece stored in bits 12-13 of a move."""

    KNIGHT = 0
    BISHOP = 1
    ROOK = 2
    QUEEN = 3


class Castling(IntFlag):
    """Castling rights bits."""

    NONE = 0
    WHITE_SHORT = 1
    WHITE_LONG = 2
    BLACK_SHORT = 4
    BLACK_LONG = 8
    ALL = 15


class Result(IntEnum):
    """Possible outcomes of a game."""

    UNSCORED = 0
    CHECKMATE = 1
    TIMEOUT = 2
    STALEMATE = 3
    INSUFFICIENT_MATERIAL = 4
    FIFTY_MOVE = 5
    THREEFOLD_REPETITION = 6
    RESIGNATION = 7
    DRAW_BY_AGREEMENT = 8


class Move(int):
    """A move packed into 16 bits.

    Bits 0-5 hold the destination square, 6-11 the origin square,
    12-13 the promotion piece and 14-15 the move type.
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "Move":
        return super().__new__(cls, int(value) & 0xFFFF)

    def to(self) -> int:
        """Destination square index."""
        return self & 0x3F

    def origin(self) -> int:
        """Origin square index."""
        return (self >> 6) & 0x3F

    def promo_piece(self) -> Promotion:
        """Promotion piece encoded in the move."""
        return Promotion((self >> 12) & 0x3)

    def move_type(self) -> MoveType:
        """Kind of the move."""
        return MoveType((self >> 14) & 0x3)

    def __repr__(self) -> str:
        return (
            f"Move(to={self.to()}, origin={self.origin()}, "
            f"promo={self.promo_piece().name}, type={self.move_type().name})"
        )


def new_move(to: int, origin: int, move_type: int) -> Move:
    """Build a move whose promotion piece is set to the queen."""
    return Move(
        int(to) | (int(origin) << 6) | (Promotion.QUEEN << 12) | (int(move_type) << 14)
    )


def new_promotion_move(to: int, origin: int, promo_piece: int) -> Move:
    """Build a promotion move to the given promotion piece."""
    return Move(
        int(to)
        | (int(origin) << 6)
        | (int(promo_piece) << 12)
        | (MoveType.PROMOTION << 14)
    )


def _check_piece(piece: int) -> int:
    value = int(piece)
    if not Piece.W_PAWN <= value <= Piece.B_KING:
        raise ValueError(f"not a piece: {piece!r}")
    return value


def piece_symbol(piece: int) -> str:
    """FEN symbol of the piece: upper case for white, lower case for black."""
    return PIECE_SYMBOLS[_check_piece(piece)]


def piece_color(piece: int) -> Color:
    """Colour of the piece."""
    return Color(_check_piece(piece) % 2)