"""Board state and the application of moves to it."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field

from .bitutil import MASK64, bit_scan
from .squares import (
    A1,
    A8,
    C1,
    C8,
    CASTLING_ATTACK_PATH,
    CASTLING_PATH,
    D1,
    D8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
)
from .types import Castling, Color, Move, MoveType, Piece

__all__ = [
    "Position",
    "BITBOARD_COUNT",
    "WHITE_PIECES",
    "BLACK_PIECES",
    "OCCUPANCY",
]

# Twelve piece bitboards followed by white pieces, black pieces and all pieces.
BITBOARD_COUNT = 15
WHITE_PIECES = 12
BLACK_PIECES = 13
OCCUPANCY = 14

# King destination square -> (rook, rook origin, rook destination).
_CASTLING_ROOKS = {
    G1: (Piece.W_ROOK, H1, F1),
    G8: (Piece.B_ROOK, H8, F8),
    C1: (Piece.W_ROOK, A1, D1),
    C8: (Piece.B_ROOK, A8, D8),
}

# Rook origin squares whose departure removes a castling right.
_ROOK_RIGHTS = {
    (Piece.W_ROOK, A1): Castling.WHITE_LONG,
    (Piece.W_ROOK, H1): Castling.WHITE_SHORT,
    (Piece.B_ROOK, A8): Castling.BLACK_LONG,
    (Piece.B_ROOK, H8): Castling.BLACK_SHORT,
}

_KING_RIGHTS = {
    Piece.W_KING: Castling.WHITE_SHORT | Castling.WHITE_LONG,
    Piece.B_KING: Castling.BLACK_SHORT | Castling.BLACK_LONG,
}


def _without(rights: int, flags: int) -> Castling:
    return Castling(int(rights) & ~int(flags) & int(Castling.ALL))


@dataclass
class Position:
    """A chessboard state that maps one to one onto a FEN string."""

    bitboards: list[int] = field(default_factory=lambda: [0] * BITBOARD_COUNT)
    active_color: Color = Color.WHITE
    castling_rights: Castling = Castling.NONE
    ep_target: int = 0
    halfmove_cnt: int = 0
    fullmove_cnt: int = 0

    def __post_init__(self) -> None:
        self.bitboards = [int(bb) & MASK64 for bb in self.bitboards]
        if len(self.bitboards) != BITBOARD_COUNT:
            raise ValueError(
                f"expected {BITBOARD_COUNT} bitboards, got {len(self.bitboards)}"
            )
        self.active_color = Color(self.active_color)
        self.castling_rights = Castling(int(self.castling_rights) & int(Castling.ALL))

    def copy(self) -> "Position":
        """Independent copy of the position."""
        return _copy.deepcopy(self)

    def piece_at(self, square_bb: int) -> Piece:
        """Piece standing on the square given as a bitboard, or Piece.NONE."""
        for piece in range(Piece.W_PAWN, Piece.B_KING + 1):
            if square_bb & self.bitboards[piece]:
                return Piece(piece)
        return Piece.NONE

    def can_castle(self, side: int, attacks: int, occupancy: int) -> bool:
        """Whether the king may castle on the given side.

        ``side`` is one of the single Castling flags; ``attacks`` are the
        squares the enemy attacks and ``occupancy`` the occupied squares with
        the king itself removed.
        """
        index = bit_scan(int(side))
        return (
            bool(int(self.castling_rights) & int(side))
            and attacks & CASTLING_ATTACK_PATH[index] == 0
            and occupancy & CASTLING_PATH[index] == 0
        )

    def make_move(self, move: int) -> None:
        """Apply a pseudo-legal move, updating every part of the position."""
        move = Move(move)
        to_sq, from_sq = move.to(), move.origin()
        to_bb, from_bb = 1 << to_sq, 1 << from_sq
        piece = self.piece_at(from_bb)
        if piece is Piece.NONE:
            raise ValueError(f"no piece on origin square {from_sq}")
        captured = self.piece_at(to_bb)
        color = self.active_color

        self._remove(piece, from_bb)
        self.halfmove_cnt += 1

        # En passant captures are handled below: the captured pawn is not
        # on the destination square.
        if captured is not Piece.NONE:
            self._remove(captured, to_bb)
            self.halfmove_cnt = 0

        kind = move.move_type()
        if kind is MoveType.NORMAL:
            self._place(piece, to_bb)
        elif kind is MoveType.EN_PASSANT:
            self._place(piece, to_bb)
            if piece is Piece.W_PAWN:
                self._remove(Piece.B_PAWN, to_bb >> 8)
            else:
                self._remove(Piece.W_PAWN, (to_bb << 8) & MASK64)
        elif kind is MoveType.CASTLING:
            self._place(piece, to_bb)
            rook_move = _CASTLING_ROOKS.get(to_sq)
            if rook_move is not None:
                rook, rook_from, rook_to = rook_move
                self._remove(rook, 1 << rook_from)
                self._place(rook, 1 << rook_to)
        else:
            promoted = Piece.W_KNIGHT + 2 * int(move.promo_piece()) + int(color)
            self._place(promoted, to_bb)

        self.ep_target = 0

        if piece in (Piece.W_PAWN, Piece.B_PAWN):
            if to_sq + 16 == from_sq:
                self.ep_target = to_sq + 8
            elif to_sq - 16 == from_sq:
                self.ep_target = to_sq - 8
            self.halfmove_cnt = 0
        elif (piece, from_sq) in _ROOK_RIGHTS:
            self.castling_rights = _without(
                self.castling_rights, _ROOK_RIGHTS[(piece, from_sq)]
            )
        elif piece in _KING_RIGHTS:
            self.castling_rights = _without(self.castling_rights, _KING_RIGHTS[piece])

        if color is Color.BLACK:
            self.fullmove_cnt += 1

        self.active_color = Color(int(color) ^ 1)

    def _place(self, piece: int, square_bb: int) -> None:
        self.bitboards[piece] |= square_bb
        self.bitboards[WHITE_PIECES + piece % 2] |= square_bb
        self.bitboards[OCCUPANCY] |= square_bb

    def _remove(self, piece: int, square_bb: int) -> None:
        # Toggles the bits: on an empty square this places the piece.
        self.bitboards[piece] ^= square_bb
        self.bitboards[WHITE_PIECES + piece % 2] ^= square_bb
        self.bitboards[OCCUPANCY] ^= square_bb