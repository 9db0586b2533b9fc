"""Conversion between FEN strings and positions.

A FEN string has six space separated fields: piece placement, active
colour, castling rights, en passant target, halfmove clock and fullmove
number.
"""

from __future__ import annotations

from typing import Sequence

from .bitutil import iter_bits
from .position import BITBOARD_COUNT, OCCUPANCY, WHITE_PIECES, Position
from .squares import FILES
from .types import PIECE_SYMBOLS, Castling, Color, Piece

__all__ = [
    "FenError",
    "parse_fen",
    "serialize_fen",
    "parse_bitboards",
    "serialize_bitboards",
    "parse_square",
]

_SYMBOL_PIECES = {symbol: Piece(index) for index, symbol in enumerate(PIECE_SYMBOLS)}

_CASTLING_SYMBOLS = (
    ("K", Castling.WHITE_SHORT),
    ("Q", Castling.WHITE_LONG),
    ("k", Castling.BLACK_SHORT),
    ("q", Castling.BLACK_LONG),
)


class FenError(ValueError):
    """Raised for a FEN string that cannot be parsed."""


def parse_fen(fen: str) -> Position:
    """Parse a full FEN string into a Position."""
    fields = fen.split(" ", 5)
    if len(fields) != 6:
        raise FenError(f"FEN string must have six fields: {fen!r}")
    placement, color, castling, ep, halfmove, fullmove = fields

    rights = Castling.NONE
    for symbol, flag in _CASTLING_SYMBOLS:
        if symbol in castling:
            rights |= flag

    try:
        halfmove_cnt = int(halfmove)
    except ValueError:
        raise FenError("cannot parse halfmove counter from FEN string") from None
    try:
        fullmove_cnt = int(fullmove)
    except ValueError:
        raise FenError("cannot parse fullmove counter from FEN string") from None

    return Position(
        bitboards=parse_bitboards(placement),
        active_color=Color.BLACK if color == "b" else Color.WHITE,
        castling_rights=rights,
        ep_target=parse_square(ep),
        halfmove_cnt=halfmove_cnt,
        fullmove_cnt=fullmove_cnt,
    )


def serialize_fen(position: Position) -> str:
    """Serialize a Position into a full FEN string."""
    color = "w" if position.active_color == Color.WHITE else "b"
    rights = "".join(
        symbol
        for symbol, flag in _CASTLING_SYMBOLS
        if int(position.castling_rights) & int(flag)
    ) or "-"
    if position.ep_target == 0:
        ep = "-"
    else:
        ep = f"{FILES[position.ep_target % 8]}{position.ep_target // 8 + 1}"
    return " ".join(
        (
            serialize_bitboards(position.bitboards),
            color,
            rights,
            ep,
            str(position.halfmove_cnt),
            str(position.fullmove_cnt),
        )
    )


def parse_bitboards(placement: str) -> list[int]:
    """Convert the piece placement field into the fifteen bitboards."""
    bitboards = [0] * BITBOARD_COUNT
    square = 56  # Placement starts from the eighth rank.
    for char in placement:
        if char == "/":
            square -= 16
        elif "1" <= char <= "8":
            square += int(char)
        else:
            piece = _SYMBOL_PIECES.get(char)
            if piece is None:
                raise FenError(f"unknown piece symbol {char!r} in {placement!r}")
            if not 0 <= square < 64:
                raise FenError(f"piece placement leaves the board: {placement!r}")
            bb = 1 << square
            bitboards[piece] |= bb
            bitboards[WHITE_PIECES + piece % 2] |= bb
            bitboards[OCCUPANCY] |= bb
            square += 1
    return bitboards


def serialize_bitboards(bitboards: Sequence[int]) -> str:
    """Convert the piece bitboards into the piece placement field."""
    board: list[str | None] = [None] * 64
    for piece, symbol in enumerate(PIECE_SYMBOLS):
        for square in iter_bits(bitboards[piece]):
            board[square] = symbol

    rows = []
    for rank in range(7, -1, -1):
        parts = []
        empty = 0
        for symbol in board[rank * 8 : rank * 8 + 8]:
            if symbol is None:
                empty += 1
                continue
            if empty:
                parts.append(str(empty))
                empty = 0
            parts.append(symbol)
        if empty:
            parts.append(str(empty))
        rows.append("".join(parts))
    return "/".join(rows)


def parse_square(text: str) -> int:
    """Parse a square name such as 'e3' into its index; '-' gives 0."""
    if text.startswith("-"):
        return 0
    if len(text) < 2 or text[0] not in FILES or not "1" <= text[1] <= "8":
        raise FenError(f"not a square: {text!r}")
    return FILES.index(text[0]) + (int(text[1]) - 1) * 8