"""Universal Chess Interface move notation."""

from __future__ import annotations

from .squares import square_name
from .types import Move, MoveType, Promotion

__all__ = ["move_to_uci"]

_PROMOTION_SYMBOLS = {
    Promotion.KNIGHT: "n",
    Promotion.BISHOP: "b",
    Promotion.ROOK: "r",
    Promotion.QUEEN: "q",
}


def move_to_uci(move: int) -> str:
    """Long algebraic form of the move, such as 'e2e4' or 'e7e8q'."""
    move = Move(move)
    text = square_name(move.origin()) + square_name(move.to())
    if move.move_type() is MoveType.PROMOTION:
        text += _PROMOTION_SYMBOLS[move.promo_piece()]
    return text