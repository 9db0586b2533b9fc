"""Zobrist hashing of positions, used to detect repeated positions."""

from __future__ import annotations

import random

from .bitutil import iter_bits
from .position import Position
from .types import Color, Piece

__all__ = ["ZobristHasher"]


class ZobristHasher:
    """Hashes positions into 64-bit keys built from pseudo-random numbers.

    Two hashers made with the same seed produce the same keys.  Without a
    seed the keys are drawn from a fresh random source.
    """

    def __init__(self, seed: int | None = None) -> None:
        rng = random.Random(seed)
        self.piece_keys: tuple[tuple[int, ...], ...] = tuple(
            tuple(rng.getrandbits(64) for _ in range(64))
            for _ in range(Piece.W_PAWN, Piece.B_KING + 1)
        )
        self.ep_keys: tuple[int, ...] = tuple(rng.getrandbits(64) for _ in range(64))
        self.castling_keys: tuple[int, ...] = tuple(
            rng.getrandbits(64) for _ in range(16)
        )
        # Mixed in only when black is to move.
        self.color_key: int = rng.getrandbits(64)

    def key(self, position: Position) -> int:
        """Hash the position into a 64-bit key; the position is not changed."""
        key = 0
        for piece, squares in enumerate(self.piece_keys):
            for square in iter_bits(position.bitboards[piece]):
                key ^= squares[square]
        key ^= self.ep_keys[position.ep_target]
        key ^= self.castling_keys[int(position.castling_rights)]
        if position.active_color == Color.BLACK:
            key ^= self.color_key
        return key