"""Bitboard chess rules: move generation, FEN, UCI notation, game state and perft."""

__version__ = "0.1.0"