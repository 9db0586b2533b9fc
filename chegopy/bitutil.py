"""Bit helpers for 64-bit bitboards."""

from __future__ import annotations

from typing import Iterator

__all__ = ["MASK64", "bit_scan", "pop_lsb", "iter_bits", "count_bits"]

MASK64 = 0xFFFF_FFFF_FFFF_FFFF


def bit_scan(bitboard: int) -> int:
    """Index of the least significant set bit; 63 for an empty bitboard."""
    bitboard &= MASK64
    if not bitboard:
        return 63
    return (bitboard & -bitboard).bit_length() - 1


def pop_lsb(bitboard: int) -> tuple[int, int]:
    """Return the index of the lowest set bit and the bitboard without it.

    An empty bitboard gives index 63 and stays empty.
    """
    bitboard &= MASK64
    return bit_scan(bitboard), bitboard & (bitboard - 1) & MASK64


def iter_bits(bitboard: int) -> Iterator[int]:
    """Yield the indices of the set bits from lowest to highest."""
    bitboard &= MASK64
    while bitboard:
        low = bitboard & -bitboard
        yield low.bit_length() - 1
        bitboard ^= low


def count_bits(bitboard: int) -> int:
    """Number of set bits in the bitboard."""
    return (bitboard & MASK64).bit_count()