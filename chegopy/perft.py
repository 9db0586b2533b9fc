"""Perft: counting the leaf nodes of the legal move tree, for debugging."""

from __future__ import annotations

import argparse
import contextlib
import dataclasses
import logging
import sys
import time
import tracemalloc
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from .fen import parse_fen
from .movegen import checks_count, gen_legal_moves
from .position import Position
from .squares import INITIAL_POS, square_name
from .types import PIECE_SYMBOLS, Castling, Color, Move, MoveType, Piece
from .uci import move_to_uci

__all__ = ["PerftStats", "perft", "perft_verbose", "format_position", "main"]

logger = logging.getLogger(__name__)

_CASTLING_SYMBOLS = (
    ("K", Castling.WHITE_SHORT),
    ("Q", Castling.WHITE_LONG),
    ("k", Castling.BLACK_SHORT),
    ("q", Castling.BLACK_LONG),
)


@dataclass
class PerftStats:
    """Counters gathered while walking the move tree verbosely."""

    nodes: int = 0
    captures: int = 0
    ep_captures: int = 0
    castles: int = 0
    promotions: int = 0
    checks: int = 0
    double_checks: int = 0
    checkmates: int = 0


class _CallProfiler:
    """Collects call counts and inclusive wall time for each Python function."""

    def __init__(self) -> None:
        self._calls: Counter[str] = Counter()
        self._elapsed: Counter[str] = Counter()
        self._stack: list[tuple[str, int]] = []

    def _hook(self, frame, event, arg) -> None:
        if event == "call":
            code = frame.f_code
            name = f"{code.co_filename}:{code.co_firstlineno}({code.co_name})"
            self._stack.append((name, time.perf_counter_ns()))
        elif event == "return" and self._stack:
            name, started = self._stack.pop()
            self._calls[name] += 1
            self._elapsed[name] += time.perf_counter_ns() - started

    def __enter__(self) -> _CallProfiler:
        sys.setprofile(self._hook)
        return self

    def __exit__(self, *exc_info) -> None:
        sys.setprofile(None)

    def dump(self, path: str) -> None:
        """Write the collected figures, slowest functions first."""
        with open(path, "w", encoding="utf-8") as out:
            out.write("calls\ttotal_ns\tfunction\n")
            for name, total in self._elapsed.most_common():
                out.write(f"{self._calls[name]}\t{total}\t{name}\n")


def _check_depth(depth: int) -> None:
    if depth < 1:
        raise ValueError(f"perft depth must be at least 1, got {depth}")


def _after(position: Position, move: Move) -> Position:
    child = dataclasses.replace(position, bitboards=list(position.bitboards))
    child.make_move(move)
    return child


def perft(position: Position, depth: int) -> int:
    """Number of leaf nodes of the legal move tree of the given depth."""
    _check_depth(depth)
    moves = gen_legal_moves(position)
    if depth == 1:
        return len(moves)
    return sum(perft(_after(position, move), depth - 1) for move in moves)


def perft_verbose(
    position: Position, depth: int, stats: PerftStats, is_root: bool = False
) -> int:
    """Like perft, but also fills stats and logs the node count per root move."""
    _check_depth(depth)
    moves = gen_legal_moves(position)
    if depth == 1:
        return len(moves)

    mover = int(position.active_color)
    nodes = 0
    for move in moves:
        if position.piece_at(1 << move.to()) is not Piece.NONE:
            stats.captures += 1

        child = _after(position, move)

        checks = checks_count(child.bitboards, mover ^ 1)
        if checks > 0:
            stats.checks += 1
        if checks > 1:
            stats.double_checks += 1

        count = perft_verbose(child, depth - 1, stats, False)
        if is_root:
            logger.info("%s %d", move_to_uci(move), count)
        nodes += count

        kind = move.move_type()
        if kind is MoveType.CASTLING:
            stats.castles += 1
        elif kind is MoveType.EN_PASSANT:
            stats.ep_captures += 1
        elif kind is MoveType.PROMOTION:
            stats.promotions += 1

    return nodes


def format_position(position: Position) -> str:
    """Render the board and the position's state as text."""
    lines = []
    for rank in range(7, -1, -1):
        cells = []
        for file in range(8):
            square_bb = 1 << (8 * rank + file)
            symbol = next(
                (
                    PIECE_SYMBOLS[piece]
                    for piece in range(Piece.W_PAWN, Piece.B_KING + 1)
                    if square_bb & position.bitboards[piece]
                ),
                ".",
            )
            cells.append(f"{symbol}  ")
        lines.append(f"{rank + 1}  " + "".join(cells))

    color = "white" if position.active_color == Color.WHITE else "black"
    ep = "none" if position.ep_target == 0 else square_name(position.ep_target)
    rights = "".join(
        symbol
        for symbol, flag in _CASTLING_SYMBOLS
        if int(position.castling_rights) & int(flag)
    )
    lines.append("   a  b  c  d  e  f  g  h")
    lines.append(f"Active color: {color}")
    lines.append(f"En passant: {ep}")
    lines.append(f"Castling rights: {rights}")
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perft", description="Count the leaf nodes of the move tree."
    )
    parser.add_argument(
        "-depth", "--depth", type=int, default=2, help="Performance test depth"
    )
    parser.add_argument(
        "-verbose",
        "--verbose",
        action="store_true",
        help="Whether to print the debug info",
    )
    parser.add_argument(
        "-cpuprofile", "--cpuprofile", default="", help="File to write a cpu profile"
    )
    parser.add_argument(
        "-memprofile",
        "--memprofile",
        default="",
        help="File to write a memory profile",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run perft from the initial position and report nodes and elapsed time."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    stats = PerftStats()
    position = parse_fen(INITIAL_POS)

    profiler = _CallProfiler() if args.cpuprofile else None
    if args.memprofile:
        tracemalloc.start()

    start = time.perf_counter_ns()
    try:
        with profiler if profiler is not None else contextlib.nullcontext():
            if args.verbose:
                stats.nodes = perft_verbose(position, args.depth, stats, True)
            else:
                stats.nodes = perft(position, args.depth)
    finally:
        if profiler is not None:
            profiler.dump(args.cpuprofile)
        if args.memprofile:
            tracemalloc.take_snapshot().dump(args.memprofile)
            tracemalloc.stop()
    elapsed = time.perf_counter_ns() - start

    if args.verbose:
        logger.info(
            "\nRoot position:\n%s\n\n\t%s\n",
            format_position(parse_fen(INITIAL_POS)),
            INITIAL_POS,
        )
        logger.info(
            "\t%d\t%d\t\t%d\t%d\t%d\t%d\t%d\t%d\t%d\t",
            args.depth,
            stats.nodes,
            stats.captures,
            stats.ep_captures,
            stats.castles,
            stats.promotions,
            stats.checks,
            stats.double_checks,
            stats.checkmates,
        )
    else:
        logger.info("Nodes reached: %d", stats.nodes)
    logger.info("Elapsed time: %d ns", elapsed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())