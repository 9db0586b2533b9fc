"""Game state management: move history, repetitions, draws and clocks."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from .bitutil import count_bits
from .fen import parse_fen, serialize_fen
from .movegen import checks_count, gen_legal_moves
from .position import Position
from .squares import INITIAL_POS
from .types import Color, Move, MoveType, Piece, Result
from .zobrist import ZobristHasher

__all__ = ["CompletedMove", "Game"]

_DARK_SQUARES = 0xAA55AA55AA55AA55

_PIECE_VALUES = {
    Piece.W_PAWN: 1,
    Piece.B_PAWN: 1,
    Piece.W_KNIGHT: 3,
    Piece.B_KNIGHT: 3,
    Piece.W_BISHOP: 3,
    Piece.B_BISHOP: 3,
    Piece.W_ROOK: 5,
    Piece.B_ROOK: 5,
    Piece.W_QUEEN: 9,
    Piece.B_QUEEN: 9,
}


@dataclass(frozen=True)
class CompletedMove:
    """A played move with the board state after it and the mover's clock."""

    fen_string: str
    move: Move
    time_left: int


class Game:
    """A single chess game, starting from the standard position."""

    def __init__(self, hasher: ZobristHasher | None = None) -> None:
        self._hasher = hasher if hasher is not None else ZobristHasher()
        self._start_fen = INITIAL_POS
        self.position: Position = parse_fen(self._start_fen)
        self.legal_moves: list[Move] = gen_legal_moves(self.position)
        self.move_stack: list[CompletedMove] = []
        self.captured: list[Piece] = []
        self.repetitions: Counter[int] = Counter()
        self.white_time = 0
        self.black_time = 0
        self.time_bonus = 0
        self.clock_running = False
        self.result = Result.UNSCORED
        self.repetitions[self._hasher.key(self.position)] += 1

    @property
    def hasher(self) -> ZobristHasher:
        """The hasher used to key repeated positions."""
        return self._hasher

    def push_move(self, move: int) -> None:
        """Play a move, assumed legal, and generate the replies to it."""
        move = Move(move)
        moved = self.position.piece_at(1 << move.origin())
        captured = self.position.piece_at(1 << move.to())

        self.position.make_move(move)

        # Irreversible moves make earlier positions unreachable.
        if captured is not Piece.NONE:
            self.captured.append(captured)
            self.repetitions.clear()
        elif (
            move.move_type() in (MoveType.CASTLING, MoveType.PROMOTION)
            or moved <= Piece.B_PAWN
        ):
            self.repetitions.clear()

        time_left = self.white_time if moved % 2 == 0 else self.black_time
        self.move_stack.append(
            CompletedMove(
                fen_string=serialize_fen(self.position),
                move=move,
                time_left=time_left,
            )
        )

        self.legal_moves = gen_legal_moves(self.position)

        # An en passant target with no en passant capture would make
        # otherwise identical positions hash differently.
        if not any(m.move_type() is MoveType.EN_PASSANT for m in self.legal_moves):
            self.position.ep_target = 0

        self.repetitions[self._hasher.key(self.position)] += 1

    def pop_move(self) -> None:
        """Take back the last move; does nothing when no move was played."""
        if not self.move_stack:
            return

        self.repetitions[self._hasher.key(self.position)] -= 1
        self.move_stack.pop()

        if not self.move_stack:
            self.position = parse_fen(self._start_fen)
            self.white_time = self.black_time
        else:
            last = self.move_stack[-1]
            self.position = parse_fen(last.fen_string)
            if len(self.move_stack) % 2 == 0:
                self.white_time = last.time_left
            else:
                self.black_time = last.time_left

        self.legal_moves = gen_legal_moves(self.position)

    def is_threefold_repetition(self) -> bool:
        """Whether some position has occurred at least three times."""
        return any(count >= 3 for count in self.repetitions.values())

    def is_insufficient_material(self) -> bool:
        """Whether neither side has enough material to checkmate.

        True for bare kings, a single minor piece against a bare king,
        bishops of both sides on squares of the same colour, or a knight
        on each side.
        """
        bitboards = self.position.bitboards
        material = self._material()

        if material == 0:
            return True

        if material == 3 and not bitboards[Piece.W_PAWN] and not bitboards[Piece.B_PAWN]:
            return True

        if material == 6:
            white_bishops = bitboards[Piece.W_BISHOP]
            black_bishops = bitboards[Piece.B_BISHOP]
            same_colored_bishops = (
                white_bishops != 0
                and black_bishops != 0
                and bool(white_bishops & _DARK_SQUARES) == bool(black_bishops & _DARK_SQUARES)
            )
            two_knights = bitboards[Piece.W_KNIGHT] != 0 and bitboards[Piece.B_KNIGHT] != 0
            return same_colored_bishops or two_knights

        return False

    def is_checkmate(self) -> bool:
        """Whether the side to move is in check and has no legal moves."""
        in_check = checks_count(
            self.position.bitboards, int(self.position.active_color) ^ 1
        ) > 0
        return in_check and not self.legal_moves

    def is_move_legal(self, move: int) -> bool:
        """Whether the move is among the legal moves of the side to move."""
        return Move(move) in self.legal_moves

    def set_clock(self, time_control: int, time_bonus: int) -> None:
        """Give both players time_control seconds and start the clock."""
        self.white_time = time_control
        self.black_time = time_control
        self.time_bonus = time_bonus
        self.clock_running = True

    def time_tick(self) -> None:
        """Take one second from the clock of the side to move."""
        if self.position.active_color == Color.WHITE:
            self.white_time -= 1
        else:
            self.black_time -= 1

    def _material(self) -> int:
        bitboards = self.position.bitboards
        return sum(
            count_bits(bitboards[piece]) * value for piece, value in _PIECE_VALUES.items()
        )