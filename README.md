# chegopy

A chess rules library built on 64-bit bitboards, with no dependencies
outside the standard library. It provides:

- legal move generation, including castling, en passant and promotions
  (`chegopy.movegen`), with attack patterns for every piece kind in
  `chegopy.attacks`;
- FEN parsing and serialization (`chegopy.fen`);
- long algebraic (UCI) move notation (`chegopy.uci`);
- a `Game` object (`chegopy.game`) that keeps the move stack, captured
  pieces and player clocks, and detects checkmate, threefold repetition
  (through Zobrist hashing, `chegopy.zobrist`) and insufficient material;
- a perft tool for checking the move generator (`chegopy.perft`).

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from chegopy.fen import parse_fen, serialize_fen
from chegopy.movegen import gen_legal_moves
from chegopy.uci import move_to_uci
from chegopy.squares import E2, E4
from chegopy.types import MoveType, new_move
from chegopy.game import Game

position = parse_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
print(len(gen_legal_moves(position)))        # 20

position.make_move(new_move(E4, E2, MoveType.NORMAL))
print(serialize_fen(position))
# rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1

game = Game()
move = new_move(E4, E2, MoveType.NORMAL)
if game.is_move_legal(move):
    game.push_move(move)
print([move_to_uci(m) for m in game.legal_moves][:3])
print(game.is_checkmate(), game.is_threefold_repetition())
game.pop_move()
```

A `Move` is an `int` packed into 16 bits: bits 0–5 hold the destination
square (`Move.to()`), bits 6–11 the origin square (`Move.origin()`), bits
12–13 the promotion piece (`Move.promo_piece()`) and bits 14–15 the move
type (`Move.move_type()`). Build moves with `new_move` and
`new_promotion_move`. Squares are numbered 0 (a1) to 63 (h8); the names
`A1` … `H8` in `chegopy.squares` hold these indices.

A `Position` holds fifteen bitboards: one per piece kind (indexed by
`Piece`), then white pieces, black pieces and all pieces. `make_move`
applies a pseudo-legal move in place and raises `ValueError` if the origin
square is empty; `copy` returns an independent copy.

`parse_fen` raises `FenError` (a `ValueError`) when the string does not have
six fields, the halfmove or fullmove counter is not a number, the placement
holds an unknown piece symbol or leaves the board, or the en passant field is
not a square or `-`.

### Repetitions

`Game` takes an optional `ZobristHasher`. `ZobristHasher(seed)` draws its
keys from a seeded random source, so two hashers with the same seed give the
same keys; without a seed the keys are random.

### Clocks

`Game.set_clock(time_control, time_bonus)` gives both players
`time_control` seconds, stores the bonus and sets `clock_running`.
`Game.time_tick()` takes one second from the player to move. The clock does
not run by itself: the caller calls `time_tick()` once a second and ends the
game when a clock runs out.

## Perft

The `chegopy-perft` command counts the leaf nodes of the legal move tree from
the initial position:

```
chegopy-perft --depth 4
chegopy-perft --depth 3 --verbose
```

Options (each also accepted with a single dash):

- `--depth N`: tree depth, 2 by default.
- `--verbose`: log each root move with its node count, a board diagram, and
  totals for captures, en passant captures, castles, promotions, checks and
  double checks.
- `--cpuprofile FILE`: write call counts and total time per function.
- `--memprofile FILE`: write a `tracemalloc` snapshot.

The same is available from Python as `perft(position, depth)` and
`perft_verbose(position, depth, stats, is_root)` with a `PerftStats`.

## What it does not do

The package knows the rules of chess only. It does not evaluate or search
positions, does not speak the UCI engine protocol beyond writing moves in
UCI notation, and does not read or write standard algebraic notation or PGN.