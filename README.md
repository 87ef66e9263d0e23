# connect4

Connect Four in a resizable pygame window. You play red. A computer opponent answers each of your moves with yellow.

## Installing

```
pip install .
```

## Playing

```
connect4
```

Controls:

- `←` / `A` and `→` / `D`, or moving the mouse, choose a column.
- `Space`, `S`, `↓` or a left click drops a chip into the chosen column.
- `R` restarts the game.
- `Q` or closing the window quits.

A chip drawn above the board marks the chosen column. When the game ends, a status line under the menu names the winner or says it was a tie. You can resize the window, and the board and preview scale to fit it. The chips are drawn as coloured circles.

The game also writes to standard output:

- After each computer move, it prints how many positions the search evaluated and the score it found.
- When a game ends, it prints the result, for example `Red won!` or `Tie game!`.

## Using the engine directly

The game logic runs without a window:

```python
from connect4.board import Board
from connect4.solver import Solver

board = Board()
solver = Solver(1_000_000)

board.add_chip(3)                  # red plays the centre column
reply = solver.choose_move(board)  # the computer picks a column for yellow
board.add_chip(reply)
print(board.cell(3, 0), board.key())
```

The modules:

- `connect4.board.Board` keeps the 7×6 grid as a bitboard. It has these methods:
  - `can_add`
  - `add_chip`: raises `ValueError` for a column that is out of range or full.
  - `is_winning_move`
  - `is_full`
  - `cell`: returns `"red"`, `"yellow"` or `None`.
  - `key`
  - `copy`
  - `reset`
- `connect4.solver.Solver` runs a depth-limited negamax search with alpha-beta pruning.
  - It tries columns from the centre outwards (`eval_order()`).
  - It caches scores in a `connect4.table.TranspositionTable`.
  - `choose_move` raises `ValueError` when no legal move is left.
- `connect4.session.GameSession` holds the state of a game in progress. It does not draw anything. It covers:
  - key and mouse input
  - turns
  - window layout (`compute_layout`)
  - the menu and status texts
- `connect4.app` draws a session with pygame and runs the event loop (`main`).

## Limits

The computer always plays yellow and always moves second. The package has no mode for two human players. It does not save or load games.

## Tests

```
pip install ".[test]"
pytest
```