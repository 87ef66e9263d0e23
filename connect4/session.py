"""Interactive game session: layout, input handling and turn flow."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .board import HEIGHT, WIDTH, Board
from .solver import Solver

BASE_TILE_SIZE = 100
BASE_MENU_HEIGHT = 56
BASE_STATUS_HEIGHT = 52
DEFAULT_WINDOW_WIDTH = BASE_TILE_SIZE * WIDTH
DEFAULT_WINDOW_HEIGHT = (
    BASE_TILE_SIZE * HEIGHT + BASE_MENU_HEIGHT + BASE_STATUS_HEIGHT + BASE_TILE_SIZE
)
START_COLUMN = 3

TIE_COLOUR = (200, 200, 255)
YELLOW_WIN_COLOUR = (255, 255, 50)
RED_WIN_COLOUR = (255, 60, 60)


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class Layout:
    """Pixel geometry of the window's regions."""

    tile_size: int
    menu_height: int
    status_height: int
    preview_y: int
    status_y: int
    board_y: int


def compute_layout(window_width: int, window_height: int) -> Layout:
    """Fit the menu, status bar, preview row and board into the window."""
    base_width = BASE_TILE_SIZE * WIDTH
    menu_height = _div(BASE_MENU_HEIGHT * window_width, base_width)
    status_height = _div(BASE_STATUS_HEIGHT * window_width, base_width)

    remaining = window_height - menu_height - status_height
    tile_size = min(_div(window_width, WIDTH), _div(remaining, HEIGHT + 1))

    used = tile_size * (HEIGHT + 1)
    spare = remaining - used
    top_offset = menu_height + (_div(spare, 2) if spare > 0 else 0)

    return Layout(
        tile_size=tile_size,
        menu_height=menu_height,
        status_height=status_height,
        preview_y=top_offset,
        status_y=menu_height,
        board_y=top_offset + tile_size,
    )


class GameState(enum.Enum):
    PLAYING = "playing"
    GAMEOVER = "gameover"


class InputSource(enum.Enum):
    NONE = "none"
    MOUSE = "mouse"
    KEYBOARD = "keyboard"


class Key(enum.Enum):
    """Keys the game reacts to; anything else is ``OTHER``."""

    LEFT = "left"
    RIGHT = "right"
    A = "a"
    D = "d"
    S = "s"
    SPACE = "space"
    DOWN = "down"
    R = "r"
    Q = "q"
    OTHER = "other"


_LEFT_KEYS = frozenset({Key.LEFT, Key.A})
_RIGHT_KEYS = frozenset({Key.RIGHT, Key.D})
_DROP_KEYS = frozenset({Key.SPACE, Key.S, Key.DOWN})


class GameSession:
    """One human-versus-computer game together with its input state."""

    def __init__(self, solver: Solver | None = None, allow_quit: bool = True) -> None:
        self.solver = solver if solver is not None else Solver()
        self.allow_quit = allow_quit
        self.board = Board()
        self.window_width = DEFAULT_WINDOW_WIDTH
        self.window_height = DEFAULT_WINDOW_HEIGHT
        self.should_quit = False
        self._just_moved = False
        self.restart()

    def restart(self) -> None:
        """Start a fresh game, keeping the window and the solver's cache."""
        self.board.reset()
        self.current_column = START_COLUMN
        self.game_over_ticks = 0
        self.tie_game_ticks = 0
        self.mouse_column = -1
        self.state = GameState.PLAYING
        self.last_input_source = InputSource.NONE
        self.last_input_timestamp = 0
        self.keys_pressed: set[Key] = set()

    def resize(self, width: int, height: int) -> None:
        """Record the window's new size."""
        self.window_width = width
        self.window_height = height

    def layout(self) -> Layout:
        """Return the layout for the current window size."""
        return compute_layout(self.window_width, self.window_height)

    @property
    def in_play(self) -> bool:
        """True while moves can still be made on the board."""
        return not self.board.game_over and not self.board.is_full()

    @property
    def accepts_input(self) -> bool:
        """True on frames where input events are processed."""
        return self.in_play or self.state is GameState.GAMEOVER

    def key_down(self, key: Key, timestamp: int) -> None:
        """Handle a key being pressed."""
        if key is Key.Q and self.allow_quit:
            self.should_quit = True
            return
        if key is Key.R:
            self.restart()
            return
        self.keys_pressed.add(key)
        self.last_input_source = InputSource.KEYBOARD
        self.last_input_timestamp = timestamp

    def key_up(self, key: Key) -> None:
        """Handle a key being released."""
        self.keys_pressed.discard(key)

    def mouse_motion(self, x: int, timestamp: int) -> None:
        """Select the column under the pointer's horizontal position."""
        tile_size = max(self.layout().tile_size, 1)
        column = x // tile_size if x >= 0 else 0
        self.mouse_column = min(max(column, 0), WIDTH - 1)
        self.last_input_source = InputSource.MOUSE
        self.last_input_timestamp = timestamp

    def mouse_click(self) -> None:
        """Drop a chip in the selected column on a left click."""
        if self.state is not GameState.PLAYING:
            return
        if self.last_input_source is InputSource.MOUSE and self.mouse_column >= 0:
            column = self.mouse_column
        else:
            column = self.current_column
        if column >= 0 and self.board.can_add(column):
            self._play(column)

    def _play(self, column: int) -> None:
        self.board.add_chip(column)
        if self.in_play:
            reply = self.solver.choose_move(self.board)
            print(f"Evaluated: {self.solver.evaluated}\nScore: {self.solver.last_score}")
            self.board.add_chip(reply)

    def update(self) -> None:
        """Apply held keys and pointer position to the selected column."""
        if self.last_input_source is InputSource.KEYBOARD:
            held = self.keys_pressed
            if held & _LEFT_KEYS:
                if not self._just_moved and self.current_column > 0:
                    self.current_column -= 1
                self._just_moved = True
            elif held & _RIGHT_KEYS:
                if not self._just_moved and self.current_column < WIDTH - 1:
                    self.current_column += 1
                self._just_moved = True
            elif held & _DROP_KEYS:
                if not self._just_moved and self.board.can_add(self.current_column):
                    self._play(self.current_column)
                self._just_moved = True
            else:
                self._just_moved = False
        if self.last_input_source is InputSource.MOUSE and self.mouse_column >= 0:
            self.current_column = self.mouse_column

    def advance(self, now: int) -> list[str]:
        """Run one frame of game flow; return announcements of a finished game."""
        if self.should_quit:
            return []
        if self.in_play:
            self.update()
            return []
        if self.state is not GameState.PLAYING:
            return []
        self.state = GameState.GAMEOVER
        announcements = []
        if self.board.game_over and not self.game_over_ticks:
            self.game_over_ticks = now
            winner = "Yellow" if self.board.moves % 2 == 0 else "Red"
            announcements.append(f"{winner} won!")
        if self.board.is_full() and not self.tie_game_ticks:
            self.tie_game_ticks = now
            announcements.append("Tie game!")
        return announcements

    def menu_text(self) -> str:
        """Return the help line shown at the top of the window."""
        if self.state is GameState.GAMEOVER:
            return "R to restart   |   Q to quit" if self.allow_quit else "R to restart"
        text = "←/A, →/D or Mouse to select   |   Space/Click to drop   |   R to restart"
        if self.allow_quit:
            text += "   |   Q to quit"
        return text

    def status_message(self) -> tuple[str, tuple[int, int, int]] | None:
        """Return the game-over message and its colour, or None during play."""
        if self.state is not GameState.GAMEOVER:
            return None
        if self.board.is_full() and not self.board.game_over:
            return "Tie Game!", TIE_COLOUR
        if self.board.moves % 2 == 0:
            return "Yellow Won!", YELLOW_WIN_COLOUR
        return "Red Won!", RED_WIN_COLOUR