"""Bitboard representation of a Connect Four position."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

WIDTH = 7
HEIGHT = 6
CELLS = WIDTH * HEIGHT

RED = "red"
YELLOW = "yellow"


def _bottom_mask(column: int) -> int:
    return 1 << (column * (HEIGHT + 1))


def _top_mask(column: int) -> int:
    return (1 << (HEIGHT - 1)) << (column * (HEIGHT + 1))


def _column_mask(column: int) -> int:
    return ((1 << HEIGHT) - 1) << (column * (HEIGHT + 1))


def alignment(pos: int) -> bool:
    """Return True if the bitmap ``pos`` contains four aligned chips."""
    directions = (HEIGHT + 1, HEIGHT, HEIGHT + 2, 1)
    for shift in directions:
        m = pos & (pos >> shift)
        if m & (m >> (2 * shift)):
            return True
    return False


@dataclass
class Board:
    """A Connect Four position.

    ``position`` holds the chips of the player to move, ``mask`` all chips.
    Each column uses ``HEIGHT + 1`` bits, the top one always empty.
    """

    position: int = 0
    mask: int = 0
    moves: int = 0
    game_over: bool = False

    def reset(self) -> None:
        """Return to the empty starting position."""
        self.position = 0
        self.mask = 0
        self.moves = 0
        self.game_over = False

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        return dataclasses.replace(self)

    def key(self) -> int:
        """Return a unique key identifying this position."""
        return self.position + self.mask

    def can_add(self, column: int) -> bool:
        """Return True if a chip may be dropped into ``column``."""
        if not 0 <= column < WIDTH:
            return False
        return not (self.mask & _top_mask(column)) and not self.game_over

    def add_chip(self, column: int) -> None:
        """Drop a chip for the player to move into ``column``."""
        if not 0 <= column < WIDTH:
            raise ValueError(f"column {column} is out of range")
        if self.mask & _top_mask(column):
            raise ValueError(f"column {column} is full")
        if self.is_winning_move(column):
            self.game_over = True
        self.position ^= self.mask
        self.mask |= self.mask + _bottom_mask(column)
        self.moves += 1

    def is_winning_move(self, column: int) -> bool:
        """Return True if dropping into ``column`` wins for the player to move."""
        pos = self.position | ((self.mask + _bottom_mask(column)) & _column_mask(column))
        return alignment(pos)

    def is_full(self) -> bool:
        """Return True once every cell has been played."""
        return self.moves == CELLS

    def cell(self, column: int, row: int) -> str | None:
        """Return the colour of the chip at ``column``/``row`` (row 0 is the bottom)."""
        if not (0 <= column < WIDTH and 0 <= row < HEIGHT):
            raise IndexError(f"cell ({column}, {row}) is off the board")
        bit = 1 << (row + column * (HEIGHT + 1))
        if self.position & bit:
            return RED if self.moves % 2 == 0 else YELLOW
        if self.mask & bit:
            return RED if self.moves % 2 == 1 else YELLOW
        return None