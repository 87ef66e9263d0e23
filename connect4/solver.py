"""Negamax computer opponent with alpha-beta pruning."""

from __future__ import annotations

import math

from .board import CELLS, WIDTH, Board
from .table import DEFAULT_SIZE, TranspositionTable

ALPHA = -1
BETA = 1
SEARCH_DEPTH = 20
NO_MOVE = WIDTH + 1


def eval_order() -> list[int]:
    """Return columns ordered from the centre outwards."""
    return [WIDTH // 2 + math.trunc((1 - 2 * (i % 2)) * (i + 1) / 2) for i in range(WIDTH)]


class Solver:
    """Chooses moves by a depth-limited negamax search."""

    def __init__(self, table_size: int = DEFAULT_SIZE) -> None:
        self.table = TranspositionTable(table_size)
        self.order = eval_order()
        self.best_move = NO_MOVE
        self.evaluated = 0
        self.last_score = 0

    def reset(self) -> None:
        """Forget every cached evaluation."""
        self.table.clear()
        self.best_move = NO_MOVE
        self.evaluated = 0
        self.last_score = 0

    def negamax(self, board: Board, alpha: int, beta: int, depth: int) -> int:
        """Score ``board`` for the player to move within the (alpha, beta) window."""
        self.evaluated += 1
        if board.is_full():
            return 0

        for column in range(WIDTH):
            if board.can_add(column) and board.is_winning_move(column):
                if depth == SEARCH_DEPTH:
                    self.best_move = column
                return CELLS + 1 - board.moves // 2

        upper = CELLS - 1 - board.moves // 2
        if beta > upper:
            beta = upper
            if alpha >= beta:
                return beta

        best_score = -CELLS
        for column in self.order:
            if not board.can_add(column):
                continue
            child = board.copy()
            child.add_chip(column)
            if depth > 0:
                score = self.table.get(child.key())
                if score > CELLS:
                    score = -self.negamax(child, -beta, -alpha, depth - 1)
                    self.table.put(child.key(), score)
            else:
                score = 0

            if score >= beta:
                if depth == SEARCH_DEPTH:
                    self.best_move = column
                return score
            if score > alpha:
                if depth == SEARCH_DEPTH:
                    self.best_move = column
                alpha = score
            elif score > best_score and depth == SEARCH_DEPTH and self.best_move > WIDTH:
                best_score = score
                self.best_move = column

        return alpha

    def choose_move(self, board: Board) -> int:
        """Return the column the computer plays on ``board``."""
        if not any(board.can_add(column) for column in range(WIDTH)):
            raise ValueError("no legal move on this board")
        self.evaluated = 0
        self.best_move = NO_MOVE
        self.last_score = self.negamax(board.copy(), ALPHA, BETA, SEARCH_DEPTH)
        return self.best_move