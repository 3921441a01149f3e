"""
One-ply positional evaluator.

Each legal move is played on a private copy of the board and the resulting
position is scored as the sum of cell weights owned by the strategy's color
minus the sum owned by the opponent. Corners are worth the most; the cells
next to a corner are penalised.
"""
from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from ..board import Board, BoardView
from ..rules import apply_move
from ..stone import Point, Stone
from .base import Strategy

WEIGHTS_8X8 = np.array([
    [120, -20, 20,  5,  5, 20, -20, 120],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [ 20,  -5, 15,  3,  3, 15,  -5,  20],
    [  5,  -5,  3,  3,  3,  3,  -5,   5],
    [  5,  -5,  3,  3,  3,  3,  -5,   5],
    [ 20,  -5, 15,  3,  3, 15,  -5,  20],
    [-20, -40, -5, -5, -5, -5, -40, -20],
    [120, -20, 20,  5,  5, 20, -20, 120],
], dtype=np.int32)


def _cell_weight(n: int, x: int, y: int) -> int:
    last = n - 1
    edges = (0, last)
    if x in edges and y in edges:
        return 120
    # orthogonal neighbours of a corner
    if (y in edges and x in (1, last - 1)) or (x in edges and y in (1, last - 1)):
        return -20
    # diagonal neighbours of a corner
    if x in (1, last - 1) and y in (1, last - 1):
        return -40
    if x in edges or y in edges:
        return 10
    return 1


@lru_cache(maxsize=None)
def weight_table(size: int) -> np.ndarray:
    """Positional weights indexed [y, x]; the fixed table for 8x8, generated otherwise."""
    if size == 8:
        table = WEIGHTS_8X8.copy()
    else:
        table = np.array([[_cell_weight(size, x, y) for x in range(size)]
                          for y in range(size)], dtype=np.int32)
    table.setflags(write=False)
    return table


def evaluate(board: Board, color: Stone) -> int:
    """Positional differential of ``board`` from ``color``'s point of view."""
    state = board.get_board_state()
    weights = weight_table(board.size)
    own = int(weights[state == color].sum())
    other = int(weights[state == color.opposite()].sum())
    return own - other


class WeightedStrategy(Strategy):
    """Choose the move whose resulting position has the best weighted score."""

    name = 'weighted'

    def score_move(self, board: BoardView, move: Point) -> int:
        simulated = board.copy()
        apply_move(simulated, move.x, move.y, self.color)
        return evaluate(simulated, self.color)

    def decide(self, board: BoardView, moves: Optional[List[Point]] = None) -> Point:
        best: Optional[Tuple[Point, int]] = None
        for move in self.legal_moves(board, moves):
            score = self.score_move(board, move)
            if best is None or score > best[1]:
                best = (move, score)
        return best[0]
