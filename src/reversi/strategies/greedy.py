from typing import List, Optional

from ..board import BoardView
from ..stone import Point
from .base import Strategy


class GreedyStrategy(Strategy):
    """Pick the move that flips the most stones; ties keep the earliest move."""

    name = 'greedy'

    def decide(self, board: BoardView, moves: Optional[List[Point]] = None) -> Point:
        moves = self.legal_moves(board, moves)
        best = moves[0]
        best_count = -1
        for move in moves:
            count = board.count_flippable(move.x, move.y, self.color)
            if count > best_count:
                best_count = count
                best = move
        return best
