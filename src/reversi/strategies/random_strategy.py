import random
from typing import List, Optional

from ..board import BoardView
from ..stone import Point, Stone
from .base import Strategy


class RandomStrategy(Strategy):
    """Uniform choice over the legal moves."""

    name = 'random'

    def __init__(self, color: Stone, rng: Optional[random.Random] = None):
        super().__init__(color)
        self.rng = rng if rng is not None else random.Random()

    def decide(self, board: BoardView, moves: Optional[List[Point]] = None) -> Point:
        return self.rng.choice(self.legal_moves(board, moves))
