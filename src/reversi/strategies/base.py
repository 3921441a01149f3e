"""
Base class for automated players.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..board import BoardView
from ..stone import Point, Stone


class Strategy(ABC):
    """A stateless move chooser bound to one side."""

    name = 'strategy'

    def __init__(self, color: Stone):
        self.color = color

    def legal_moves(self, board: BoardView, moves: Optional[List[Point]] = None) -> List[Point]:
        """
        Legal moves for this strategy's color. A list the caller already
        computed for this position is used as is.

        Raises:
            ValueError: If there is no legal move; the caller handles passes
        """
        if moves is None:
            moves = board.get_can_put_stones(self.color)
        if not moves:
            raise ValueError(f"{self.color} has no legal move to decide on")
        return moves

    @abstractmethod
    def decide(self, board: BoardView, moves: Optional[List[Point]] = None) -> Point:
        """
        Choose one of the legal moves for ``self.color``.

        Args:
            board: Read-only view of the live board
            moves: Legal moves for this position, computed here when None
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color})"
