"""
Outcome kinds reported by the rules engine.

Recoverable per-attempt failures are raised as ``ReversiError`` subclasses.
State transitions (a normal move, a forced pass, the end of the game) come
back from ``put_stone`` as a ``MoveResult``. Both share ``GameOutcome``.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .stone import Point, Stone


class GameOutcome(Enum):
    OK = 'ok'
    INDEX_OUT_OF_BOUND = 'index_out_of_bound'
    STONE_ALREADY_PLACED = 'stone_already_placed'
    INVALID_MOVE = 'invalid_move'
    NO_STONE_TO_FLIP = 'no_stone_to_flip'
    NEXT_PLAYER_CANT_PUT_STONE = 'next_player_cant_put_stone'
    GAME_OVER_WITH_WINNER = 'game_over_with_winner'
    GAME_OVER_WITH_DRAW = 'game_over_with_draw'


TERMINAL_OUTCOMES = (GameOutcome.GAME_OVER_WITH_WINNER, GameOutcome.GAME_OVER_WITH_DRAW)


@dataclass
class MoveResult:
    """Result of a successful placement or of a winner resolution."""
    outcome: GameOutcome
    player: Optional[Stone] = None
    point: Optional[Point] = None
    flipped: List[Point] = field(default_factory=list)
    winner: Optional[Stone] = None
    skipped: Optional[Stone] = None

    def is_game_over(self) -> bool:
        return self.outcome in TERMINAL_OUTCOMES


class ReversiError(Exception):
    """Base class for gameplay failures. The board is unchanged when raised."""
    outcome = None

    def __init__(self, message: str = '', x: Optional[int] = None, y: Optional[int] = None):
        super().__init__(message or self.outcome.value)
        self.x = x
        self.y = y


class IndexOutOfBound(ReversiError):
    outcome = GameOutcome.INDEX_OUT_OF_BOUND


class StoneAlreadyPlaced(ReversiError):
    outcome = GameOutcome.STONE_ALREADY_PLACED


class InvalidMove(ReversiError):
    outcome = GameOutcome.INVALID_MOVE


class NoStoneToFlip(ReversiError):
    """Raised when a flip targets an empty cell. Indicates a bug in the caller."""
    outcome = GameOutcome.NO_STONE_TO_FLIP


class GameAlreadyOver(ReversiError):
    """Raised when a move is attempted after a terminal outcome was reported."""

    def __init__(self, result: MoveResult):
        self.outcome = result.outcome
        self.result = result
        super().__init__(f"game is already over ({result.outcome.value})")
