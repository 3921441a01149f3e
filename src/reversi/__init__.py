"""
Reversi rules engine with pluggable automated players.
"""
from .board import Board, BoardView, DEFAULT_BOARD_SIZE
from .errors import (GameAlreadyOver, GameOutcome, IndexOutOfBound, InvalidMove, MoveResult,
                     NoStoneToFlip, ReversiError, StoneAlreadyPlaced)
from .game import HUMAN, PlayerManager, ReversiGame
from .stone import Point, Stone
from .strategies import GreedyStrategy, RandomStrategy, Strategy, WeightedStrategy, make_strategy

__all__ = [
    'Board', 'BoardView', 'DEFAULT_BOARD_SIZE',
    'GameAlreadyOver', 'GameOutcome', 'IndexOutOfBound', 'InvalidMove', 'MoveResult',
    'NoStoneToFlip', 'ReversiError', 'StoneAlreadyPlaced',
    'HUMAN', 'PlayerManager', 'ReversiGame',
    'Point', 'Stone',
    'GreedyStrategy', 'RandomStrategy', 'Strategy', 'WeightedStrategy', 'make_strategy',
]
