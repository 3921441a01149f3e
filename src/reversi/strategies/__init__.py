"""
Automated players for Reversi.
"""
import random
from typing import Optional

from ..stone import Stone
from .base import Strategy
from .greedy import GreedyStrategy
from .random_strategy import RandomStrategy
from .weighted import WeightedStrategy, evaluate, weight_table

STRATEGIES = {
    RandomStrategy.name: RandomStrategy,
    GreedyStrategy.name: GreedyStrategy,
    WeightedStrategy.name: WeightedStrategy,
}


def make_strategy(name: str, color: Stone, seed: Optional[int] = None) -> Strategy:
    """
    Create a strategy by name.

    Args:
        name: One of 'random', 'greedy', 'weighted'
        color: The side the strategy plays for
        seed: Seed for the random strategy (ignored by the others)
    """
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}', expected one of {sorted(STRATEGIES)}")
    if name == RandomStrategy.name:
        return RandomStrategy(color, rng=random.Random(seed))
    return STRATEGIES[name](color)


__all__ = ['Strategy', 'RandomStrategy', 'GreedyStrategy', 'WeightedStrategy',
           'STRATEGIES', 'make_strategy', 'evaluate', 'weight_table']
