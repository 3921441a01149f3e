"""
Configuration parameters for Reversi games and tournaments.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional, List
import json

from .board import DEFAULT_BOARD_SIZE, validate_size
from .strategies import STRATEGIES

HUMAN = 'human'


def _check_player(name: str, allow_human: bool = True) -> None:
    allowed = set(STRATEGIES) | ({HUMAN} if allow_human else set())
    if name not in allowed:
        raise ValueError(f"Unknown player type '{name}', expected one of {sorted(allowed)}")


@dataclass
class BoardConfig:
    """Configuration for the board."""
    size: int = DEFAULT_BOARD_SIZE

    def __post_init__(self):
        validate_size(self.size)


@dataclass
class PlayerConfig:
    """Who plays each side: 'human' or a strategy name."""
    black: str = HUMAN
    white: str = 'weighted'
    seed: Optional[int] = None  # Seed for the random strategy

    def __post_init__(self):
        _check_player(self.black)
        _check_player(self.white)


@dataclass
class TournamentConfig:
    """Configuration for strategy tournaments."""
    rounds: int = 10
    strategies: List[str] = field(default_factory=lambda: sorted(STRATEGIES))
    k: float = 32.0
    initial_rating: float = 1500.0
    output_dir: str = "tournament_results"
    elo_file: str = "elo_ratings.json"

    def __post_init__(self):
        for name in self.strategies:
            _check_player(name, allow_human=False)


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    board: BoardConfig = field(default_factory=BoardConfig)
    players: PlayerConfig = field(default_factory=PlayerConfig)
    tournament: TournamentConfig = field(default_factory=TournamentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            board=BoardConfig(**config_dict.get('board', {})),
            players=PlayerConfig(**config_dict.get('players', {})),
            tournament=TournamentConfig(**config_dict.get('tournament', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
