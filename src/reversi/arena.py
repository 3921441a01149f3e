"""
Arena for playing strategies against each other with ELO ratings.
"""
import json
import logging
import random
import time
from datetime import datetime
from itertools import combinations
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from .board import DEFAULT_BOARD_SIZE
from .game import ReversiGame
from .stone import Stone
from .strategies import STRATEGIES, make_strategy

logger = logging.getLogger(__name__)


_COLOURS = {Stone.BLACK: 'black', Stone.WHITE: 'white'}


class ELORatingSystem:
    """
    ELO ratings for strategies. Reversi gives the first mover a slight edge,
    so each strategy also keeps a win/draw/loss record per colour.
    """

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Args:
            k: K-factor, how far one game moves a rating
            initial_rating: Rating given to a strategy on its first game
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}
        # name -> colour -> [wins, draws, losses]
        self.records: Dict[str, Dict[str, List[int]]] = {}
        self.history: List[Dict] = []

    def add_player(self, name: str, rating: Optional[float] = None):
        if name not in self.ratings:
            self.ratings[name] = rating if rating is not None else self.initial_rating
            self.games_played[name] = 0
            self.records[name] = {'black': [0, 0, 0], 'white': [0, 0, 0]}

    def get_rating(self, name: str) -> float:
        return self.ratings.get(name, self.initial_rating)

    def get_expected_score(self, rating_a: float, rating_b: float) -> float:
        """Expected score of a strategy rated ``rating_a`` against ``rating_b``."""
        return 1.0 / (1.0 + 10.0 ** ((rating_b - rating_a) / 400.0))

    def colour_record(self, name: str, colour: Stone) -> Tuple[int, int, int]:
        """(wins, draws, losses) of ``name`` when playing ``colour``."""
        wins, draws, losses = self.records[name][_COLOURS[colour]]
        return wins, draws, losses

    def update_ratings(self, black: str, white: str, score: float,
                       stones: Optional[Tuple[int, int]] = None) -> Dict:
        """
        Update both ratings after one game.

        Args:
            black: Strategy that played Black
            white: Strategy that played White
            score: Black's score (1.0 win, 0.5 draw, 0.0 loss)
            stones: Final (black, white) stone count, kept in the history

        Returns:
            The history record for the game
        """
        self.add_player(black)
        self.add_player(white)

        before = {'black': self.ratings[black], 'white': self.ratings[white]}
        expected = self.get_expected_score(before['black'], before['white'])
        delta = self.k * (score - expected)
        self.ratings[black] = before['black'] + delta
        self.ratings[white] = before['white'] - delta
        self.games_played[black] += 1
        self.games_played[white] += 1

        if score == 1.0:
            winner = 'black'
            self.records[black]['black'][0] += 1
            self.records[white]['white'][2] += 1
        elif score == 0.0:
            winner = 'white'
            self.records[black]['black'][2] += 1
            self.records[white]['white'][0] += 1
        else:
            winner = None
            self.records[black]['black'][1] += 1
            self.records[white]['white'][1] += 1

        record = {
            'timestamp': time.time(),
            'black': black,
            'white': white,
            'winner': winner,
            'stones': list(stones) if stones is not None else None,
            'ratings_before': before,
            'ratings_after': {'black': self.ratings[black], 'white': self.ratings[white]},
        }
        self.history.append(record)
        return record

    def get_leaderboard(self) -> List[Dict]:
        """Strategies sorted by rating, best first."""
        leaderboard = [{'player_id': name,
                        'rating': rating,
                        'games_played': self.games_played[name],
                        'as_black': self.colour_record(name, Stone.BLACK),
                        'as_white': self.colour_record(name, Stone.WHITE)}
                       for name, rating in self.ratings.items()]
        leaderboard.sort(key=lambda x: x['rating'], reverse=True)
        return leaderboard

    def save_ratings(self, filepath: str):
        data = {
            'k': self.k,
            'initial_rating': self.initial_rating,
            'ratings': self.ratings,
            'games_played': self.games_played,
            'records': self.records,
            'history': self.history,
            'last_updated': datetime.now().isoformat()
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load_ratings(cls, filepath: str) -> 'ELORatingSystem':
        with open(filepath, 'r') as f:
            data = json.load(f)

        elo = cls(k=data['k'], initial_rating=data['initial_rating'])
        for name, rating in data['ratings'].items():
            elo.add_player(name, float(rating))
        elo.games_played.update({k: int(v) for k, v in data['games_played'].items()})
        for name, record in data.get('records', {}).items():
            elo.records[name] = {colour: [int(n) for n in counts]
                                 for colour, counts in record.items()}
        elo.history = data.get('history', [])
        return elo


class Arena:
    """Plays automated strategies against each other."""

    def __init__(self, strategies: Optional[List[str]] = None,
                 elo_system: Optional[ELORatingSystem] = None,
                 size: int = DEFAULT_BOARD_SIZE, seed: Optional[int] = None):
        """
        Args:
            strategies: Strategy names taking part (default: all of them)
            elo_system: Optional ELO rating system to use
            size: Board size for every game
            seed: Seed for the random strategy, for reproducible tournaments
        """
        self.strategies = list(strategies) if strategies is not None else sorted(STRATEGIES)
        for name in self.strategies:
            if name not in STRATEGIES:
                raise ValueError(f"Unknown strategy '{name}'")
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        for name in self.strategies:
            self.elo.add_player(name)
        self.size = size
        self.rng = random.Random(seed)

    def play_game(self, black: str, white: str,
                  verbose: bool = False) -> Tuple[float, Tuple[int, int]]:
        """
        Play one game between two strategies.

        Args:
            black: Name of the strategy playing Black (moves first)
            white: Name of the strategy playing White
            verbose: Whether to log every move at INFO level

        Returns:
            Black's score (1.0 win, 0.5 draw, 0.0 loss) and the final
            (black, white) stone count
        """
        game = ReversiGame(
            self.size,
            black=make_strategy(black, Stone.BLACK, seed=self.rng.randrange(2 ** 32)),
            white=make_strategy(white, Stone.WHITE, seed=self.rng.randrange(2 ** 32)),
        )

        while not game.is_finished:
            result = game.play_computer_move()
            if verbose:
                logger.info("%s plays %s (%s)\n%s", result.player, tuple(result.point),
                            result.outcome.value, game.board)

        stones = game.get_score()
        logger.debug("%s (Black) vs %s (White): %d-%d", black, white, *stones)
        if game.result.winner == Stone.BLACK:
            return 1.0, stones
        if game.result.winner == Stone.WHITE:
            return 0.0, stones
        return 0.5, stones

    def run_tournament(self, rounds: int = 10, verbose: bool = False) -> Dict:
        """
        Round-robin tournament; colours alternate between rounds.

        Returns:
            Dictionary with per-matchup results and the final leaderboard
        """
        if len(self.strategies) < 2:
            raise ValueError("Need at least 2 strategies for a tournament")

        pairs = list(combinations(self.strategies, 2))
        results = {
            'games_played': 0,
            'matchups': {f"{a}_vs_{b}": {'player1': a, 'player2': b,
                                         'wins1': 0, 'wins2': 0, 'draws': 0}
                         for a, b in pairs},
            'start_time': time.time(),
        }

        with tqdm(total=rounds * len(pairs), desc="Tournament", disable=not verbose) as progress:
            for round_num in range(rounds):
                for i, (a, b) in enumerate(pairs):
                    black, white = (a, b) if (i + round_num) % 2 == 0 else (b, a)
                    score, stones = self.play_game(black, white)
                    self.elo.update_ratings(black, white, score, stones)

                    matchup = results['matchups'][f"{a}_vs_{b}"]
                    score_a = score if black == a else 1.0 - score
                    if score_a == 1.0:
                        matchup['wins1'] += 1
                    elif score_a == 0.0:
                        matchup['wins2'] += 1
                    else:
                        matchup['draws'] += 1
                    results['games_played'] += 1
                    progress.update(1)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()
        return results

    def format_leaderboard(self) -> str:
        lines = ["Rank  Player      Rating  Games  As Black (W-D-L)  As White (W-D-L)",
                 "----  ----------  ------  -----  ----------------  ----------------"]
        for i, player in enumerate(self.elo.get_leaderboard(), 1):
            as_black = "-".join(map(str, player['as_black']))
            as_white = "-".join(map(str, player['as_white']))
            lines.append(f"{i:4d}  {player['player_id']:10s}  {player['rating']:6.1f}  "
                         f"{player['games_played']:5d}  {as_black:>16s}  {as_white:>16s}")
        return '\n'.join(lines)
