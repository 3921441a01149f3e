"""
Script for running tournaments between the automated Reversi strategies.
"""
import os
import sys
import json
import argparse
from datetime import datetime
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.arena import Arena, ELORatingSystem
from reversi.config import Config, get_default_config
from reversi.logger import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Reversi strategies')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play')
    parser.add_argument('--strategies', nargs='+', default=None,
                        help='Strategies taking part (default: all)')
    parser.add_argument('--size', type=int, default=None,
                        help='Board size')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random strategy')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--verbose', action='store_true',
                        help='Show progress and detailed game information')
    args = parser.parse_args()

    if args.config and os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    overrides = config.to_dict()
    if args.rounds is not None:
        overrides['tournament']['rounds'] = args.rounds
    if args.strategies is not None:
        overrides['tournament']['strategies'] = args.strategies
    if args.size is not None:
        overrides['board']['size'] = args.size
    if args.output_dir is not None:
        overrides['tournament']['output_dir'] = args.output_dir
    overrides['logging']['verbose'] = args.verbose
    config = Config.from_dict(overrides)

    log = setup_logger(config)
    tournament = config.tournament
    os.makedirs(tournament.output_dir, exist_ok=True)

    elo_file = os.path.join(tournament.output_dir, tournament.elo_file)
    if os.path.exists(elo_file):
        print(f"Loading ELO ratings from {elo_file}")
        elo = ELORatingSystem.load_ratings(elo_file)
    else:
        elo = ELORatingSystem(k=tournament.k, initial_rating=tournament.initial_rating)

    arena = Arena(tournament.strategies, elo_system=elo, size=config.board.size, seed=args.seed)
    print(f"Starting tournament with {tournament.rounds} rounds: {', '.join(arena.strategies)}")
    results = arena.run_tournament(rounds=tournament.rounds, verbose=args.verbose)
    log.log_metrics({'games_played': results['games_played'],
                     'duration': results['duration']}, tournament.rounds, prefix='tournament/')

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    results_file = os.path.join(tournament.output_dir, f'tournament_{timestamp}.json')
    with open(results_file, 'w') as f:
        json.dump({
            'timestamp': timestamp,
            'rounds': tournament.rounds,
            'board_size': config.board.size,
            'matchups': results['matchups'],
            'leaderboard': [{'player': p['player_id'], 'rating': p['rating']}
                            for p in results['leaderboard']]
        }, f, indent=2)
    arena.elo.save_ratings(elo_file)
    log.close()

    print(f"\nTournament completed! Results saved to {results_file}")
    print("\nFinal Leaderboard:")
    print(arena.format_leaderboard())


if __name__ == '__main__':
    main()
