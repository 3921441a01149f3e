"""
Text driver: draws the board, reads coordinates and loops until the game ends.
"""
import argparse
import logging
import os
import re
from typing import Callable, List, Optional

from .board import BoardView
from .config import Config, HUMAN, get_default_config
from .errors import GameOutcome, MoveResult, ReversiError
from .game import HUMAN as HUMAN_PLAYER, ReversiGame
from .logger import setup_logger
from .stone import Point, Stone
from .strategies import STRATEGIES, make_strategy

logger = logging.getLogger(__name__)

# letter then ASCII digits, or the reverse
_COORD_RE = re.compile(r'([a-z])([0-9]+)|([0-9]+)([a-z])')

_CELLS = {None: '.', Stone.BLACK: '●', Stone.WHITE: '○'}

_ERROR_MESSAGES = {
    GameOutcome.INDEX_OUT_OF_BOUND: "That square is off the board.",
    GameOutcome.STONE_ALREADY_PLACED: "That square is already taken.",
    GameOutcome.INVALID_MOVE: "That move does not flip any stone.",
    GameOutcome.NO_STONE_TO_FLIP: "Internal error: tried to flip an empty square.",
}


def render_board(board: BoardView) -> str:
    """Draw the board with column letters and 1-based row numbers."""
    n = board.size
    lines = ["   " + " ".join(chr(ord('A') + i) for i in range(n))]
    for y in range(n):
        row = " ".join(_CELLS[board.get_at(x, y)] for x in range(n))
        lines.append(f"{y + 1:>2} {row}")
    black, white = board.get_score()
    lines.append(f"Black(●)={black} White(○)={white}")
    return "\n".join(lines)


def parse_coord(text: str) -> Optional[Point]:
    """
    Parse "d3", "D 3" or "3d" into a zero-based Point (column, row).
    Returns None when the text is not a coordinate. Range is not checked.
    """
    match = _COORD_RE.fullmatch(text.strip().lower().replace(' ', ''))
    if match is None:
        return None
    col = match.group(1) or match.group(4)
    row = match.group(2) or match.group(3)
    return Point(ord(col) - ord('a'), int(row) - 1)


def format_point(point: Point) -> str:
    return f"{chr(ord('A') + point.x)}{point.y + 1}"


def outcome_message(outcome) -> str:
    """Turn a MoveResult or a ReversiError into a line for the user."""
    if isinstance(outcome, ReversiError):
        return _ERROR_MESSAGES.get(outcome.outcome, str(outcome))
    if outcome.outcome == GameOutcome.NEXT_PLAYER_CANT_PUT_STONE:
        return f"{outcome.skipped} has no legal move and passes. {outcome.player} plays again."
    if outcome.outcome == GameOutcome.GAME_OVER_WITH_WINNER:
        return f"{outcome.winner} wins!"
    if outcome.outcome == GameOutcome.GAME_OVER_WITH_DRAW:
        return "Draw!"
    return f"{outcome.player} played {format_point(outcome.point)}."


def play(game: ReversiGame, input_fn: Callable[[str], str] = input,
         print_fn: Callable[[str], None] = print) -> Optional[MoveResult]:
    """
    Run the game loop until a terminal outcome, until the user quits or
    until the input runs out.

    Returns:
        The terminal MoveResult, or None if the user quit
    """
    while not game.is_finished:
        print_fn(render_board(game.board))

        if not game.is_human_turn():
            result = game.play_computer_move()
            print_fn(outcome_message(result))
            continue

        try:
            text = input_fn(f"{game.turn}'s turn. Enter a square (e.g. d3) or q: ")
        except EOFError:
            return None
        if text.strip().lower() in {'q', 'quit', 'exit'}:
            return None
        point = parse_coord(text)
        if point is None:
            print_fn("Could not read that square. Use a letter and a number, e.g. d3.")
            continue

        try:
            result = game.put_stone(point.x, point.y)
        except ReversiError as e:
            print_fn(outcome_message(e))
            continue
        if result.outcome != GameOutcome.OK:
            print_fn(outcome_message(result))

    print_fn(render_board(game.board))
    return game.result


def build_game(config: Config) -> ReversiGame:
    """Create a game with the players named in the config."""
    players = {}
    for stone, name in ((Stone.BLACK, config.players.black), (Stone.WHITE, config.players.white)):
        players[stone] = HUMAN_PLAYER if name == HUMAN else make_strategy(name, stone, config.players.seed)
    return ReversiGame(config.board.size, black=players[Stone.BLACK], white=players[Stone.WHITE])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    choices = [HUMAN] + sorted(STRATEGIES)
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file')
    parser.add_argument('--size', type=int, default=None,
                        help='Board size (even, at least 4)')
    parser.add_argument('--black', choices=choices, default=None,
                        help='Who plays Black')
    parser.add_argument('--white', choices=choices, default=None,
                        help='Who plays White')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random strategy')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, WARNING, ...)')
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file if given and apply command-line overrides."""
    if args.config and os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        if args.config:
            logger.warning("Config file %s not found, using defaults", args.config)
        config = get_default_config()

    overrides = config.to_dict()
    if args.size is not None:
        overrides['board']['size'] = args.size
    if args.black is not None:
        overrides['players']['black'] = args.black
    if args.white is not None:
        overrides['players']['white'] = args.white
    if args.seed is not None:
        overrides['players']['seed'] = args.seed
    if args.log_level is not None:
        overrides['logging']['log_level'] = args.log_level
    return Config.from_dict(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args)
    except (ValueError, TypeError) as e:
        print(f"Invalid configuration: {e}")
        return 2

    log = setup_logger(config)
    try:
        result = play(build_game(config))
    except (KeyboardInterrupt, EOFError):
        result = None
    finally:
        log.close()

    if result is None:
        print("\nGame abandoned.")
    else:
        print(outcome_message(result))
    return 0
