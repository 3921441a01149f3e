"""
Reversi game module.
Tracks whose turn it is on top of the rules engine and routes moves for
automated sides through the same path as human moves.
"""
import logging
from typing import List, Optional, Tuple, Union

from . import rules
from .board import Board, BoardView, DEFAULT_BOARD_SIZE
from .errors import GameAlreadyOver, GameOutcome, MoveResult
from .stone import Point, Stone
from .strategies import Strategy

logger = logging.getLogger(__name__)


class Human:
    """Marker for a side whose moves arrive from outside the engine."""
    name = 'human'

    def __repr__(self) -> str:
        return 'HUMAN'


HUMAN = Human()

PlayerType = Union[Human, Strategy]


class PlayerManager:
    """Maps each side to either HUMAN or the Strategy that plays it."""

    def __init__(self, black: PlayerType = HUMAN, white: PlayerType = HUMAN):
        self._players = {}
        self.set_player(Stone.BLACK, black)
        self.set_player(Stone.WHITE, white)

    def set_player(self, stone: Stone, player: PlayerType) -> None:
        if isinstance(player, Strategy) and player.color != stone:
            raise ValueError(f"{player!r} plays {player.color}, cannot be assigned to {stone}")
        if not isinstance(player, (Human, Strategy)):
            raise TypeError(f"Expected HUMAN or a Strategy, got {player!r}")
        self._players[stone] = player

    def player(self, stone: Stone) -> PlayerType:
        return self._players[stone]

    def is_human(self, stone: Stone) -> bool:
        return isinstance(self._players[stone], Human)

    def decide(self, board: BoardView, turn: Stone,
               moves: Optional[List[Point]] = None) -> Optional[Point]:
        """Ask the strategy for ``turn`` to pick one of ``moves``; None for a human side."""
        player = self._players[turn]
        if isinstance(player, Human):
            return None
        return player.decide(board, moves)


class ReversiGame:
    """
    A single game: the board, whose turn it is, and who plays each side.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE,
                 black: PlayerType = HUMAN, white: PlayerType = HUMAN):
        """
        Start a game from the standard four-stone opening with Black to move.

        Args:
            size: Board dimension (even, at least 4)
            black: HUMAN or a Strategy bound to Stone.BLACK
            white: HUMAN or a Strategy bound to Stone.WHITE
        """
        board = Board(size)
        board.init_four_central_squares()
        self._setup(board, Stone.BLACK, PlayerManager(black, white))

    @classmethod
    def from_board(cls, board: Board, turn: Stone = Stone.BLACK,
                   black: PlayerType = HUMAN, white: PlayerType = HUMAN) -> 'ReversiGame':
        """Continue a game from an arbitrary position."""
        game = cls.__new__(cls)
        game._setup(board, turn, PlayerManager(black, white))
        return game

    def _setup(self, board: Board, turn: Stone, players: PlayerManager) -> None:
        self._board = board
        self._view = BoardView(board)
        self.turn = turn
        self.players = players
        self.result: Optional[MoveResult] = None
        self.move_history: List[MoveResult] = []

    @property
    def board(self) -> BoardView:
        return self._view

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def is_finished(self) -> bool:
        return self.result is not None

    def take_turn(self) -> None:
        self.turn = self.turn.opposite()

    def put_stone(self, x: int, y: int) -> MoveResult:
        """
        Play the side to move at (x, y).

        The turn passes to the opponent on OK, stays on
        NEXT_PLAYER_CANT_PUT_STONE, and the game locks on a terminal outcome.

        Raises:
            GameAlreadyOver: If a terminal outcome was already reported
            IndexOutOfBound, StoneAlreadyPlaced, InvalidMove: On a bad move;
                the game state is unchanged
        """
        if self.result is not None:
            raise GameAlreadyOver(self.result)

        result = rules.put_stone(self._board, x, y, self.turn)
        self.move_history.append(result)

        if result.is_game_over():
            self.result = result
            black, white = self.get_score()
            logger.info("Game over (%s), winner: %s, score %d-%d",
                        result.outcome.value, result.winner, black, white)
        elif result.outcome == GameOutcome.NEXT_PLAYER_CANT_PUT_STONE:
            logger.info("%s has no legal move and passes", result.skipped)
        else:
            self.take_turn()
        return result

    def is_human_turn(self) -> bool:
        return self.players.is_human(self.turn)

    def play_computer_move(self) -> MoveResult:
        """
        Let the strategy bound to the side to move choose and play a move.

        Raises:
            GameAlreadyOver: If the game has ended
            ValueError: If the side to move is human
        """
        if self.result is not None:
            raise GameAlreadyOver(self.result)
        if self.is_human_turn():
            raise ValueError(f"{self.turn} is played by a human")
        point = self.players.decide(self._view, self.turn, self.get_can_put_stones())
        logger.debug("%r chose %s", self.players.player(self.turn), point)
        return self.put_stone(point.x, point.y)

    def get_can_put_stones(self) -> List[Point]:
        return rules.get_can_put_stones(self._board, self.turn)

    def check_can_put(self, x: int, y: int) -> bool:
        return rules.check_can_put(self._board, x, y, self.turn)

    def winner(self) -> MoveResult:
        """Resolve the current position by stone count."""
        return rules.winner(self._board)

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).
        """
        return self._board.get_score()

    def __str__(self) -> str:
        black, white = self.get_score()
        status = [str(self._board).rstrip('\n'),
                  f"Current player: {self.turn}",
                  f"Score - Black: {black}, White: {white}"]
        if self.result is not None:
            if self.result.winner is None:
                status.append("Game over! It's a draw!")
            else:
                status.append(f"Game over! {self.result.winner} wins!")
        return '\n'.join(status)
