"""
Rules engine for Reversi.

Legal-move detection, placement with directional flipping, forced-pass and
game-over detection, and winner resolution. Functions take any Board and
mutate it only in ``put_stone``.
"""
import logging
from typing import TYPE_CHECKING, List, Optional

from .errors import GameOutcome, IndexOutOfBound, InvalidMove, MoveResult, StoneAlreadyPlaced
from .stone import Point, Stone

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)

# (dx, dy) for the 8 compass directions
DIRECTIONS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def _ray_flips(board: 'Board', x: int, y: int, dx: int, dy: int, player: Stone) -> List[Point]:
    """
    Walk from (x, y) in direction (dx, dy) and return the sandwiched run.

    The run is one or more opponent stones immediately followed by a stone of
    ``player``. Hitting the edge or an empty cell first yields an empty list.
    """
    opponent = player.opposite()
    run = []
    cx, cy = x + dx, y + dy
    while board.get_at(cx, cy) == opponent:
        run.append(Point(cx, cy))
        cx += dx
        cy += dy
    if run and board.get_at(cx, cy) == player:
        return run
    return []


def _sandwiched(board: 'Board', x: int, y: int, player: Stone) -> List[Point]:
    flips = []
    for dx, dy in DIRECTIONS:
        flips.extend(_ray_flips(board, x, y, dx, dy, player))
    return flips


def find_flips(board: 'Board', x: int, y: int, player: Stone) -> List[Point]:
    """Stones that would flip if ``player`` moved at (x, y); empty if the move is illegal."""
    if not board.in_range(x, y) or board.get_at(x, y) is not None:
        return []
    return _sandwiched(board, x, y, player)


def check_can_put(board: 'Board', x: int, y: int, player: Stone) -> bool:
    if not board.in_range(x, y) or board.get_at(x, y) is not None:
        return False
    return any(_ray_flips(board, x, y, dx, dy, player) for dx, dy in DIRECTIONS)


def get_can_put_stones(board: 'Board', player: Stone) -> List[Point]:
    """All legal moves for ``player`` in row-major order (y outer, x inner)."""
    return [Point(x, y)
            for y in range(board.size)
            for x in range(board.size)
            if check_can_put(board, x, y, player)]


def has_valid_move(board: 'Board', player: Stone) -> bool:
    return any(check_can_put(board, x, y, player)
               for y in range(board.size)
               for x in range(board.size))


def count_flippable(board: 'Board', x: int, y: int, player: Optional[Stone] = None) -> int:
    """
    Number of stones a stone of ``player`` at (x, y) would sandwich.

    The cell's occupancy is not checked. When ``player`` is None the stone
    already at (x, y) is used.

    Raises:
        IndexOutOfBound: If (x, y) is outside the board
        ValueError: If ``player`` is None and the cell is empty
    """
    if not board.in_range(x, y):
        raise IndexOutOfBound(x=x, y=y)
    if player is None:
        player = board.get_at(x, y)
        if player is None:
            raise ValueError(f"No stone at ({x}, {y}) to count flips for")
    return len(_sandwiched(board, x, y, player))


def winner(board: 'Board') -> MoveResult:
    """Resolve the game by stone count. Equal counts are a draw."""
    black, white = board.count(Stone.BLACK), board.count(Stone.WHITE)
    if black > white:
        return MoveResult(GameOutcome.GAME_OVER_WITH_WINNER, winner=Stone.BLACK)
    if white > black:
        return MoveResult(GameOutcome.GAME_OVER_WITH_WINNER, winner=Stone.WHITE)
    return MoveResult(GameOutcome.GAME_OVER_WITH_DRAW)


def apply_move(board: 'Board', x: int, y: int, player: Stone) -> List[Point]:
    """
    Validate, place and flip without judging the resulting position.
    Used directly for one-ply simulation on a private board.

    Returns:
        The flipped points

    Raises:
        IndexOutOfBound, StoneAlreadyPlaced, InvalidMove: As for ``put_stone``
    """
    if not board.in_range(x, y):
        raise IndexOutOfBound(x=x, y=y)
    if board.get_at(x, y) is not None:
        raise StoneAlreadyPlaced(x=x, y=y)

    flips = find_flips(board, x, y, player)
    if not flips:
        raise InvalidMove(x=x, y=y)

    board.place_stone(x, y, player)
    for fx, fy in flips:
        board.flip(fx, fy)
    return flips


def put_stone(board: 'Board', x: int, y: int, player: Stone) -> MoveResult:
    """
    Play ``player`` at (x, y): validate, place, flip in all directions, then
    report what happens next.

    Returns:
        MoveResult with outcome OK (opponent moves next),
        NEXT_PLAYER_CANT_PUT_STONE (opponent must pass, ``player`` moves again),
        or one of the game-over outcomes.

    Raises:
        IndexOutOfBound: If (x, y) is outside the board
        StoneAlreadyPlaced: If the cell is occupied
        InvalidMove: If no opponent stone would be sandwiched
    """
    flips = apply_move(board, x, y, player)
    logger.debug("%s plays (%d, %d), flipping %d", player, x, y, len(flips))

    point = Point(x, y)
    opponent = player.opposite()

    if board.is_game_over():
        result = winner(board)
    elif board.count(opponent) == 0:
        result = MoveResult(GameOutcome.GAME_OVER_WITH_WINNER, winner=player)
    elif not has_valid_move(board, opponent):
        if has_valid_move(board, player):
            result = MoveResult(GameOutcome.NEXT_PLAYER_CANT_PUT_STONE, skipped=opponent)
        else:
            result = winner(board)
    else:
        result = MoveResult(GameOutcome.OK)

    result.player = player
    result.point = point
    result.flipped = flips
    return result
