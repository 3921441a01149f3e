"""
Board module for Reversi.
Holds the grid of cells and the primitives the rules engine is built on:
reading cells, placing a stone, flipping a stone and counting.
"""
from typing import Iterable, List, Optional, Tuple
import numpy as np

from .errors import IndexOutOfBound, NoStoneToFlip, StoneAlreadyPlaced
from .stone import Point, Stone
from . import rules

DEFAULT_BOARD_SIZE = 8
EMPTY = 0

_SYMBOLS = {EMPTY: '.', Stone.BLACK: 'B', Stone.WHITE: 'W'}
_FROM_SYMBOL = {'.': EMPTY, 'B': Stone.BLACK, 'W': Stone.WHITE}


def validate_size(size: int) -> None:
    """Raise ValueError unless size is an even number >= 4."""
    if size % 2 != 0 or size < 4:
        raise ValueError(f"Board size must be an even number >= 4, got {size}")


class Board:
    """
    An N x N Reversi board backed by a numpy array indexed as [y, x].
    Cells hold 0 for empty or a Stone value.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        """
        Create an empty board.

        Args:
            size: Board dimension, an even number of at least 4

        Raises:
            ValueError: If the size is odd or smaller than 4
        """
        validate_size(size)
        self._size = size
        self._grid = np.zeros((size, size), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'Board':
        """
        Build a board from text rows using 'B', 'W' and '.' (one row per y).

        Args:
            rows: Strings of equal length, as many as the board size
        """
        rows = [row.replace(' ', '') for row in rows]
        board = cls(len(rows))
        for y, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {board.size}")
            for x, symbol in enumerate(row):
                board._grid[y, x] = _FROM_SYMBOL[symbol]
        return board

    @property
    def size(self) -> int:
        return self._size

    def in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def get_at(self, x: int, y: int) -> Optional[Stone]:
        """Return the stone at (x, y), or None for an empty or out-of-range cell."""
        if not self.in_range(x, y):
            return None
        value = self._grid[y, x]
        return Stone(int(value)) if value != EMPTY else None

    def count(self, stone: Stone) -> int:
        return int(np.count_nonzero(self._grid == stone))

    def empty_count(self) -> int:
        return int(np.count_nonzero(self._grid == EMPTY))

    def init_four_central_squares(self) -> None:
        """Place the starting cross: White on the main diagonal, Black on the other."""
        half = self._size // 2
        self._grid[half - 1, half - 1] = Stone.WHITE
        self._grid[half - 1, half] = Stone.BLACK
        self._grid[half, half - 1] = Stone.BLACK
        self._grid[half, half] = Stone.WHITE

    def place_stone(self, x: int, y: int, player: Stone) -> None:
        """
        Put a stone on an empty cell without any rule checks.

        Raises:
            IndexOutOfBound: If (x, y) is outside the board
            StoneAlreadyPlaced: If the cell is occupied
        """
        if not self.in_range(x, y):
            raise IndexOutOfBound(x=x, y=y)
        if self._grid[y, x] != EMPTY:
            raise StoneAlreadyPlaced(x=x, y=y)
        self._grid[y, x] = player

    def flip(self, x: int, y: int) -> None:
        """
        Recolor the stone at (x, y) to the opposite side.

        Raises:
            IndexOutOfBound: If (x, y) is outside the board
            NoStoneToFlip: If the cell is empty
        """
        if not self.in_range(x, y):
            raise IndexOutOfBound(x=x, y=y)
        stone = self.get_at(x, y)
        if stone is None:
            raise NoStoneToFlip(x=x, y=y)
        self._grid[y, x] = stone.opposite()

    def is_game_over(self) -> bool:
        """True when every cell is occupied."""
        return not bool(np.any(self._grid == EMPTY))

    def get_score(self) -> Tuple[int, int]:
        """Return (black, white) stone counts."""
        return self.count(Stone.BLACK), self.count(Stone.WHITE)

    def get_board_state(self) -> np.ndarray:
        """Return a copy of the underlying grid."""
        return self._grid.copy()

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self._size)
        new_board._grid = self._grid.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self._grid, other._grid))

    __hash__ = None

    def __str__(self) -> str:
        rows = []
        for y in range(self._size):
            rows.append(''.join(_SYMBOLS[int(v)] for v in self._grid[y]))
        return '\n'.join(rows) + '\n'

    def __repr__(self) -> str:
        black, white = self.get_score()
        return f"Board(size={self._size}, black={black}, white={white})"


class BoardView:
    """
    Read-only access to a live board, handed to strategies and renderers.
    Use ``copy()`` to get a private Board for simulation.
    """

    def __init__(self, board: Board):
        self._board = board

    @property
    def size(self) -> int:
        return self._board.size

    def in_range(self, x: int, y: int) -> bool:
        return self._board.in_range(x, y)

    def get_at(self, x: int, y: int) -> Optional[Stone]:
        return self._board.get_at(x, y)

    def count(self, stone: Stone) -> int:
        return self._board.count(stone)

    def get_score(self) -> Tuple[int, int]:
        return self._board.get_score()

    def is_game_over(self) -> bool:
        return self._board.is_game_over()

    def get_can_put_stones(self, player: Stone) -> List[Point]:
        return rules.get_can_put_stones(self._board, player)

    def check_can_put(self, x: int, y: int, player: Stone) -> bool:
        return rules.check_can_put(self._board, x, y, player)

    def count_flippable(self, x: int, y: int, player: Optional[Stone] = None) -> int:
        return rules.count_flippable(self._board, x, y, player)

    def get_board_state(self) -> np.ndarray:
        return self._board.get_board_state()

    def copy(self) -> Board:
        return self._board.copy()

    def __str__(self) -> str:
        return str(self._board)
