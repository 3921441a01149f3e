"""
Stone and coordinate types shared by the board, rules and strategies.
"""
from enum import IntEnum
from typing import NamedTuple


class Stone(IntEnum):
    """The two sides. 0 is left free for the empty cell in the board grid."""

    BLACK = 1
    WHITE = 2

    def opposite(self) -> 'Stone':
        return Stone(3 - self.value)

    def __str__(self) -> str:
        return self.name.capitalize()

    # IntEnum formats as an int otherwise
    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class Point(NamedTuple):
    """A cell coordinate: x is the column, y is the row."""

    x: int
    y: int
