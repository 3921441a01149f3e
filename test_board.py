"""
Tests for the board primitives.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.board import Board, BoardView
from reversi.errors import IndexOutOfBound, NoStoneToFlip, StoneAlreadyPlaced
from reversi.stone import Stone


def test_opposite_is_involution():
    for stone in Stone:
        assert stone.opposite() != stone
        assert stone.opposite().opposite() == stone
    assert str(Stone.BLACK) == "Black"


@pytest.mark.parametrize("size", [3, 5, 2, 0, -4])
def test_invalid_size_refuses_to_construct(size):
    with pytest.raises(ValueError):
        Board(size)


def test_initial_board():
    """Four central stones in the diagonal cross, everything else empty."""
    board = Board()
    board.init_four_central_squares()

    assert board.size == 8
    assert board.count(Stone.BLACK) == 2
    assert board.count(Stone.WHITE) == 2
    assert board.empty_count() == 60
    assert board.get_at(3, 3) == Stone.WHITE
    assert board.get_at(4, 4) == Stone.WHITE
    assert board.get_at(4, 3) == Stone.BLACK
    assert board.get_at(3, 4) == Stone.BLACK
    assert str(board) == ("........\n........\n........\n...WB...\n"
                          "...BW...\n........\n........\n........\n")


def test_small_board_opening():
    board = Board(4)
    board.init_four_central_squares()
    assert str(board) == "....\n.WB.\n.BW.\n....\n"


def test_get_at_out_of_range_returns_none():
    board = Board()
    board.init_four_central_squares()
    assert board.get_at(-1, 0) is None
    assert board.get_at(8, 3) is None
    assert board.get_at(0, 0) is None
    assert not board.in_range(8, 0)
    assert board.in_range(7, 7)


def test_place_stone_checks():
    board = Board()
    board.place_stone(0, 0, Stone.BLACK)
    assert board.get_at(0, 0) == Stone.BLACK

    with pytest.raises(StoneAlreadyPlaced):
        board.place_stone(0, 0, Stone.WHITE)
    with pytest.raises(IndexOutOfBound):
        board.place_stone(8, 0, Stone.WHITE)
    assert board.count(Stone.WHITE) == 0


def test_flip():
    board = Board()
    board.init_four_central_squares()
    board.flip(3, 3)
    assert board.get_at(3, 3) == Stone.BLACK
    assert board.count(Stone.BLACK) + board.count(Stone.WHITE) == 4

    with pytest.raises(NoStoneToFlip):
        board.flip(0, 0)
    with pytest.raises(IndexOutOfBound):
        board.flip(0, 9)


def test_is_game_over_when_full():
    board = Board.from_rows(["BWBW", "WBWB", "BWBW", "WBW."])
    assert not board.is_game_over()
    board.place_stone(3, 3, Stone.BLACK)
    assert board.is_game_over()
    assert board.get_score() == (8, 8)


def test_copy_is_independent():
    board = Board()
    board.init_four_central_squares()
    clone = board.copy()
    assert clone == board

    clone.place_stone(0, 0, Stone.BLACK)
    assert clone != board
    assert board.get_at(0, 0) is None


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Board.from_rows(["....", "...", "....", "...."])


def test_board_view_is_read_only_snapshot_source():
    board = Board()
    board.init_four_central_squares()
    view = BoardView(board)

    assert view.size == 8
    assert view.get_at(3, 3) == Stone.WHITE
    assert not hasattr(view, 'place_stone')
    assert not hasattr(view, 'flip')

    state = view.get_board_state()
    state[0, 0] = Stone.BLACK
    assert board.get_at(0, 0) is None
    assert isinstance(state, np.ndarray)

    private = view.copy()
    private.place_stone(0, 0, Stone.BLACK)
    assert view.get_at(0, 0) is None
