"""
Tests for legal-move detection and the put_stone state transition.
"""
import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi import rules
from reversi.board import Board
from reversi.errors import GameOutcome, IndexOutOfBound, InvalidMove, StoneAlreadyPlaced
from reversi.stone import Point, Stone


def opening() -> Board:
    board = Board()
    board.init_four_central_squares()
    return board


def test_opening_moves_in_row_major_order():
    board = opening()
    assert rules.get_can_put_stones(board, Stone.BLACK) == [
        Point(3, 2), Point(2, 3), Point(5, 4), Point(4, 5)]
    assert rules.get_can_put_stones(board, Stone.WHITE) == [
        Point(4, 2), Point(5, 3), Point(2, 4), Point(3, 5)]


def test_find_flips():
    board = opening()
    assert rules.find_flips(board, 3, 2, Stone.BLACK) == [Point(3, 3)]
    assert rules.find_flips(board, 0, 0, Stone.BLACK) == []
    assert rules.find_flips(board, 3, 3, Stone.BLACK) == []
    assert rules.check_can_put(board, 3, 2, Stone.BLACK)
    assert not rules.check_can_put(board, 3, 2, Stone.WHITE)


def test_run_stops_at_empty_cell():
    board = Board.from_rows([
        "BW.W....",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
    ])
    assert rules.find_flips(board, 4, 0, Stone.BLACK) == []
    assert rules.find_flips(board, 2, 0, Stone.BLACK) == [Point(1, 0)]


def test_flips_in_several_directions():
    board = Board.from_rows([
        "B.B.....",
        "WW......",
        ".WB.....",
        "........",
        "........",
        "........",
        "........",
        "........",
    ])
    # up, up-right and right each end on a black stone
    flips = rules.find_flips(board, 0, 2, Stone.BLACK)
    assert sorted(flips) == [Point(0, 1), Point(1, 1), Point(1, 2)]
    assert rules.count_flippable(board, 0, 2, Stone.BLACK) == 3


def test_count_flippable_uses_occupant():
    board = opening()
    board.place_stone(3, 2, Stone.BLACK)
    assert rules.count_flippable(board, 3, 2) == 1
    with pytest.raises(ValueError):
        rules.count_flippable(board, 0, 0)
    with pytest.raises(IndexOutOfBound):
        rules.count_flippable(board, 8, 0, Stone.BLACK)


def test_legal_move_adds_one_plus_flipped():
    board = opening()
    for move in rules.get_can_put_stones(board, Stone.BLACK):
        trial = board.copy()
        before_black, before_white = trial.get_score()
        before_empty = trial.empty_count()

        result = rules.put_stone(trial, move.x, move.y, Stone.BLACK)

        flipped = len(result.flipped)
        assert flipped >= 1
        assert trial.count(Stone.BLACK) == before_black + 1 + flipped
        assert trial.count(Stone.WHITE) == before_white - flipped
        assert trial.empty_count() == before_empty - 1
        assert result.outcome == GameOutcome.OK
        assert result.point == move
        assert result.player == Stone.BLACK


@pytest.mark.parametrize("x, y, error", [
    (3, 3, StoneAlreadyPlaced),
    (4, 3, StoneAlreadyPlaced),
    (8, 0, IndexOutOfBound),
    (0, -1, IndexOutOfBound),
    (0, 0, InvalidMove),
    (5, 5, InvalidMove),
])
def test_failed_moves_leave_board_unchanged(x, y, error):
    board = opening()
    before = board.copy()
    with pytest.raises(error) as excinfo:
        rules.put_stone(board, x, y, Stone.BLACK)
    assert board == before
    assert excinfo.value.outcome.value == error.outcome.value


def test_board_full_resolves_by_count():
    board = Board.from_rows([".WWWWWWB"] + ["WWWWWWWW"] * 7)
    result = rules.put_stone(board, 0, 0, Stone.BLACK)

    assert result.outcome == GameOutcome.GAME_OVER_WITH_WINNER
    assert result.winner == Stone.WHITE
    assert board.count(Stone.BLACK) == 8
    assert board.count(Stone.WHITE) == 56


def test_opponent_cannot_move_is_forced_pass():
    board = Board.from_rows([
        "BW......",
        "........",
        "........",
        "........",
        "........",
        "........",
        "........",
        "......WB",
    ])
    result = rules.put_stone(board, 2, 0, Stone.BLACK)
    assert result.outcome == GameOutcome.NEXT_PLAYER_CANT_PUT_STONE
    assert result.skipped == Stone.WHITE
    assert not result.is_game_over()


def test_elimination_ends_game():
    board = Board.from_rows(["BW.."] + ["...."] * 3)
    result = rules.put_stone(board, 2, 0, Stone.BLACK)
    assert result.outcome == GameOutcome.GAME_OVER_WITH_WINNER
    assert result.winner == Stone.BLACK


@pytest.mark.parametrize("last_row, outcome, winner", [
    ("WWWW....", GameOutcome.GAME_OVER_WITH_WINNER, Stone.WHITE),
    ("WWW.....", GameOutcome.GAME_OVER_WITH_DRAW, None),
    ("WW......", GameOutcome.GAME_OVER_WITH_WINNER, Stone.BLACK),
])
def test_both_sides_stuck_resolves_by_count(last_row, outcome, winner):
    board = Board.from_rows(["BW......"] + ["........"] * 6 + [last_row])
    result = rules.put_stone(board, 2, 0, Stone.BLACK)
    assert result.outcome == outcome
    assert result.winner == winner
    assert result.is_game_over()


def test_winner_draw():
    board = opening()
    assert rules.winner(board).outcome == GameOutcome.GAME_OVER_WITH_DRAW


def test_apply_move_flips_without_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="reversi.rules")
    board = opening()
    assert rules.apply_move(board, 3, 2, Stone.BLACK) == [Point(3, 3)]
    assert board.get_at(3, 2) == Stone.BLACK
    assert board.get_at(3, 3) == Stone.BLACK
    assert not [r for r in caplog.records if r.name == "reversi.rules"]

    before = board.copy()
    with pytest.raises(InvalidMove):
        rules.apply_move(board, 0, 0, Stone.WHITE)
    assert board == before
