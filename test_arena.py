"""
Tests for strategy tournaments and ELO ratings.
"""
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from reversi.arena import Arena, ELORatingSystem
from reversi.stone import Stone


def test_expected_score():
    elo = ELORatingSystem()
    assert elo.get_expected_score(1500, 1500) == pytest.approx(0.5)
    assert elo.get_expected_score(1900, 1500) > 0.9


def test_update_ratings_is_zero_sum():
    elo = ELORatingSystem(k=32)
    elo.update_ratings('greedy', 'random', 1.0)
    assert elo.get_rating('greedy') == pytest.approx(1516.0)
    assert elo.get_rating('random') == pytest.approx(1484.0)
    assert elo.games_played == {'greedy': 1, 'random': 1}
    assert elo.get_leaderboard()[0]['player_id'] == 'greedy'


def test_ratings_round_trip(tmp_path):
    elo = ELORatingSystem(k=16)
    elo.update_ratings('weighted', 'greedy', 0.5)
    path = tmp_path / "elo.json"
    elo.save_ratings(str(path))

    loaded = ELORatingSystem.load_ratings(str(path))
    assert loaded.k == 16
    assert loaded.ratings == elo.ratings
    assert loaded.games_played == elo.games_played
    assert len(loaded.history) == 1


def test_play_game_returns_score():
    arena = Arena(size=6, seed=1)
    score, (black, white) = arena.play_game('greedy', 'weighted')
    assert score in (0.0, 0.5, 1.0)
    assert 0 < black + white <= 36


def test_run_tournament():
    arena = Arena(['greedy', 'random', 'weighted'], size=6, seed=3)
    results = arena.run_tournament(rounds=2)

    assert results['games_played'] == 6
    assert len(results['leaderboard']) == 3
    total = sum(p['rating'] for p in results['leaderboard'])
    assert total == pytest.approx(3 * 1500.0)
    for matchup in results['matchups'].values():
        assert matchup['wins1'] + matchup['wins2'] + matchup['draws'] == 2
    assert "Rank" in arena.format_leaderboard()


def test_arena_validation():
    with pytest.raises(ValueError):
        Arena(['greedy', 'minimax'])
    with pytest.raises(ValueError):
        Arena(['greedy']).run_tournament(rounds=1)


def test_history_records_colours():
    elo = ELORatingSystem(k=32)
    record = elo.update_ratings('random', 'weighted', 0.0, stones=(20, 44))

    assert record['black'] == 'random'
    assert record['white'] == 'weighted'
    assert record['winner'] == 'white'
    assert record['stones'] == [20, 44]
    assert record['ratings_after']['white'] == pytest.approx(1516.0)
    assert elo.colour_record('weighted', Stone.WHITE) == (1, 0, 0)
    assert elo.colour_record('weighted', Stone.BLACK) == (0, 0, 0)
    assert elo.colour_record('random', Stone.BLACK) == (0, 0, 1)

    elo.update_ratings('weighted', 'random', 0.5)
    assert elo.history[-1]['winner'] is None
    assert elo.colour_record('weighted', Stone.BLACK) == (0, 1, 0)


def test_colour_records_survive_save(tmp_path):
    elo = ELORatingSystem()
    elo.update_ratings('greedy', 'random', 1.0, stones=(40, 24))
    path = tmp_path / "elo.json"
    elo.save_ratings(str(path))

    loaded = ELORatingSystem.load_ratings(str(path))
    assert loaded.colour_record('greedy', Stone.BLACK) == (1, 0, 0)
    assert loaded.colour_record('random', Stone.WHITE) == (0, 0, 1)
    assert loaded.history[0]['stones'] == [40, 24]


def test_tournament_alternates_colours():
    arena = Arena(['greedy', 'weighted'], size=6, seed=5)
    arena.run_tournament(rounds=2)
    assert [(r['black'], r['white']) for r in arena.elo.history] == [
        ('greedy', 'weighted'), ('weighted', 'greedy')]
    for name in ('greedy', 'weighted'):
        assert sum(arena.elo.colour_record(name, Stone.BLACK)) == 1
        assert sum(arena.elo.colour_record(name, Stone.WHITE)) == 1
