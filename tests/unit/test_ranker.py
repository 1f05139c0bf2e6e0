"""
Unit tests for position rankers.

Tests verify:
1. Motif counts on hand-built positions
2. Terminal positions short-circuit to fixed scores
3. Weight normalization and its failure modes
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from hexgame.config import RANKER_CONFIG
from hexgame.engine.ranker import FeatureRanker, NullRanker
from hexgame.errors import ConfigurationError
from hexgame.game.game_state import GameState
from hexgame.game.hex_grid import ORIGIN, Hex
from hexgame.game.player import Player


def make_state(first=(), second=(), radius=4):
    """Place stones directly, bypassing turn order and termination."""
    state = GameState(radius=radius)
    for cell in first:
        state.board.place(cell, Player.FIRST)
    for cell in second:
        state.board.place(cell, Player.SECOND)
    return state


class TestMotifCounts:
    """Test the four motif counters."""

    def test_empty_board(self):
        state = make_state()
        assert FeatureRanker.count_triads(state, Player.FIRST) == 0
        assert FeatureRanker.count_windows(state, Player.FIRST) == 0
        assert FeatureRanker.count_slots(state, Player.FIRST) == 0
        assert FeatureRanker.count_doubles(state, Player.FIRST) == 0

    def test_triad_each_orientation(self):
        up = make_state(first=[Hex(0, 0), Hex(1, 0), Hex(1, -1)])
        down = make_state(first=[Hex(0, 0), Hex(1, 0), Hex(0, 1)])
        assert FeatureRanker.count_triads(up, Player.FIRST) == 1
        assert FeatureRanker.count_triads(down, Player.FIRST) == 1

    def test_triads_counted_once(self):
        """Center plus its ring contains six triangles."""
        state = make_state(first=[ORIGIN] + ORIGIN.neighbors())
        assert FeatureRanker.count_triads(state, Player.FIRST) == 6

    def test_triads_ignore_opponent(self):
        state = make_state(first=[Hex(0, 0), Hex(1, 0)], second=[Hex(1, -1)])
        assert FeatureRanker.count_triads(state, Player.FIRST) == 0
        assert FeatureRanker.count_triads(state, Player.SECOND) == 0

    def test_slot(self):
        state = make_state(first=[Hex(0, 0), Hex(2, 0)])
        assert FeatureRanker.count_slots(state, Player.FIRST) == 1
        assert FeatureRanker.count_windows(state, Player.FIRST) == 0
        assert FeatureRanker.count_doubles(state, Player.FIRST) == 0

    def test_slot_blocked_by_opponent(self):
        state = make_state(first=[Hex(0, 0), Hex(2, 0)], second=[Hex(1, 0)])
        assert FeatureRanker.count_slots(state, Player.FIRST) == 0

    def test_window(self):
        state = make_state(first=[Hex(0, 0), Hex(3, 0)])
        assert FeatureRanker.count_windows(state, Player.FIRST) == 1
        assert FeatureRanker.count_slots(state, Player.FIRST) == 0

    def test_window_on_other_axis(self):
        state = make_state(first=[Hex(0, -1), Hex(0, 2)])
        assert FeatureRanker.count_windows(state, Player.FIRST) == 1

    def test_double_counts_both_open_ends(self):
        state = make_state(first=[Hex(0, 0), Hex(1, 0)])
        assert FeatureRanker.count_doubles(state, Player.FIRST) == 2

    def test_double_with_one_end_closed(self):
        state = make_state(first=[Hex(0, 0), Hex(1, 0)], second=[Hex(2, 0)])
        assert FeatureRanker.count_doubles(state, Player.FIRST) == 1

    def test_counts_are_per_player(self):
        state = make_state(first=[Hex(0, 0), Hex(2, 0)], second=[Hex(0, 2), Hex(1, 2)])
        assert FeatureRanker.count_slots(state, Player.SECOND) == 0
        assert FeatureRanker.count_doubles(state, Player.SECOND) == 2


class TestFeatureRanker:
    """Test weighting, normalization and terminal handling."""

    def test_weighted_sum(self):
        state = make_state(first=[Hex(0, 0), Hex(1, 0), Hex(1, -1)])
        ranker = FeatureRanker(window_score=0.0, triad_score=1.0, slot_score=0.0, double_score=0.0)
        assert ranker.rank(state, Player.FIRST) == 1.0

        ranker = FeatureRanker(window_score=0.0, triad_score=0.0, slot_score=0.0, double_score=0.5)
        expected = 0.5 * FeatureRanker.count_doubles(state, Player.FIRST)
        assert ranker.rank(state, Player.FIRST) == pytest.approx(expected)

    def test_normalize_sums_to_one(self):
        ranker = FeatureRanker(window_score=2.0, triad_score=5.0, slot_score=1.0, double_score=1.0)
        ranker.normalize()
        assert sum(ranker.weights()) == pytest.approx(1.0)
        assert ranker.triad_score == pytest.approx(5.0 / 9.0)

    def test_from_config_normalizes(self):
        ranker = FeatureRanker.from_config()
        assert sum(ranker.weights()) == pytest.approx(1.0)

    def test_zero_weights_rejected(self):
        ranker = FeatureRanker(window_score=0.0, triad_score=0.0, slot_score=0.0, double_score=0.0)
        with pytest.raises(ConfigurationError):
            ranker.normalize()

    def test_negative_weight_rejected(self):
        ranker = FeatureRanker(window_score=-1.0, triad_score=1.0, slot_score=1.0, double_score=1.0)
        with pytest.raises(ConfigurationError):
            ranker.normalize()

    def test_terminal_scores_override_motifs(self):
        state = GameState()
        moves = [Hex(0, 0), Hex(-4, 0), Hex(1, 0), Hex(-4, 2), Hex(2, 0)]  # FIRST makes three
        for move in moves:
            state.apply_move(move)

        ranker = FeatureRanker.from_config()
        assert ranker.rank(state, Player.SECOND) == RANKER_CONFIG['win_score']
        assert ranker.rank(state, Player.FIRST) == RANKER_CONFIG['loss_score']

    def test_draw_score(self):
        state = GameState(radius=1)
        for move in [Hex(0, 0), Hex(-1, 0), Hex(1, 0), Hex(-1, 1), Hex(1, -1), Hex(0, 1), Hex(0, -1)]:
            state.apply_move(move)

        assert FeatureRanker.from_config().rank(state, Player.FIRST) == RANKER_CONFIG['draw_score']
        assert NullRanker().rank(state, Player.SECOND) == RANKER_CONFIG['draw_score']

    def test_rank_difference_is_antisymmetric(self):
        state = make_state(first=[Hex(0, 0), Hex(1, 0), Hex(1, -1)], second=[Hex(-2, 0), Hex(0, 2)])
        ranker = FeatureRanker.from_config()
        a = ranker.rank(state, Player.FIRST)
        b = ranker.rank(state, Player.SECOND)
        assert a - b == -(b - a)


class TestNullRanker:

    def test_running_position_is_zero(self):
        state = GameState()
        state.apply_move(Hex(0, 0))
        assert NullRanker().rank(state, Player.FIRST) == 0.0
        assert NullRanker().rank(state, Player.SECOND) == 0.0

    def test_decided_position(self):
        state = GameState()
        for move in [Hex(0, 0), Hex(-4, 0), Hex(1, 0), Hex(-4, 2), Hex(3, 0), Hex(-4, 4), Hex(2, 0)]:
            state.apply_move(move)
        assert NullRanker().rank(state, Player.FIRST) == RANKER_CONFIG['win_score']
        assert NullRanker().rank(state, Player.SECOND) == RANKER_CONFIG['loss_score']
