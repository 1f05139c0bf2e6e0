"""
Position evaluators ("rankers") for the search engine.

A ranker scores a position from one player's point of view; higher is better
for that player. The search only ever uses the difference
rank(state, mover) - rank(state, opponent), so rankers need not be zero-sum.

FeatureRanker counts small stone patterns (motifs). Counting is done on the
board's numpy array by comparing it against copies of itself shifted along the
six axial directions, so each motif costs a handful of array operations rather
than a walk over every stone.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from hexgame.config import FEATURE_WEIGHTS, RANKER_CONFIG
from hexgame.errors import ConfigurationError
from hexgame.game.board import EMPTY
from hexgame.game.game_state import GameState, Outcome
from hexgame.game.hex_grid import DIRECTIONS
from hexgame.game.player import Player


# Longest reach of any motif, in cells from the stone it is anchored on
MOTIF_REACH = 3

# Windows and slots are symmetric (x _ _ x reads the same from either end), so
# each is looked for in one half of the directions only and found exactly once.
SLOT_DIRECTIONS = (0, 1, 2)
WINDOW_DIRECTIONS = (3, 4, 5)
DOUBLE_DIRECTIONS = (0, 1, 2, 3, 4, 5)

# A triangle of mutually adjacent cells is either {p, p+d0, p+d1} or
# {p, p+d5, p+d0}; anchoring on p counts each triangle once.
TRIAD_SLOTS = ((0, 1), (5, 0))


class Ranker(ABC):
    """Scores a position from `player`'s perspective."""

    @abstractmethod
    def rank(self, state: GameState, player: Player) -> float:
        pass


def terminal_rank(state: GameState, player: Player, config: Optional[dict] = None) -> Optional[float]:
    """
    Fixed score for a finished game, or None while the game is still running.
    """
    config = config or RANKER_CONFIG
    status = state.terminal_status()
    if status.outcome is Outcome.DECIDED:
        return config['win_score'] if status.winner == player else config['loss_score']
    if status.outcome is Outcome.DRAWN:
        return config['draw_score']
    return None


class NullRanker(Ranker):
    """
    Knows only who has won. Every running position scores 0, so a search over
    it plays randomly until a forced result comes within its horizon.
    """

    def __init__(self, config: Optional[dict] = None):
        self.config = config or RANKER_CONFIG

    def rank(self, state: GameState, player: Player) -> float:
        score = terminal_rank(state, player, self.config)
        return 0.0 if score is None else score


class _ShiftedBoard:
    """Board array padded with empty cells so every shift stays in bounds."""

    def __init__(self, array: np.ndarray, reach: int = MOTIF_REACH):
        self.size = array.shape[0]
        self.reach = reach
        self.padded = np.pad(array, reach, constant_values=EMPTY)

    def at(self, direction: int, steps: int) -> np.ndarray:
        """Value of the cell `steps` away in `direction`, for every cell at once."""
        dq, dr = DIRECTIONS[direction % 6]
        q0 = self.reach + dq * steps
        r0 = self.reach + dr * steps
        return self.padded[q0:q0 + self.size, r0:r0 + self.size]


@dataclass
class FeatureRanker(Ranker):
    """
    Weighted sum of four motif counts for the ranked player's stones.

    Finished games short-circuit to the terminal scores; the motif sum is only
    used for running positions.
    """
    # x _ _ x
    window_score: float = FEATURE_WEIGHTS['window_score']
    # xx
    # x
    triad_score: float = FEATURE_WEIGHTS['triad_score']
    # x _ x
    slot_score: float = FEATURE_WEIGHTS['slot_score']
    # x x _
    double_score: float = FEATURE_WEIGHTS['double_score']
    config: dict = field(default_factory=lambda: dict(RANKER_CONFIG), repr=False, compare=False)

    @classmethod
    def from_config(cls, weights: Optional[dict] = None, normalize: bool = True) -> "FeatureRanker":
        ranker = cls(**(weights or FEATURE_WEIGHTS))
        if normalize:
            ranker.normalize()
        return ranker

    def weights(self) -> tuple[float, float, float, float]:
        return self.window_score, self.triad_score, self.slot_score, self.double_score

    def normalize(self):
        """
        Rescale the weights so they sum to 1.

        Raises:
            ConfigurationError: if any weight is negative or the total is ~0
        """
        weights = self.weights()
        if any(w < 0 for w in weights):
            raise ConfigurationError("Feature weights must be non-negative", {"weights": weights})

        total = sum(weights)
        if total <= self.config['weight_epsilon']:
            raise ConfigurationError("Feature weights sum to zero", {"weights": weights})

        self.window_score /= total
        self.triad_score /= total
        self.slot_score /= total
        self.double_score /= total

    @staticmethod
    def count_triads(state: GameState, player: Player) -> int:
        board = _ShiftedBoard(state.board.array)
        own = int(player)
        mine = state.board.array == own
        total = 0
        for first, second in TRIAD_SLOTS:
            total += np.count_nonzero(mine & (board.at(first, 1) == own) & (board.at(second, 1) == own))
        return int(total)

    @staticmethod
    def count_windows(state: GameState, player: Player) -> int:
        board = _ShiftedBoard(state.board.array)
        own = int(player)
        mine = state.board.array == own
        total = 0
        for d in WINDOW_DIRECTIONS:
            total += np.count_nonzero(
                mine
                & (board.at(d, 1) == EMPTY)
                & (board.at(d, 2) == EMPTY)
                & (board.at(d, 3) == own)
            )
        return int(total)

    @staticmethod
    def count_slots(state: GameState, player: Player) -> int:
        board = _ShiftedBoard(state.board.array)
        own = int(player)
        mine = state.board.array == own
        total = 0
        for d in SLOT_DIRECTIONS:
            total += np.count_nonzero(mine & (board.at(d, 1) == EMPTY) & (board.at(d, 2) == own))
        return int(total)

    @staticmethod
    def count_doubles(state: GameState, player: Player) -> int:
        board = _ShiftedBoard(state.board.array)
        own = int(player)
        mine = state.board.array == own
        total = 0
        for d in DOUBLE_DIRECTIONS:
            total += np.count_nonzero(mine & (board.at(d, 1) == own) & (board.at(d, 2) == EMPTY))
        return int(total)

    def features(self, state: GameState, player: Player) -> dict:
        return {
            'windows': self.count_windows(state, player),
            'triads': self.count_triads(state, player),
            'slots': self.count_slots(state, player),
            'doubles': self.count_doubles(state, player),
        }

    def rank(self, state: GameState, player: Player) -> float:
        score = terminal_rank(state, player, self.config)
        if score is not None:
            return score

        counts = self.features(state, player)
        return (
            self.triad_score * counts['triads']
            + self.window_score * counts['windows']
            + self.slot_score * counts['slots']
            + self.double_score * counts['doubles']
        )
