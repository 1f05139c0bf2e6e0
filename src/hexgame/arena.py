"""
Self-play between two AIs.

play_game runs a single game to completion; run_match plays a series,
optionally swapping who moves first, and tallies the results. random_ai builds
an opponent with randomly drawn (normalized) feature weights.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from tqdm import tqdm

from hexgame.config import ARENA_CONFIG, BOARD_CONFIG
from hexgame.engine.alphabeta import Ai, RankerAi
from hexgame.engine.ranker import FeatureRanker
from hexgame.errors import InvalidMoveError
from hexgame.game.game_state import GameState, Outcome
from hexgame.game.player import Player


logger = logging.getLogger(__name__)


class GameResult(Enum):
    TIE = 0
    PLAYER1 = 1     # The AI that moved first
    PLAYER2 = 2


@dataclass
class MatchSummary:
    """Tally of a match between AI `a` and AI `b`."""
    games: int = 0
    a_wins: int = 0
    b_wins: int = 0
    draws: int = 0

    @property
    def a_score(self) -> float:
        """Win rate of `a`, counting draws as half."""
        if self.games == 0:
            return 0.0
        return (self.a_wins + 0.5 * self.draws) / self.games


def random_feature_ranker(rng: Optional[np.random.Generator] = None) -> FeatureRanker:
    rng = rng if rng is not None else np.random.default_rng()
    window, triad, slot, double = rng.random(4)
    ranker = FeatureRanker(
        window_score=float(window),
        triad_score=float(triad),
        slot_score=float(slot),
        double_score=float(double),
    )
    ranker.normalize()
    return ranker


def random_ai(recursion_limit: Optional[int] = None, seed: Optional[int] = None) -> RankerAi:
    if recursion_limit is None:
        recursion_limit = ARENA_CONFIG['recursion_limit']
    rng = np.random.default_rng(seed)
    return RankerAi(random_feature_ranker(rng), recursion_limit, rng=rng)


def play_game(a: Ai, b: Ai, radius: Optional[int] = None) -> GameResult:
    """
    Play one game with `a` moving first.

    Raises:
        InvalidMoveError: if either AI returns an illegal cell
    """
    game = GameState(radius if radius is not None else BOARD_CONFIG['radius'])
    toggle = True
    while True:
        player = game.current_player
        ai = a if toggle else b
        move = ai.choose(game, player)
        result = game.apply_move(move)
        logger.debug("%s -> %s: %s", player, move, result)

        if result.outcome is Outcome.REJECTED:
            raise InvalidMoveError("AI chose an illegal move", {"ai": repr(ai), "move": move})
        if result.outcome is Outcome.DRAWN:
            return GameResult.TIE
        if result.outcome is Outcome.DECIDED:
            return GameResult.PLAYER1 if result.winner == Player.FIRST else GameResult.PLAYER2

        toggle = not toggle


def run_match(
    a: Ai,
    b: Ai,
    num_games: Optional[int] = None,
    swap_sides: Optional[bool] = None,
    radius: Optional[int] = None,
    progress: bool = False,
) -> MatchSummary:
    """
    Play `num_games` games between `a` and `b`.

    Args:
        a, b: The two AIs
        num_games: Games to play
        swap_sides: Alternate which AI moves first (a starts game 0)
        radius: Board radius
        progress: Show a tqdm progress bar

    Returns:
        MatchSummary from `a`'s point of view
    """
    if num_games is None:
        num_games = ARENA_CONFIG['num_games']
    if swap_sides is None:
        swap_sides = ARENA_CONFIG['swap_sides']

    summary = MatchSummary()
    for game_num in tqdm(range(num_games), desc="Match", ncols=80, disable=not progress):
        a_first = not swap_sides or game_num % 2 == 0
        first, second = (a, b) if a_first else (b, a)
        result = play_game(first, second, radius)

        summary.games += 1
        if result is GameResult.TIE:
            summary.draws += 1
        elif (result is GameResult.PLAYER1) == a_first:
            summary.a_wins += 1
        else:
            summary.b_wins += 1
        logger.info("Game %d: %s (a moved %s)", game_num + 1, result.name, "first" if a_first else "second")

    logger.info(
        "Match finished: a=%d b=%d draws=%d (a score %.2f)",
        summary.a_wins, summary.b_wins, summary.draws, summary.a_score,
    )
    return summary
