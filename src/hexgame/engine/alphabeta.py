"""
Alpha-beta negamax search engine for the hex board.

Key features:
- Negamax framework (one code path; a child's score is negated for the parent)
- Fail-soft alpha-beta pruning (returned scores may lie outside the window)
- Depth-limited: every call searches exactly `recursion_limit` plies
- Lexicographic depth tie-break: quicker wins and slower losses score higher
- Randomized choice among equally scored root moves (see TieBreaker)


Algorithm overview:

    def negamax(state, mover, depth, alpha, beta):
        if depth == 0 or terminal(state):
            return Score(rank(state, mover) - rank(state, opponent), depth bias)

        best_score = -infinity
        for move in legal_moves(state):
            child = copy(state) + move
            score = -negamax(child, opponent, depth - 1, -beta, -alpha)

            best_score = max(best_score, score)
            alpha = max(alpha, best_score)

            if best_score >= beta:
                break  # Beta cutoff

        return best_score

Each branch works on its own copy of the state, so nothing needs undoing and
the caller's state is never touched. No search state survives between calls
apart from the random generator used for tie-breaks.
"""

import logging
import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import NamedTuple, Optional

import numpy as np

from hexgame.config import SEARCH_CONFIG
from hexgame.engine.ranker import Ranker
from hexgame.engine.tie_break import TieBreaker
from hexgame.errors import NoLegalMovesError
from hexgame.game.game_state import GameState, Outcome
from hexgame.game.hex_grid import Hex
from hexgame.game.player import Player


logger = logging.getLogger(__name__)


class Score(NamedTuple):
    """
    Evaluation from the mover's perspective, compared lexicographically.

    `depth` breaks ties between equal values: a decided leaf found with more
    search depth remaining (i.e. closer to the root) carries a larger bias, in
    the direction of its value. Negation flips both fields.
    """
    value: float
    depth: int = 0

    def __neg__(self) -> "Score":
        return Score(-self.value, -self.depth)


SCORE_NEG_INF = Score(-math.inf, 0)
SCORE_INF = Score(math.inf, 0)


@dataclass
class SearchResult:
    """Result of a RankerAi search."""
    best_move: Hex
    score: Score
    depth: int
    nodes_searched: int
    cutoffs: int
    researches: int
    time_ms: int


class Ai(ABC):
    """Anything that can pick a move for `player` in `state`."""

    @abstractmethod
    def choose(self, state: GameState, player: Player) -> Hex:
        pass


class RankerAi(Ai):
    """
    Depth-limited negamax with alpha-beta pruning over a pluggable Ranker.

    Moves are searched in the order the rules engine lists them. The engine
    never reorders them, so for a fixed seed the chosen move is reproducible.
    """

    def __init__(
        self,
        ranker: Ranker,
        recursion_limit: Optional[int] = None,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        tie_probability: Optional[float] = None,
    ):
        """
        Initialize the search engine.

        Args:
            ranker: Position evaluator, rank(state, player) -> float
            recursion_limit: Plies to search (clamped to at least 1)
            seed: Seed for the tie-break generator (ignored if `rng` is given)
            rng: Explicit random generator for tie-breaks
            tie_probability: Initial chance an equal-scoring move replaces the pick
        """
        if recursion_limit is None:
            recursion_limit = SEARCH_CONFIG['recursion_limit']
        if seed is None:
            seed = SEARCH_CONFIG['seed']

        self.ranker = ranker
        self.recursion_limit = max(recursion_limit, 1)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.tie_probability = (
            tie_probability if tie_probability is not None else SEARCH_CONFIG['tie_probability']
        )

        # Search statistics (reset per call)
        self.nodes_searched = 0
        self.cutoffs = 0
        self.researches = 0

    def __repr__(self):
        return f"RankerAi({self.ranker!r}, recursion_limit={self.recursion_limit})"

    def choose(self, state: GameState, player: Player, depth_limit: Optional[int] = None) -> Hex:
        """Best move for `player`; see `search`."""
        return self.search(state, player, depth_limit).best_move

    def search(
        self,
        state: GameState,
        player: Player,
        depth_limit: Optional[int] = None
    ) -> SearchResult:
        """
        Search the position and return the chosen move with statistics.

        Args:
            state: Position to search (not modified)
            player: Player to move
            depth_limit: Override the engine's recursion limit (clamped to >= 1)

        Returns:
            SearchResult with best move, its score and node counts

        Raises:
            NoLegalMovesError: if the game is already over or the board is full
        """
        status = state.terminal_status()
        moves = state.legal_moves()
        if status.is_terminal or not moves:
            raise NoLegalMovesError(
                "No legal moves available",
                {"status": str(status), "stones": state.stone_count()},
            )
        if player != state.current_player:
            logger.warning("Searching for %s but %s is to move", player, state.current_player)

        depth = max(depth_limit if depth_limit is not None else self.recursion_limit, 1)
        self.nodes_searched = 0
        self.cutoffs = 0
        self.researches = 0
        start = time.perf_counter()

        score, best_move = self._search_root(state, player, moves, depth)

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "%s plays %s (score=%s, depth=%d, nodes=%d, cutoffs=%d, %dms)",
            player, best_move, score, depth, self.nodes_searched, self.cutoffs, elapsed_ms,
        )
        return SearchResult(
            best_move=best_move,
            score=score,
            depth=depth,
            nodes_searched=self.nodes_searched,
            cutoffs=self.cutoffs,
            researches=self.researches,
            time_ms=elapsed_ms,
        )

    def _search_root(
        self,
        state: GameState,
        player: Player,
        moves: list[Hex],
        depth: int
    ) -> tuple[Score, Hex]:
        """
        Root node: full window, every move searched, randomized tie-break.

        A fail-soft child may return exactly the current bound while its true
        score is lower. Such a move is re-searched with a full window before it
        is allowed to compete as a tie.
        """
        alpha = SCORE_NEG_INF
        beta = SCORE_INF
        picker = TieBreaker(self.rng, self.tie_probability)
        opponent = player.inverse()

        for move in moves:
            child = self._child(state, move)
            score = -self._negamax(child, opponent, depth - 1, -beta, -alpha)

            if score == alpha:
                self.researches += 1
                score = -self._negamax(child, opponent, depth - 1, SCORE_NEG_INF, SCORE_INF)

            picker.offer(score, move)
            alpha = max(alpha, picker.best_score)

        return picker.best_score, picker.best_item

    def _negamax(
        self,
        state: GameState,
        mover: Player,
        depth: int,
        alpha: Score,
        beta: Score
    ) -> Score:
        """
        Negamax alpha-beta search.

        Args:
            state: Position after the parent's move
            mover: Player to move in `state`
            depth: Remaining depth
            alpha: Lower bound
            beta: Upper bound

        Returns:
            Score from `mover`'s perspective
        """
        self.nodes_searched += 1

        if depth == 0 or state.terminal_status().is_terminal:
            return self._evaluate(state, mover, depth)

        best_score = SCORE_NEG_INF
        for move in state.legal_moves():
            child = self._child(state, move)
            score = -self._negamax(child, mover.inverse(), depth - 1, -beta, -alpha)

            if score > best_score:
                best_score = score
            alpha = max(alpha, best_score)

            if best_score >= beta:
                self.cutoffs += 1
                break

        return best_score

    def _child(self, state: GameState, move: Hex) -> GameState:
        child = state.copy()
        result = child.apply_move(move)
        assert result.outcome is not Outcome.REJECTED, f"search applied illegal move {move}"
        return child

    def _evaluate(self, state: GameState, mover: Player, depth: int) -> Score:
        """
        Leaf score: how much better the position is for `mover` than for the opponent.
        """
        value = self.ranker.rank(state, mover) - self.ranker.rank(state, mover.inverse())
        if value > 0:
            return Score(value, depth)
        if value < 0:
            return Score(value, -depth)
        return Score(value, 0)

    def get_stats(self) -> dict:
        """Statistics from the last search."""
        return {
            'nodes_searched': self.nodes_searched,
            'cutoffs': self.cutoffs,
            'researches': self.researches,
        }
