"""
Search engine for the hex board.

This module contains:
- Position evaluators (terminal-only and motif-counting rankers)
- Randomized tie-breaking among equally scored moves
- Alpha-beta negamax search over a pluggable ranker
"""

from hexgame.engine.ranker import Ranker, NullRanker, FeatureRanker, terminal_rank
from hexgame.engine.tie_break import TieBreaker
from hexgame.engine.alphabeta import Ai, RankerAi, Score, SearchResult, SCORE_INF, SCORE_NEG_INF

__all__ = [
    'Ranker',
    'NullRanker',
    'FeatureRanker',
    'terminal_rank',
    'TieBreaker',
    'Ai',
    'RankerAi',
    'Score',
    'SearchResult',
    'SCORE_INF',
    'SCORE_NEG_INF',
]
