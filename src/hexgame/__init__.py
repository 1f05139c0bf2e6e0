"""
hexgame: a two-player hex-board game where four in a row wins and three in a
row loses, with an alpha-beta search opponent.
"""

from hexgame.errors import ConfigurationError, HexGameError, InvalidMoveError, NoLegalMovesError
from hexgame.game import GameState, Hex, HexBoard, HexGrid, MoveResult, Outcome, Player
from hexgame.engine import Ai, FeatureRanker, NullRanker, Ranker, RankerAi, Score, SearchResult

__version__ = "0.1"

__all__ = [
    'ConfigurationError',
    'HexGameError',
    'InvalidMoveError',
    'NoLegalMovesError',
    'GameState',
    'Hex',
    'HexBoard',
    'HexGrid',
    'MoveResult',
    'Outcome',
    'Player',
    'Ai',
    'FeatureRanker',
    'NullRanker',
    'Ranker',
    'RankerAi',
    'Score',
    'SearchResult',
]
