from hexgame.game.hex_grid import Hex, HexGrid, DIRECTIONS, ORIGIN, opposite
from hexgame.game.player import Player
from hexgame.game.board import HexBoard
from hexgame.game.game_state import GameState, MoveResult, Outcome

__all__ = [
    'Hex',
    'HexGrid',
    'DIRECTIONS',
    'ORIGIN',
    'opposite',
    'Player',
    'HexBoard',
    'GameState',
    'MoveResult',
    'Outcome',
]
