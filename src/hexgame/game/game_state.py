"""
Rules engine for the hexagonal four-not-three game.

Players alternate placing one stone on any empty cell. Completing a line of
four or five of your own stones wins; completing a line of exactly three
loses. A full board with neither is a draw.

Termination is checked incrementally: only the three lines through the last
placed stone can have changed, so only those are walked.
"""

from dataclasses import dataclass
from enum import Enum
from itertools import takewhile
from typing import Optional

from hexgame.config import BOARD_CONFIG
from hexgame.game.board import HexBoard
from hexgame.game.hex_grid import Hex
from hexgame.game.player import Player


LOSING_RUN = 3
WINNING_RUNS = (4, 5)


class Outcome(Enum):
    """Kind of result produced by a move or a status check."""
    ACCEPTED = 0    # Move placed, game continues
    REJECTED = 1    # Off the board or occupied; nothing changed
    DECIDED = 2     # Game over, `winner` set
    DRAWN = 3       # Board full, no winner


@dataclass(frozen=True)
class MoveResult:
    outcome: Outcome
    winner: Optional[Player] = None

    @classmethod
    def accepted(cls) -> "MoveResult":
        return cls(Outcome.ACCEPTED)

    @classmethod
    def rejected(cls) -> "MoveResult":
        return cls(Outcome.REJECTED)

    @classmethod
    def decided(cls, winner: Player) -> "MoveResult":
        return cls(Outcome.DECIDED, winner)

    @classmethod
    def drawn(cls) -> "MoveResult":
        return cls(Outcome.DRAWN)

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (Outcome.DECIDED, Outcome.DRAWN)

    def __str__(self):
        if self.outcome is Outcome.DECIDED:
            return f"decided({self.winner!s})"
        return self.outcome.name.lower()


class GameState:
    """
    Current position: whose turn it is, the stones on the board and the last move.

    `apply_move` is the only mutation. Search code works on copies, so a
    hypothetical line never touches the caller's state.
    """

    def __init__(self, radius: Optional[int] = None):
        self.current_player = Player.starting()
        self.board = HexBoard(radius=radius if radius is not None else BOARD_CONFIG['radius'])
        self.last_move: Optional[Hex] = None

    def __repr__(self):
        return (
            f"GameState(to_move={self.current_player.name}, "
            f"stones={len(self.board)}, last_move={self.last_move})"
        )

    def __eq__(self, other):
        return (
            isinstance(other, GameState)
            and other.current_player == self.current_player
            and other.last_move == self.last_move
            and other.board == self.board
        )

    def copy(self) -> "GameState":
        clone = GameState.__new__(GameState)
        clone.current_player = self.current_player
        clone.board = self.board.copy()
        clone.last_move = self.last_move
        return clone

    def apply_move(self, cell: Hex) -> MoveResult:
        """
        Place the current player's stone at `cell`.

        Returns Rejected (state untouched) if the cell is off the board or
        occupied; otherwise flips the turn and returns the terminal status.
        """
        cell = Hex(*cell)
        if not self.board.could_contain(cell) or self.board.contains(cell):
            return MoveResult.rejected()

        self.board.place(cell, self.current_player)
        self.current_player = self.current_player.inverse()
        self.last_move = cell
        return self.terminal_status()

    def next_state(self, cell: Hex) -> tuple["GameState", MoveResult]:
        """Non-mutating form of apply_move: returns a new state and the result."""
        child = self.copy()
        result = child.apply_move(cell)
        return child, result

    def terminal_status(self) -> MoveResult:
        """
        Outcome of the position, judged from the three lines through the last move.

        A run of exactly three hands the game to the mover's opponent unless a
        run of four or five was already found; a run of four or five always
        hands it to the mover. A decisive line on the move that fills the
        board still counts, otherwise a full board is a draw.
        """
        if self.last_move is None:
            return MoveResult.drawn() if self.board.is_full() else MoveResult.accepted()

        mover = self.board.get(self.last_move)
        status = None
        for forward, backward in self.last_move.axes():
            run = 1 + self._run_length(forward, mover) + self._run_length(backward, mover)
            if run in WINNING_RUNS:
                status = MoveResult.decided(mover)
            elif run == LOSING_RUN and status is None:
                status = MoveResult.decided(mover.inverse())

        if status is not None:
            return status
        if self.board.is_full():
            return MoveResult.drawn()
        return MoveResult.accepted()

    def _run_length(self, ray, owner: Player) -> int:
        return sum(1 for _ in takewhile(lambda cell: self.board.get(cell) == owner, ray))

    def legal_moves(self) -> list[Hex]:
        """Empty cells in board iteration order."""
        return self.board.empty_cells()

    def is_game_over(self) -> bool:
        return self.terminal_status().is_terminal

    def winner(self) -> Optional[Player]:
        return self.terminal_status().winner

    def stone_count(self) -> int:
        return len(self.board)
