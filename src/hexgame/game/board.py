"""
Placement map from hex cell to player, stored as a numpy array.

The array is indexed by HexGrid.index(cell) = (q + R, r + R). Cells in the
array corners lie outside the hexagon; they stay 0 forever and are never
reported as legal.
"""

from typing import Iterator, Optional

import numpy as np

from hexgame.errors import InvalidMoveError
from hexgame.game.hex_grid import Hex, HexGrid
from hexgame.game.player import Player


EMPTY = 0


class HexBoard:
    """Cell -> Player mapping bounded to a HexGrid."""

    def __init__(self, grid: Optional[HexGrid] = None, radius: int = 4):
        self.grid = grid if grid is not None else HexGrid(radius)
        self.array = np.zeros((self.grid.size, self.grid.size), dtype=np.int8)
        self._occupied = 0

    def __repr__(self):
        return f"HexBoard(radius={self.grid.radius}, stones={self._occupied}/{self.capacity})"

    def __eq__(self, other):
        return (
            isinstance(other, HexBoard)
            and other.grid == self.grid
            and np.array_equal(other.array, self.array)
        )

    def __len__(self) -> int:
        return self._occupied

    def __iter__(self) -> Iterator[tuple[Hex, Player]]:
        """Occupied cells with their owners, in grid order."""
        for cell in self.grid:
            value = self.array[self.grid.index(cell)]
            if value != EMPTY:
                yield cell, Player(int(value))

    @property
    def radius(self) -> int:
        return self.grid.radius

    @property
    def capacity(self) -> int:
        return len(self.grid)

    def could_contain(self, cell: Hex) -> bool:
        """True if the cell lies on the board, occupied or not."""
        return self.grid.contains(cell)

    def contains(self, cell: Hex) -> bool:
        """True if the cell lies on the board and holds a stone."""
        return self.could_contain(cell) and self.array[self.grid.index(cell)] != EMPTY

    def get(self, cell: Hex) -> Optional[Player]:
        """Owner of the cell, or None when empty or off the board."""
        if not self.could_contain(cell):
            return None
        value = self.array[self.grid.index(cell)]
        return Player(int(value)) if value != EMPTY else None

    def place(self, cell: Hex, player: Player):
        if not self.could_contain(cell):
            raise InvalidMoveError("Cell is outside the board", {"cell": cell})
        if self.contains(cell):
            raise InvalidMoveError("Cell is already occupied", {"cell": cell})
        self.array[self.grid.index(cell)] = int(player)
        self._occupied += 1

    def is_full(self) -> bool:
        return self._occupied == self.capacity

    def empty_cells(self) -> list[Hex]:
        return [cell for cell in self.grid if self.array[self.grid.index(cell)] == EMPTY]

    def copy(self) -> "HexBoard":
        clone = HexBoard.__new__(HexBoard)
        clone.grid = self.grid
        clone.array = self.array.copy()
        clone._occupied = self._occupied
        return clone
