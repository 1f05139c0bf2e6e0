"""
Axial hex coordinates and the hexagon-shaped board outline.

Cells are addressed by axial coordinates (q, r) with the implicit third cube
coordinate s = -q - r. The six directions are listed in rotational order, so
direction i and i + 1 (mod 6) point at two cells that are also adjacent to
each other, and direction i + 3 is the opposite of direction i.
"""

from itertools import count
from typing import Iterator, NamedTuple


DIRECTIONS = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


def opposite(direction: int) -> int:
    return (direction + 3) % 6


class Hex(NamedTuple):
    """A single cell in axial coordinates."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def neighbor(self, direction: int) -> "Hex":
        dq, dr = DIRECTIONS[direction % 6]
        return Hex(self.q + dq, self.r + dr)

    def neighbors(self) -> list["Hex"]:
        return [self.neighbor(i) for i in range(6)]

    def ray(self, direction: int) -> Iterator["Hex"]:
        """
        Walk outward from this cell in one direction.

        The origin is not yielded and the walk never ends on its own; callers
        bound it with the board (``takewhile``) or a fixed length (``islice``).
        """
        dq, dr = DIRECTIONS[direction % 6]
        for step in count(1):
            yield Hex(self.q + dq * step, self.r + dr * step)

    def axes(self) -> list[tuple[Iterator["Hex"], Iterator["Hex"]]]:
        """The three lines through this cell, each as a pair of opposite rays."""
        return [(self.ray(i), self.ray(opposite(i))) for i in range(3)]

    def distance(self, other: "Hex") -> int:
        return max(abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s))

    def __str__(self) -> str:
        return f"{self.q},{self.r}"


ORIGIN = Hex(0, 0)


class HexGrid:
    """
    Hexagon-shaped set of legal cells: every cell within `radius` of the origin.

    Cells map onto a (2R+1, 2R+1) array at (q + R, r + R); the array corners
    outside the hexagon are never legal.
    """

    def __init__(self, radius: int = 4):
        if radius < 1:
            raise ValueError(f"Board radius must be at least 1, got {radius}")
        self.radius = radius
        self.size = 2 * radius + 1
        self._cells = [
            Hex(q, r)
            for q in range(-radius, radius + 1)
            for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1)
        ]

    def __repr__(self):
        return f"HexGrid(radius={self.radius})"

    def __eq__(self, other):
        return isinstance(other, HexGrid) and other.radius == self.radius

    def __hash__(self):
        return hash(self.radius)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._cells)

    def contains(self, cell: Hex) -> bool:
        return ORIGIN.distance(Hex(*cell)) <= self.radius

    def index(self, cell: Hex) -> tuple[int, int]:
        return cell.q + self.radius, cell.r + self.radius
