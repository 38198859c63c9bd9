"""
Axial coordinates for a hexagonal grid.

A cell is addressed by (q, r). The third cube coordinate is implied:
s = -q - r, so q + r + s == 0 for every cell.
"""
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable axial coordinate. Equality and hashing use (q, r) only."""
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def neighbor(self, dq: int, dr: int) -> 'Coordinate':
        """Coordinate one step of (dq, dr) away."""
        return Coordinate(self.q + dq, self.r + dr)

    def on_board(self, size: int) -> bool:
        """Whether this coordinate exists on a board of side length `size`."""
        return is_on_board(self.q, self.r, size)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


def is_on_board(q: int, r: int, size: int) -> bool:
    """On-board test for side length `size`: |q|, |r| and |q + r| all below size."""
    return -size < q < size and -size < r < size and abs(q + r) < size


def cell_count(size: int) -> int:
    """Number of cells on a hexagonal board with sides of `size` cells."""
    return 3 * size * size - 3 * size + 1
