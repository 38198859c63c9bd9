"""
Board module for hex Reversi.
Holds the cell contents of a hexagonal board of side length N.
Uses a dense numpy array indexed by (q + N - 1, r + N - 1) for O(1) access.
"""
from typing import Dict, Iterator, List, Tuple
import numpy as np

from ..errors import InvalidSizeError, UnknownCoordinateError
from .cell import CellState
from .coordinate import Coordinate, cell_count, is_on_board


class HexBoard:
    """
    Cell store for a hexagonal Reversi board.

    The key set (every on-board coordinate) is fixed at construction and
    only the values change afterwards. Off-board slots of the backing array
    are masked out and always hold EMPTY.
    """

    MIN_SIZE = 3

    # Starting ring around the origin; each color's tiles are mutually non-adjacent
    STARTING_BLACK = (Coordinate(1, 0), Coordinate(0, -1), Coordinate(-1, 1))
    STARTING_WHITE = (Coordinate(1, -1), Coordinate(-1, 0), Coordinate(0, 1))

    def __init__(self, size: int = 6):
        """
        Initialize a new board with the six starting tiles.

        Args:
            size: Length in cells of each side of the hexagon (at least 3)
        """
        if size < self.MIN_SIZE:
            raise InvalidSizeError(size, self.MIN_SIZE)

        self.size = size
        width = 2 * size - 1
        self._cells = np.zeros((width, width), dtype=np.int8)
        self._mask = np.zeros((width, width), dtype=bool)
        for q in range(-size + 1, size):
            for r in range(-size + 1, size):
                if abs(q + r) < size:
                    self._mask[self._index(q, r)] = True

        for coord in self.STARTING_BLACK:
            self.set(coord, CellState.BLACK)
        for coord in self.STARTING_WHITE:
            self.set(coord, CellState.WHITE)

    def _index(self, q: int, r: int) -> Tuple[int, int]:
        offset = self.size - 1
        return q + offset, r + offset

    def contains(self, q: int, r: int) -> bool:
        """Check whether (q, r) is one of this board's cells."""
        return is_on_board(q, r, self.size)

    def __contains__(self, coord: Coordinate) -> bool:
        return self.contains(coord.q, coord.r)

    def get(self, coord: Coordinate) -> CellState:
        """Get the state of a cell."""
        if not self.contains(coord.q, coord.r):
            raise UnknownCoordinateError(coord)
        return CellState(int(self._cells[self._index(coord.q, coord.r)]))

    def set(self, coord: Coordinate, cell: CellState) -> None:
        """Overwrite a cell. Callers guarantee `coord` is on the board."""
        self._cells[self._index(coord.q, coord.r)] = int(cell)

    def coordinates(self) -> Iterator[Coordinate]:
        """Iterate over every cell, q ascending then r ascending."""
        for q in range(-self.size + 1, self.size):
            for r in range(-self.size + 1, self.size):
                if abs(q + r) < self.size:
                    yield Coordinate(q, r)

    @property
    def cell_count(self) -> int:
        return cell_count(self.size)

    def count(self, cell: CellState) -> int:
        """Count the cells currently holding `cell`."""
        return int(np.count_nonzero((self._cells == int(cell)) & self._mask))

    def has_empty(self) -> bool:
        return self.count(CellState.EMPTY) > 0

    def snapshot(self) -> Dict[Coordinate, CellState]:
        """
        Get an independent copy of the board contents.

        Returns:
            Mapping of every coordinate to its current cell state
        """
        return {coord: self.get(coord) for coord in self.coordinates()}

    def to_array(self) -> np.ndarray:
        """
        Get the dense board as a numpy array.

        Returns:
            Copy of the (2N-1, 2N-1) array; off-board slots hold 0
        """
        return self._cells.copy()

    def on_board_mask(self) -> np.ndarray:
        return self._mask.copy()

    def copy(self) -> 'HexBoard':
        """Create a deep copy of the board."""
        new_board = HexBoard.__new__(HexBoard)
        new_board.size = self.size
        new_board._cells = self._cells.copy()
        new_board._mask = self._mask
        return new_board

    def rows(self) -> List[List[Coordinate]]:
        """Coordinates grouped by r, each row ordered by q."""
        rows = []
        for r in range(-self.size + 1, self.size):
            rows.append([Coordinate(q, r) for q in range(-self.size + 1, self.size)
                         if abs(q + r) < self.size])
        return rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexBoard):
            return NotImplemented
        return self.size == other.size and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = {CellState.EMPTY: '.', CellState.BLACK: 'B', CellState.WHITE: 'W'}
        lines = []
        for row in self.rows():
            indent = ' ' * abs(row[0].r)
            lines.append(indent + ' '.join(symbols[self.get(c)] for c in row))
        return "\n".join(lines)
