"""
Cell and player color values.
"""
from enum import IntEnum


class CellState(IntEnum):
    """Content of a single board position."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        # IntEnum would format as the bare number
        return format(str(self), spec)


class PlayColor(IntEnum):
    """Color of a player. Values line up with the matching CellState."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'PlayColor':
        return PlayColor.WHITE if self is PlayColor.BLACK else PlayColor.BLACK

    @property
    def cell(self) -> CellState:
        """The cell state a tile of this color shows."""
        return CellState(self.value)

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, spec: str) -> str:
        # IntEnum would format as the bare number
        return format(str(self), spec)
