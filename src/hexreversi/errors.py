"""
Exceptions raised by the hex Reversi engine.
"""
from typing import Any


class HexReversiError(Exception):
    """Base class for engine errors."""
    pass


class InvalidSizeError(HexReversiError, ValueError):
    """Board side length is below the playable minimum."""

    def __init__(self, size: int, minimum: int = 3):
        self.size = size
        self.minimum = minimum
        super().__init__(f"board size must be at least {minimum}, got {size}")


class OutOfRangeError(HexReversiError, ValueError):
    """Coordinate falls outside the hexagonal board."""

    def __init__(self, q: int, r: int, size: int):
        self.q = q
        self.r = r
        self.size = size
        super().__init__(f"({q}, {r}) is outside a board of size {size}")


class IllegalMoveError(HexReversiError):
    """Move captures nothing or targets an occupied cell."""

    def __init__(self, q: int, r: int, color: Any):
        self.q = q
        self.r = r
        self.color = color
        super().__init__(f"({q}, {r}) is not a legal move for {color}")


class UnknownCoordinateError(HexReversiError, KeyError):
    """Lookup of a coordinate that is not part of the board."""

    def __init__(self, coord: Any):
        self.coord = coord
        super().__init__(f"board does not contain {coord}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
