"""
Reversi on a hexagonal board.
"""

from .errors import (
    HexReversiError,
    IllegalMoveError,
    InvalidSizeError,
    OutOfRangeError,
    UnknownCoordinateError,
)
from .game import (
    CellState,
    Coordinate,
    GameStatus,
    HexReversiGame,
    MoveResult,
    PlayColor,
    ReadOnlyReversi,
)

__version__ = "0.1"

__all__ = [
    'HexReversiError', 'IllegalMoveError', 'InvalidSizeError', 'OutOfRangeError',
    'UnknownCoordinateError', 'CellState', 'Coordinate', 'GameStatus',
    'HexReversiGame', 'MoveResult', 'PlayColor', 'ReadOnlyReversi',
]
