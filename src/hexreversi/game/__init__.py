"""
Hex Reversi game module.
This package contains the core board, capture and turn logic.
"""

from .board import HexBoard
from .capture import DIRECTIONS, compute_flips, flow_in_direction, valid_move
from .cell import CellState, PlayColor
from .coordinate import Coordinate
from .game import HexReversiGame, Listener, MoveResult, ReadOnlyReversi
from .status import GameStatus, derive_status

__all__ = [
    'HexBoard', 'DIRECTIONS', 'compute_flips', 'flow_in_direction', 'valid_move',
    'CellState', 'PlayColor', 'Coordinate', 'HexReversiGame', 'Listener',
    'MoveResult', 'ReadOnlyReversi', 'GameStatus', 'derive_status',
]
