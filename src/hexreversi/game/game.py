"""
Hex Reversi game module.
Handles turn order, passing, game termination and change notification.
"""
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Protocol
import logging

import numpy as np

from ..errors import IllegalMoveError, OutOfRangeError, UnknownCoordinateError
from .board import HexBoard
from .capture import compute_flips, has_no_moves, legal_moves, valid_move
from .cell import CellState, PlayColor
from .coordinate import Coordinate
from .status import GameStatus, derive_status

logger = logging.getLogger(__name__)


class Listener(Protocol):
    """Anything that wants to hear about completed moves, passes and starts."""

    def update(self) -> None:
        ...


class MoveResult(Enum):
    """Outcome of a successful HexReversiGame.move() call."""
    PLACED = "placed"
    FORCED_PASS = "forced_pass"


class HistoryEntry(NamedTuple):
    color: PlayColor
    coord: Optional[Coordinate]  # None for a pass


class HexReversiGame:
    """
    Main game class for hex Reversi that owns the board and the turn state.

    Every mutation goes through move(), pass_turn() or start_game(). A call
    either completes and notifies listeners once, or raises and leaves the
    game untouched.
    """

    def __init__(self, size: int = 6):
        """
        Initialize a new hex Reversi game.

        Args:
            size: Side length of the hexagonal board (default: 6)
        """
        self.board = HexBoard(size)
        self.size = size
        self.current_color = PlayColor.BLACK  # Black moves first
        self.consecutive_passes = 0
        self.started = False
        self.move_history: List[HistoryEntry] = []
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Register a listener; it is called after every completed mutation."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener.update()

    def move(self, q: int, r: int) -> MoveResult:
        """
        Place a tile of the current color at (q, r).

        If the current color has no legal move anywhere, the coordinates are
        ignored and the turn is passed instead.

        Args:
            q: Axial q of the target cell
            r: Axial r of the target cell

        Returns:
            MoveResult.PLACED, or MoveResult.FORCED_PASS when the turn was passed

        Raises:
            OutOfRangeError: (q, r) is not on the board
            IllegalMoveError: (q, r) captures nothing or is occupied
        """
        if not self.board.contains(q, r):
            raise OutOfRangeError(q, r, self.size)

        if self.has_no_moves(self.current_color):
            logger.info("%s has no legal move, passing instead of playing (%d, %d)",
                        self.current_color, q, r)
            self.pass_turn()
            return MoveResult.FORCED_PASS

        color = self.current_color
        if not valid_move(self.board, q, r, color):
            raise IllegalMoveError(q, r, color)

        target = Coordinate(q, r)
        flips = compute_flips(self.board, q, r, color)
        self.board.set(target, color.cell)
        for coord in flips:
            self.board.set(coord, color.cell)

        self.consecutive_passes = 0
        self.started = True
        self.move_history.append(HistoryEntry(color, target))
        self.current_color = color.opponent
        logger.debug("%s played %s, flipping %d", color, target, len(flips))

        self._notify()
        return MoveResult.PLACED

    def pass_turn(self) -> None:
        """Pass the turn to the other color. Always permitted."""
        self.move_history.append(HistoryEntry(self.current_color, None))
        logger.debug("%s passed", self.current_color)
        self.current_color = self.current_color.opponent
        self.consecutive_passes += 1
        self.started = True
        self._notify()

    def start_game(self) -> None:
        """Mark the game as started with Black to move. The board is left as is."""
        self.current_color = PlayColor.BLACK
        self.started = True
        self._notify()

    def is_game_over(self) -> bool:
        """
        Check if the game is over.

        The game ends when the player to move is stuck right after a pass,
        when neither color can move, or after two passes in a row.
        """
        if self.consecutive_passes >= 2:
            return True
        if self.has_no_moves(self.current_color) and self.consecutive_passes == 1:
            return True
        return (self.has_no_moves(PlayColor.BLACK)
                and self.has_no_moves(PlayColor.WHITE))

    def status(self) -> GameStatus:
        return derive_status(self.read_only(), self.started)

    def has_no_moves(self, color: PlayColor) -> bool:
        return has_no_moves(self.board, color)

    def valid_move(self, q: int, r: int, color: PlayColor) -> bool:
        return valid_move(self.board, q, r, color)

    def legal_moves(self) -> List[Coordinate]:
        """
        Get all legal moves for the current color.

        Returns:
            List of coordinates in board order
        """
        return legal_moves(self.board, self.current_color)

    def get_score(self, color: PlayColor) -> int:
        """Number of tiles showing `color`."""
        return self.board.count(color.cell)

    def get_cell(self, q: int, r: int) -> CellState:
        if not self.board.contains(q, r):
            raise UnknownCoordinateError(Coordinate(q, r))
        return self.board.get(Coordinate(q, r))

    def get_board_size(self) -> int:
        return self.size

    def snapshot(self) -> Dict[Coordinate, CellState]:
        return self.board.snapshot()

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array of CellState values indexed by (q + N - 1, r + N - 1)
        """
        return self.board.to_array()

    def winner(self) -> Optional[PlayColor]:
        """
        Get the color with more tiles.

        Returns:
            PlayColor.BLACK, PlayColor.WHITE, or None for a draw
        """
        black = self.get_score(PlayColor.BLACK)
        white = self.get_score(PlayColor.WHITE)
        if black > white:
            return PlayColor.BLACK
        if white > black:
            return PlayColor.WHITE
        return None

    def read_only(self) -> 'ReadOnlyReversi':
        return ReadOnlyReversi(self)

    def copy(self) -> 'HexReversiGame':
        """Create an independent copy of the game. Listeners are not copied."""
        new_game = HexReversiGame.__new__(HexReversiGame)
        new_game.board = self.board.copy()
        new_game.size = self.size
        new_game.current_color = self.current_color
        new_game.consecutive_passes = self.consecutive_passes
        new_game.started = self.started
        new_game.move_history = self.move_history.copy()
        new_game._listeners = []
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self.board)
        result += f"\nCurrent player: {self.current_color}"
        black = self.get_score(PlayColor.BLACK)
        white = self.get_score(PlayColor.WHITE)
        result += f"\nScore - Black: {black}, White: {white}"

        if self.is_game_over():
            winner = self.winner()
            if winner is None:
                result += "\nGame over! It's a draw!"
            else:
                result += f"\nGame over! {winner} wins!"

        return result


class ReadOnlyReversi:
    """
    Read-only projection of a live game for views and strategies.

    Exposes queries only. Hypothetical play goes through copy_game(), which
    hands out a private game that shares nothing with the live one.
    """

    def __init__(self, game: HexReversiGame):
        self._game = game

    def is_game_over(self) -> bool:
        return self._game.is_game_over()

    def status(self) -> GameStatus:
        return self._game.status()

    def get_score(self, color: PlayColor) -> int:
        return self._game.get_score(color)

    def get_cell(self, q: int, r: int) -> CellState:
        return self._game.get_cell(q, r)

    def get_board_size(self) -> int:
        return self._game.get_board_size()

    def snapshot(self) -> Dict[Coordinate, CellState]:
        return self._game.snapshot()

    def has_no_moves(self, color: PlayColor) -> bool:
        return self._game.has_no_moves(color)

    def valid_move(self, q: int, r: int, color: PlayColor) -> bool:
        return self._game.valid_move(q, r, color)

    def legal_moves(self) -> List[Coordinate]:
        return self._game.legal_moves()

    def current_color(self) -> PlayColor:
        return self._game.current_color

    def subscribe(self, listener: Listener) -> None:
        self._game.subscribe(listener)

    def copy_game(self) -> HexReversiGame:
        return self._game.copy()
