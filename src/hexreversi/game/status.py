"""
Game status derived from the live game.
"""
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .game import ReadOnlyReversi


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    END = "end"


def derive_status(model: 'ReadOnlyReversi', started: bool) -> GameStatus:
    """
    Summarize a game into its status. Recomputed on every call.

    Args:
        model: Read-only view of the game
        started: Whether start_game() or any move/pass has happened yet

    Returns:
        The current GameStatus
    """
    if not started:
        return GameStatus.NOT_STARTED
    if model.is_game_over():
        return GameStatus.END
    return GameStatus.IN_PROGRESS
