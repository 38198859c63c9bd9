"""
Players and the move-selection strategies they can use.
"""
from .player import AIPlayer, HumanPlayer, Player
from .strategies import (
    STRATEGIES,
    AvoidCorners,
    CaptureMostPieces,
    RandomStrategy,
    Strategy,
    get_strategy,
)

__all__ = [
    'AIPlayer', 'HumanPlayer', 'Player', 'STRATEGIES', 'AvoidCorners',
    'CaptureMostPieces', 'RandomStrategy', 'Strategy', 'get_strategy',
]
