"""
Participants in a game of hex Reversi.
"""
from typing import Optional

from ..game import Coordinate, PlayColor, ReadOnlyReversi
from .strategies import Strategy


class Player:
    """A seat at the table. The color is assigned when the game is set up."""

    def __init__(self, name: str):
        self.name = name
        self.color: Optional[PlayColor] = None

    @property
    def is_ai(self) -> bool:
        return False

    def choose_move(self, view: ReadOnlyReversi) -> Optional[Coordinate]:
        """Pick a move automatically. None means the player decides another way."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, color={self.color})"


class HumanPlayer(Player):
    """Moves arrive from outside (keyboard, UI); never chooses automatically."""

    def __init__(self, name: str = "human"):
        super().__init__(name)


class AIPlayer(Player):
    """Delegates move selection to a strategy."""

    def __init__(self, strategy: Strategy, name: Optional[str] = None):
        super().__init__(name or strategy.name)
        self.strategy = strategy

    @property
    def is_ai(self) -> bool:
        return True

    def choose_move(self, view: ReadOnlyReversi) -> Optional[Coordinate]:
        return self.strategy.choose_move(view)
