"""
One-ply move-selection strategies.

Strategies only read the game through a ReadOnlyReversi projection. Each
candidate is scored by playing it on a private copy of the game.
"""
from typing import Dict, Iterable, List, Optional, Set, Type
import logging
import random

from ..game import Coordinate, PlayColor, ReadOnlyReversi

logger = logging.getLogger(__name__)


class Strategy:
    """Chooses a coordinate for the current color, or None for no preference."""

    name = "base"

    def choose_move(self, view: ReadOnlyReversi) -> Optional[Coordinate]:
        raise NotImplementedError


def score_after(view: ReadOnlyReversi, move: Coordinate, color: PlayColor) -> int:
    """Tiles `color` would hold after playing `move` on a private copy."""
    game = view.copy_game()
    game.move(move.q, move.r)
    return game.get_score(color)


def best_by_score(view: ReadOnlyReversi, moves: Iterable[Coordinate]) -> Optional[Coordinate]:
    """Highest-scoring move; ties go to the earliest candidate."""
    color = view.current_color()
    best = None
    best_score = -1
    for move in moves:
        score = score_after(view, move, color)
        if score > best_score:
            best, best_score = move, score
    return best


def corners(size: int) -> List[Coordinate]:
    """The six vertices of a hexagonal board of side length `size`."""
    edge = size - 1
    return [
        Coordinate(edge, 0), Coordinate(0, edge), Coordinate(-edge, edge),
        Coordinate(-edge, 0), Coordinate(0, -edge), Coordinate(edge, -edge),
    ]


def corner_neighbors(size: int) -> Set[Coordinate]:
    """On-board cells touching a corner."""
    steps = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1)]
    result = set()
    for corner in corners(size):
        for dq, dr in steps:
            neighbor = corner.neighbor(dq, dr)
            if neighbor.on_board(size):
                result.add(neighbor)
    return result


class CaptureMostPieces(Strategy):
    """Pick the move that leaves the mover with the most tiles."""

    name = "capture"

    def choose_move(self, view: ReadOnlyReversi) -> Optional[Coordinate]:
        return best_by_score(view, view.legal_moves())


class AvoidCorners(Strategy):
    """
    Take a corner when one is available and otherwise stay off the cells
    next to the corners, breaking ties by captured tiles.
    """

    name = "corners"

    def choose_move(self, view: ReadOnlyReversi) -> Optional[Coordinate]:
        moves = view.legal_moves()
        if not moves:
            return None

        size = view.get_board_size()
        corner_set = set(corners(size))
        in_corner = [m for m in moves if m in corner_set]
        if in_corner:
            return best_by_score(view, in_corner)

        risky = corner_neighbors(size)
        safe = [m for m in moves if m not in risky]
        if safe:
            return best_by_score(view, safe)

        logger.debug("Every move touches a corner, falling back to most captures")
        return best_by_score(view, moves)


class RandomStrategy(Strategy):
    """Uniform choice among the legal moves."""

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def choose_move(self, view: ReadOnlyReversi) -> Optional[Coordinate]:
        moves = view.legal_moves()
        return self.rng.choice(moves) if moves else None


STRATEGIES: Dict[str, Type[Strategy]] = {
    CaptureMostPieces.name: CaptureMostPieces,
    AvoidCorners.name: AvoidCorners,
    RandomStrategy.name: RandomStrategy,
}


def get_strategy(name: str, seed: Optional[int] = None) -> Strategy:
    """
    Build a strategy by name.

    Args:
        name: One of the keys of STRATEGIES
        seed: Seed for strategies that use randomness

    Returns:
        A new Strategy instance
    """
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}'. Choose from: {', '.join(STRATEGIES)}")
    if name == RandomStrategy.name:
        return RandomStrategy(seed)
    return STRATEGIES[name]()
