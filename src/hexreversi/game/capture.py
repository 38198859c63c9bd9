"""
Capture ("flow") detection for hex Reversi.

A flow is a contiguous run of opponent tiles leading away from the placed
cell in one of the six hex directions and closed off by a tile of the
mover's own color. Move validation and move execution both go through the
same walker so they can never disagree.
"""
from typing import List, NamedTuple, Set

from .board import HexBoard
from .cell import CellState, PlayColor
from .coordinate import Coordinate


class Direction(NamedTuple):
    """Unit step over the cube coordinates (dq + dr + ds == 0)."""
    name: str
    dq: int
    dr: int
    ds: int


# Two directions per fixed axis
DIRECTIONS = (
    Direction('q_descending', 0, -1, 1),
    Direction('q_ascending', 0, 1, -1),
    Direction('r_right', 1, 0, -1),
    Direction('r_left', -1, 0, 1),
    Direction('s_descending', 1, -1, 0),
    Direction('s_ascending', -1, 1, 0),
)


def flow_in_direction(board: HexBoard, coord: Coordinate, color: PlayColor,
                      direction: Direction) -> List[Coordinate]:
    """
    Walk outward from `coord` and collect the tiles a move would capture.

    Args:
        board: Board to inspect
        coord: Cell the move is placed on
        color: Color of the mover
        direction: Step to walk along

    Returns:
        Opponent coordinates captured in this direction, nearest first.
        Empty if the run is not closed by one of the mover's tiles.
    """
    own = color.cell
    opposite = color.opponent.cell
    captured = []

    q, r = coord.q + direction.dq, coord.r + direction.dr
    while board.contains(q, r):
        current = Coordinate(q, r)
        cell = board.get(current)
        if cell == opposite:
            captured.append(current)
        elif cell == own:
            return captured
        else:
            break
        q += direction.dq
        r += direction.dr

    # Ran into an empty cell or off the edge without an anchor
    return []


def valid_move(board: HexBoard, q: int, r: int, color: PlayColor) -> bool:
    """Check if placing `color` at (q, r) captures at least one tile."""
    if not board.contains(q, r):
        return False
    coord = Coordinate(q, r)
    if board.get(coord) != CellState.EMPTY:
        return False
    return any(flow_in_direction(board, coord, color, d) for d in DIRECTIONS)


def compute_flips(board: HexBoard, q: int, r: int, color: PlayColor) -> Set[Coordinate]:
    """
    Get every tile that placing `color` at (q, r) would recolor.

    The placed cell itself is not part of the result.
    """
    coord = Coordinate(q, r)
    flips: Set[Coordinate] = set()
    for direction in DIRECTIONS:
        flips.update(flow_in_direction(board, coord, color, direction))
    return flips


def legal_moves(board: HexBoard, color: PlayColor) -> List[Coordinate]:
    """All legal placements for `color`, in board order."""
    return [c for c in board.coordinates() if valid_move(board, c.q, c.r, color)]


def has_no_moves(board: HexBoard, color: PlayColor) -> bool:
    """Check if `color` has no legal placement anywhere on the board."""
    if not board.has_empty():
        return True
    for coord in board.coordinates():
        if valid_move(board, coord.q, coord.r, color):
            return False
    return True
