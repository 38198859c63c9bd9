"""
Plain-text rendering of a hex Reversi board.
"""
from typing import TextIO

from ..game import CellState, ReadOnlyReversi

SYMBOLS = {
    CellState.EMPTY: '_',
    CellState.BLACK: 'X',
    CellState.WHITE: 'O',
}


class TextualView:
    """
    Draws the board row by row. Row r is indented by |r| spaces so the
    rows line up as a hexagon; X is black, O is white, _ is empty.
    """

    def __init__(self, model: ReadOnlyReversi):
        if model is None:
            raise ValueError("Null model")
        self.model = model

    def render(self, out: TextIO) -> None:
        """Write the current board to `out`."""
        out.write(str(self))
        out.write("\n")

    def __str__(self) -> str:
        size = self.model.get_board_size()
        lines = []
        for r in range(-size + 1, size):
            cells = [SYMBOLS[self.model.get_cell(q, r)]
                     for q in range(-size + 1, size) if abs(q + r) < size]
            lines.append(' ' * abs(r) + ' '.join(cells))
        return "\n".join(lines).rstrip()
