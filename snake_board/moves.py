"""Wrapped single-cell movement.

The board is a torus: stepping past any edge re-enters from the opposite
edge, so there is no wall collision and every step lands on a valid index.
"""

from typing import Dict, Tuple

from snake_board.types import CellIndex, Direction
from snake_board.utils.grid import to_index, to_row_col, wrap_row_col

DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}
"""(row, col) offset for each heading."""


def step_index(
    index: CellIndex, direction: Direction, width: int, height: int
) -> CellIndex:
    """Return the index one cell away from ``index`` in ``direction``.

    Args:
        index (CellIndex): Starting cell.
        direction (Direction): Heading to step in.
        width (int): Grid width in cells.
        height (int): Grid height in cells.

    Returns:
        CellIndex: Neighbouring cell with toroidal wrapping applied.
    """
    row, col = to_row_col(index, width)
    d_row, d_col = DIRECTION_DELTAS[direction]
    row, col = wrap_row_col(row + d_row, col + d_col, width, height)
    return to_index(row, col, width)
