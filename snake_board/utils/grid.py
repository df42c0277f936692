"""Grid index helpers.

The board stores cells row-major in a flat buffer. These functions convert
between a linear index and ``(row, col)``; they are pure and do no bounds
checking (callers wrap coordinates before converting).
"""

from typing import Tuple

from snake_board.types import CellIndex


def to_index(row: int, col: int, width: int) -> CellIndex:
    """Return the linear index of ``(row, col)`` on a grid ``width`` wide."""
    return row * width + col


def to_row_col(index: CellIndex, width: int) -> Tuple[int, int]:
    """Return ``(row, col)`` for a linear index."""
    return divmod(index, width)


def wrap_row_col(row: int, col: int, width: int, height: int) -> Tuple[int, int]:
    """Toroidal wrap for coordinates (used by snake movement)."""
    return row % height, col % width
