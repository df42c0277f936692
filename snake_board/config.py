"""Board defaults.

:class:`BoardConfig` holds the starting layout a board is built from and
restored to on every reset. The defaults reproduce the classic layout: a
three-cell snake along the top-left of the grid heading right, with the bait
a few cells ahead of it.
"""

import operator
from dataclasses import dataclass, replace
from typing import Tuple

from snake_board.types import CellIndex, Direction


@dataclass(frozen=True)
class BoardConfig:
    """Immutable starting layout for a :class:`snake_board.board.Board`.

    Attributes:
        min_width (int): Smallest accepted board width.
        min_height (int): Smallest accepted board height.
        snake_cells (Tuple[CellIndex, ...]): Initial snake, tail first.
        direction (Direction): Initial heading.
        bait (CellIndex): Initial bait cell.
    """

    min_width: int = 10
    min_height: int = 10
    snake_cells: Tuple[CellIndex, ...] = (0, 1, 2)
    direction: Direction = Direction.RIGHT
    bait: CellIndex = 8

    @property
    def snake_length(self) -> int:
        return len(self.snake_cells)

    def with_(self, **kwargs) -> "BoardConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self, width: int, height: int) -> Tuple[int, int]:
        """Check that this layout fits a ``width`` x ``height`` board.

        Any integer type (e.g. ``numpy.int64``) is accepted.

        Returns:
            Tuple[int, int]: The dimensions as plain ``int``.

        Raises:
            ValueError: If the board is below the minimum size or the default
                snake / bait fall outside it.
        """
        try:
            width, height = operator.index(width), operator.index(height)
        except TypeError:
            raise ValueError("width and height must be integers") from None
        if width < self.min_width or height < self.min_height:
            raise ValueError(
                f"width must be >= {self.min_width} and height must be >= {self.min_height}"
            )
        if not self.snake_cells:
            raise ValueError("Default snake must have at least one cell")
        size = width * height
        for index in (*self.snake_cells, self.bait):
            if not 0 <= index < size:
                raise ValueError(f"Default cell {index} is outside a {width}x{height} board")
        if self.bait in self.snake_cells:
            raise ValueError("Default bait must not overlap the default snake")
        return width, height


DEFAULT_CONFIG = BoardConfig()
