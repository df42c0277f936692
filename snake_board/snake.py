"""Snake body and movement.

A :class:`Snake` is an ordered run of occupied cell indices, oldest (tail)
first and newest (head) last, plus its heading. It knows nothing about the
cell buffer: self-collision is detected by the board from cell state, never
by scanning ``cells``.
"""

from collections import deque
from typing import Deque, Iterable

from snake_board.moves import step_index
from snake_board.types import CellIndex, Direction


class Snake:
    """Mutable snake state owned by a board.

    Attributes:
        cells (Deque[CellIndex]): Occupied indices, tail first.
        direction (Direction): Heading used by the next :meth:`march`.
        head (CellIndex): Newest segment.
        tail (CellIndex): Last vacated segment after a cutting march, or the
            oldest segment before the first one.
    """

    def __init__(self, cells: Iterable[CellIndex], direction: Direction):
        self.cells: Deque[CellIndex] = deque(cells)
        if not self.cells:
            raise ValueError("Snake must have at least one cell")
        self.direction = direction
        self.head: CellIndex = self.cells[-1]
        self.tail: CellIndex = self.cells[0]

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Snake(cells={list(self.cells)!r}, direction={self.direction.name})"

    def march(self, width: int, height: int, cut_tail: bool) -> None:
        """Advance the head one cell along ``direction``.

        With ``cut_tail`` the oldest segment is dropped and remembered as
        ``tail`` so the board can clear it; the length is unchanged. Without
        it the snake grows by one and ``tail`` keeps its value.

        Args:
            width (int): Grid width in cells.
            height (int): Grid height in cells.
            cut_tail (bool): Drop the oldest segment (normal move) or keep it
                (growth).
        """
        self.head = step_index(self.head, self.direction, width, height)
        if cut_tail:
            self.tail = self.cells.popleft()
        self.cells.append(self.head)
