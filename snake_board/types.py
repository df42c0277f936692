"""Common type aliases and enumerations.

``Cell`` and ``Direction`` are integer enums so that the cell buffer can be a
flat ``uint8`` array and directions map one-to-one onto discrete action ids.
``RandIntFn`` and ``GameOverFn`` are the two capabilities a host injects into
a :class:`snake_board.board.Board`.
"""

from enum import IntEnum
from typing import Callable, TYPE_CHECKING


# Forward declaration for GameOverFn typing to avoid circular imports:
if TYPE_CHECKING:
    from snake_board.board import Board

CellIndex = int

RandIntFn = Callable[[int, int], int]
"""Uniform integer generator over the inclusive range ``[low, high]``."""

GameOverFn = Callable[["Board"], None]
"""Notifier called synchronously on self-collision, before the board resets."""


class Cell(IntEnum):
    """Per-cell state stored in the board buffer."""

    DEAD = 0
    LIT = 1


class Direction(IntEnum):
    """Snake heading.

    Values are ordered clockwise so the opposite of ``d`` is ``(d + 2) % 4``.
    """

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3
