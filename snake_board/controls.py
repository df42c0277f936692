"""Keyboard-to-heading helpers for interactive hosts.

The board itself accepts any heading, including a direct reversal into the
snake's own neck. Interactive front-ends filter key presses through
:func:`apply_key`, which drops unknown keys and reversals before calling
:meth:`snake_board.board.Board.change_direction`.
"""

from typing import Dict

from snake_board.board import Board
from snake_board.types import Direction

KEY_DIRECTION_MAP: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowRight": Direction.RIGHT,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
}
"""Browser-style key names to headings."""


def reverse_of(direction: Direction) -> Direction:
    """Return the opposite heading."""
    return Direction((direction + 2) % len(Direction))


def is_reversal(current: Direction, new: Direction) -> bool:
    """Return True if ``new`` points straight back along ``current``."""
    return new == reverse_of(current)


def direction_for_key(key: str) -> Direction:
    """Look up the heading bound to ``key``.

    Raises:
        ValueError: If ``key`` is not bound.
    """
    try:
        return KEY_DIRECTION_MAP[key]
    except KeyError:
        raise ValueError(f"Unknown key: {key!r}") from None


def apply_key(board: Board, key: str) -> bool:
    """Change the board's heading from a key press.

    Unknown keys and reversals are ignored.

    Returns:
        bool: True if the heading was changed.
    """
    direction = KEY_DIRECTION_MAP.get(key)
    if direction is None or is_reversal(board.direction, direction):
        return False
    board.change_direction(direction)
    return True
