"""Snake board simulation core.

A :class:`Board` owns a flat Dead/Lit cell buffer on a wrap-around grid, a
snake and a bait cell, and advances one move per :meth:`Board.tick`. Hosts
inject the random source and the game-over notifier, drive ``tick`` from
their own loop and read :attr:`Board.cells` to draw.

>>> from snake_board import Board, Direction
>>> board = Board(10, 10, seed=0)
>>> board.tick()
>>> list(board.snake.cells)
[1, 2, 3]
"""

from snake_board.board import Board
from snake_board.config import DEFAULT_CONFIG, BoardConfig
from snake_board.snake import Snake
from snake_board.state import BoardSnapshot
from snake_board.types import Cell, Direction

__all__ = [
    "Board",
    "BoardConfig",
    "BoardSnapshot",
    "Cell",
    "DEFAULT_CONFIG",
    "Direction",
    "Snake",
]
