"""Board state machine.

The :class:`Board` owns the flat cell buffer, the bait position and the
snake, and advances the game one move per :meth:`Board.tick`. Hosts drive it
from their own loop (animation frame, timer, Gym ``step``) and read the cell
buffer to draw.

Tick ordering (each step depends on the previous one):

1. The bait cell is marked Lit so it renders even though the snake does not
    occupy it.
2. The snake moves one cell, vacating its tail.
3. If the head landed on the bait, the snake marches again without cutting
    (growth) and the bait is re-placed by rejection sampling over Dead cells.
4. If the head is not on the bait and its cell is already Lit, the snake ran
    into itself: the game-over notifier fires and the board resets. The tick
    ends there so the caller sees exactly the default layout.
5. Otherwise the vacated tail cell is cleared and the head cell lit.

Note the vacated tail is still Lit during step 4, so moving straight into the
cell the tail just left counts as a collision.

The buffer is exposed as a read-only ``numpy`` view (zero copy). Reset
refills it in place, so a view taken once stays valid for the board's whole
lifetime. Use :meth:`Board.snapshot` for an immutable copy.
"""

import logging
from typing import Optional

import numpy as np
from pyrsistent import pvector

from snake_board.config import DEFAULT_CONFIG, BoardConfig
from snake_board.snake import Snake
from snake_board.state import BoardSnapshot
from snake_board.types import Cell, CellIndex, Direction, GameOverFn, RandIntFn
from snake_board.utils.rng import make_randint_fn

logger = logging.getLogger(__name__)


def log_game_over(board: "Board") -> None:
    """Default game-over notifier: log the final score."""
    logger.info("Game Over! Score: %d", board.score)


class Board:
    """Snake game board on a toroidal grid.

    Args:
        width (int): Grid width in cells (at least ``config.min_width``).
        height (int): Grid height in cells (at least ``config.min_height``).
        randint_fn (RandIntFn | None): Inclusive uniform integer source used to
            re-place the bait. Defaults to a private ``random.Random(seed)``.
        on_game_over (GameOverFn | None): Called with the board on
            self-collision, before it resets. Defaults to logging.
        seed (int | None): Seed for the default random source; ignored when
            ``randint_fn`` is given.
        config (BoardConfig): Starting layout restored on every reset.

    Raises:
        ValueError: If the dimensions are below the minimum or the layout does
            not fit the board.

    ``score``, like ``width``, ``height`` and ``direction``, is a read-only
    property: read ``board.score``, not ``board.score()``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        randint_fn: Optional[RandIntFn] = None,
        on_game_over: Optional[GameOverFn] = None,
        seed: Optional[int] = None,
        config: BoardConfig = DEFAULT_CONFIG,
    ):
        width, height = config.validate(width, height)
        self._width = width
        self._height = height
        self._config = config
        self._randint = randint_fn if randint_fn is not None else make_randint_fn(seed)
        self._on_game_over = on_game_over if on_game_over is not None else log_game_over
        self._cells = np.full(width * height, Cell.DEAD, dtype=np.uint8)
        self._cells_view = self._cells.view()
        self._cells_view.flags.writeable = False
        self._snake = self._new_snake()
        self._bait: CellIndex = config.bait
        self.reset()

    # ---- Accessors ----
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def direction(self) -> Direction:
        return self._snake.direction

    @property
    def bait(self) -> CellIndex:
        return self._bait

    @property
    def snake(self) -> Snake:
        """The board's snake. Treat as read-only; use :meth:`change_direction`."""
        return self._snake

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat ``uint8`` view of the cell buffer (no copy)."""
        return self._cells_view

    def cells_grid(self) -> np.ndarray:
        """Read-only ``(height, width)`` view over the same buffer."""
        return self._cells_view.reshape(self._height, self._width)

    @property
    def score(self) -> int:
        """Segments grown since the last reset."""
        return len(self._snake) - self._config.snake_length

    # ---- Lifecycle ----
    def reset(self) -> None:
        """Restore the default snake, bait and cell buffer."""
        self._cells.fill(Cell.DEAD)
        for index in self._config.snake_cells:
            self._cells[index] = Cell.LIT
        self._bait = self._config.bait
        self._snake = self._new_snake()
        logger.debug("Board reset (%dx%d)", self._width, self._height)

    def change_direction(self, direction: Direction) -> None:
        """Set the heading used from the next tick on.

        Reversal into the body is not prevented here; see
        :func:`snake_board.controls.apply_key` for the host-side guard.
        """
        self._snake.direction = Direction(direction)

    def tick(self) -> None:
        """Advance the game by one move (see module docstring for ordering)."""
        snake = self._snake
        self._cells[self._bait] = Cell.LIT
        snake.march(self._width, self._height, cut_tail=True)

        if snake.head == self._bait:
            snake.march(self._width, self._height, cut_tail=False)
            bait = self._place_bait()
            if bait is None:
                self._game_over("board is full")
                return
            self._bait = bait

        if snake.head != self._bait and self._cells[snake.head] == Cell.LIT:
            self._game_over("self-collision")
            return

        self._cells[snake.tail] = Cell.DEAD
        self._cells[snake.head] = Cell.LIT

    def snapshot(self) -> BoardSnapshot:
        """Return an immutable copy of the current state."""
        snake = self._snake
        return BoardSnapshot(
            width=self._width,
            height=self._height,
            cells=pvector(Cell(c) for c in self._cells.tolist()),
            snake=pvector(snake.cells),
            head=snake.head,
            tail=snake.tail,
            direction=snake.direction,
            bait=self._bait,
            score=self.score,
        )

    # ---- Helpers ----
    def _new_snake(self) -> Snake:
        return Snake(self._config.snake_cells, self._config.direction)

    def _place_bait(self) -> Optional[CellIndex]:
        """Sample uniformly over the board until a Dead cell comes up.

        Returns ``None`` if no Dead cell is left, which would otherwise make
        rejection sampling loop forever.
        """
        if not (self._cells == Cell.DEAD).any():
            return None
        high = self._cells.size - 1
        bait = self._randint(0, high)
        while self._cells[bait] == Cell.LIT:
            bait = self._randint(0, high)
        logger.debug("Bait placed at %d", bait)
        return bait

    def _game_over(self, reason: str) -> None:
        logger.debug("Game over (%s) with score %d", reason, self.score)
        self._on_game_over(self)
        self.reset()
