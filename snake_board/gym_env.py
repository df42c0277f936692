"""Gymnasium environment wrapper for the snake board.

Each ``step(action)`` sets the heading from the action and advances the board
by one tick. The observation is a copy of the cell buffer shaped
``(height, width)``; the bait cell shows up as Lit from the tick after it is
placed, exactly as a renderer would see it.

Reward is the score delta of the step. A self-collision ends the episode:
``terminated`` is ``True`` on the step where the board's game-over notifier
fired (the board has already reset itself by then) and the reward for that
step is ``0.0``. ``truncated`` is set once ``max_steps`` ticks have run, if
configured.

Usage:

``env = SnakeBoardEnv(width=10, height=10, seed=0)``
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from snake_board.board import Board
from snake_board.controls import is_reversal
from snake_board.renderer.canvas import DEFAULT_CELL_SIZE, CanvasRenderer
from snake_board.types import Direction
from snake_board.utils.rng import make_randint_fn

ObsType = np.ndarray


class SnakeBoardEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` driving a :class:`snake_board.board.Board`.

    The action space is ``Discrete(4)`` indexed by :class:`Direction` value.
    """

    metadata = {"render_modes": ["image", "rgb_array"]}

    def __init__(
        self,
        width: int = 10,
        height: int = 10,
        render_mode: str = "image",
        cell_size: int = DEFAULT_CELL_SIZE,
        block_reversal: bool = False,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ):
        """Create a new environment instance.

        Arguments:
            width: Board width in cells.
            height: Board height in cells.
            render_mode: "image" to return PIL images, "rgb_array" for numpy frames.
            cell_size: Cell side in pixels for rendering.
            block_reversal: Ignore actions that reverse straight into the body.
            max_steps: Truncate episodes after this many steps (``None`` for never).
            seed: Seed for bait placement.
        """
        from gymnasium import spaces

        if render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Render mode '{render_mode}' not supported.")

        self.render_mode = render_mode
        self.block_reversal = block_reversal
        self.max_steps = max_steps
        self._game_over = False
        self._steps = 0

        self._randint_fn = make_randint_fn(seed)
        self.board = Board(
            width,
            height,
            randint_fn=self._randint,
            on_game_over=self._notify_game_over,
        )
        self._renderer = CanvasRenderer(cell_size=cell_size)

        self.observation_space = spaces.Box(
            low=0, high=1, shape=(height, width), dtype=np.uint8
        )
        self.action_space = spaces.Discrete(len(Direction))

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None
    ) -> Tuple[ObsType, Dict[str, Any]]:
        """Start a new episode.

        Arguments:
            seed: Reseeds bait placement when given.
            options: Gymnasium options (unused).

        Returns:
            Observation and info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self._randint_fn = make_randint_fn(seed)
        self.board.reset()
        self._game_over = False
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, Any]]:
        """Apply one action and tick the board.

        Arguments:
            action: Integer index into the ``Direction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        if not 0 <= int(action) < len(Direction):
            raise ValueError(f"Invalid action: {action}")
        direction = Direction(int(action))
        if not (self.block_reversal and is_reversal(self.board.direction, direction)):
            self.board.change_direction(direction)

        prev_score = self.board.score
        self._game_over = False
        self.board.tick()
        self._steps += 1

        terminated = self._game_over
        reward = 0.0 if terminated else float(self.board.score - prev_score)
        truncated = self.max_steps is not None and self._steps >= self.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[PILImage | np.ndarray]:  # type: ignore[override]
        """Render the current board.

        Returns a PIL image in "image" mode or an ``(H, W, 3)`` array in
        "rgb_array" mode.
        """
        img = self._renderer.render(self.board)
        if self.render_mode == "rgb_array":
            return np.array(img)
        return img

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass

    def _randint(self, low: int, high: int) -> int:
        return self._randint_fn(low, high)

    def _notify_game_over(self, board: Board) -> None:
        self._game_over = True

    def _get_obs(self) -> ObsType:
        return self.board.cells_grid().copy()

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.board.score,
            "bait": self.board.bait,
            "head": self.board.snake.head,
            "direction": self.board.direction.name,
            "steps": self._steps,
        }
