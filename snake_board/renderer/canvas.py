"""Grid canvas renderer.

Rasterizes the cell buffer as a grid of square cells separated by one-pixel
grid lines: Dead cells white, Lit cells black. An image for a ``W`` x ``H``
board at cell size ``c`` is ``(c + 1) * W + 1`` by ``(c + 1) * H + 1`` pixels.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from snake_board.board import Board
from snake_board.types import Cell

DEFAULT_CELL_SIZE = 25
GRID_COLOR = "#585858"
DEAD_COLOR = "#FFFFFF"
LIT_COLOR = "#000000"


@dataclass(frozen=True)
class CanvasRenderer:
    """Draw a board's cells into a Pillow image.

    Attributes:
        cell_size (int): Side of one cell in pixels, excluding grid lines.
        grid_color (str): Color of the grid lines.
        dead_color (str): Fill for Dead cells.
        lit_color (str): Fill for Lit cells.
    """

    cell_size: int = DEFAULT_CELL_SIZE
    grid_color: str = GRID_COLOR
    dead_color: str = DEAD_COLOR
    lit_color: str = LIT_COLOR

    def image_size(self, width: int, height: int) -> Tuple[int, int]:
        """Return ``(pixel_width, pixel_height)`` for a board of that size."""
        step = self.cell_size + 1
        return step * width + 1, step * height + 1

    def cell_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left pixel of the cell at ``(row, col)``."""
        step = self.cell_size + 1
        return col * step + 1, row * step + 1

    def render(self, board: Board) -> Image.Image:
        """Render ``board`` as an RGB image."""
        return self.render_cells(board.cells_grid())

    def render_cells(self, grid: np.ndarray) -> Image.Image:
        """Render a ``(height, width)`` array of cell states."""
        height, width = grid.shape
        img = Image.new("RGB", self.image_size(width, height), self.grid_color)
        draw = ImageDraw.Draw(img)
        dead = ImageColor.getrgb(self.dead_color)
        lit = ImageColor.getrgb(self.lit_color)
        for row in range(height):
            for col in range(width):
                x, y = self.cell_origin(row, col)
                fill = lit if grid[row, col] == Cell.LIT else dead
                draw.rectangle(
                    [x, y, x + self.cell_size - 1, y + self.cell_size - 1], fill=fill
                )
        return img
