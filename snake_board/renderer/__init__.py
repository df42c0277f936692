"""Rendering subpackage.

Turns a board's cell buffer into images for hosts that want pixels instead of
the raw buffer (Gym ``render``, recordings, debugging). See
:mod:`snake_board.renderer.canvas`.
"""

from .canvas import CanvasRenderer, DEFAULT_CELL_SIZE

__all__ = ["CanvasRenderer", "DEFAULT_CELL_SIZE"]
