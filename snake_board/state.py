"""Immutable board snapshots.

A :class:`BoardSnapshot` is a value-object copy of everything observable on a
:class:`snake_board.board.Board` at one instant. Boards are mutated in place
tick by tick; snapshots are what hosts keep, compare or hand to other threads.
Two boards in the same configuration produce equal snapshots, which is how a
post-collision board is checked against a freshly constructed one.

Sequences are persistent vectors (``pyrsistent.PVector``) so a snapshot can
be shared freely without defensive copies.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from snake_board.types import Cell, CellIndex, Direction


@dataclass(frozen=True)
class BoardSnapshot:
    """Copy of a board's observable state.

    Attributes:
        width (int): Grid width in cells.
        height (int): Grid height in cells.
        cells (PVector[Cell]): Row-major cell states, length ``width * height``.
        snake (PVector[CellIndex]): Snake cells, tail first.
        head (CellIndex): Snake head index.
        tail (CellIndex): Snake tail index (last vacated cell after a move).
        direction (Direction): Current heading.
        bait (CellIndex): Bait index.
        score (int): Segments grown since the last reset.
    """

    width: int
    height: int
    cells: PVector[Cell]
    snake: PVector[CellIndex]
    head: CellIndex
    tail: CellIndex
    direction: Direction
    bait: CellIndex
    score: int

    def lit_indices(self) -> PVector[CellIndex]:
        """Return indices of all Lit cells in ascending order."""
        return pvector(i for i, cell in enumerate(self.cells) if cell == Cell.LIT)

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of the snapshot.

        The full cell buffer is summarized by its Lit indices to keep output
        readable for debugging.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            if field == "cells":
                continue
            description = description.set(field, getattr(self, field))
        return description.set("lit", self.lit_indices())
