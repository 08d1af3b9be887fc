"""
Core functionality for the 2048 game: the slide-and-merge transition of a column, the tilt of a whole board and
random tile spawning.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Optional, Sequence

from numpy import argwhere, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from puzzle2048.config import TILE_SPAWN_PROBS
from puzzle2048.core.grid import Grid, Tile
from puzzle2048.core.perspective import Side, from_view

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


class Slot(Enum):
    """State of one slot of a column while it is being merged."""

    EMPTY = 0
    OCCUPIED = 1
    MERGED = 2


class ColumnResult(NamedTuple):
    """Outcome of merging one column."""

    values: tuple[int, ...]
    changed: bool
    score: int


class TiltResult(NamedTuple):
    """Outcome of tilting a whole board."""

    grid: Grid
    changed: bool
    score: int


def merge_column(column: Sequence[int]) -> ColumnResult:
    """
    Slide and merge the tiles of one column toward its last index.

    Parameters
    ----------
    column : Sequence[int]
        Tile values of the column, 0 for an empty slot. Index ``len(column) - 1`` is the wall the tiles are pushed
        against.

    Returns
    -------
    ColumnResult
        The new column, whether any tile moved or merged, and the score gained.

    Notes
    -----
    - The column is scanned once, from the wall inward, keeping track of the empty slot closest to the wall.
    - A tile merges with the tile just ahead of where it would land if both hold the same value and that tile has
      not merged yet. Each tile therefore merges at most once per call.
    - With three equal tiles in a row, the two closest to the wall merge and the trailing one only slides.
    """
    size = len(column)
    cells = [int(value) for value in column]
    slots = [Slot.OCCUPIED if value else Slot.EMPTY for value in cells]

    # ##: Empty slot closest to the wall, None until one is seen.
    target: Optional[int] = None
    changed = False
    score = 0

    for index in range(size - 1, -1, -1):
        value = cells[index]
        if value == 0:
            if target is None:
                target = index
            continue

        ahead = index + 1 if target is None else target + 1
        if ahead < size and slots[ahead] is Slot.OCCUPIED and cells[ahead] == value:
            # ##>: Merge into the tile ahead, the vacated slot opens up behind it.
            cells[ahead] = 2 * value
            slots[ahead] = Slot.MERGED
            cells[index] = 0
            slots[index] = Slot.EMPTY
            score += 2 * value
            if target is None:
                target = index
            changed = True
        elif target is not None:
            # ##>: Slide into the free slot, the next free slot is right behind it.
            cells[target] = value
            slots[target] = Slot.OCCUPIED
            cells[index] = 0
            slots[index] = Slot.EMPTY
            target -= 1
            changed = True

    return ColumnResult(tuple(cells), changed, score)


def tilt(grid: Grid, side: Side) -> TiltResult:
    """
    Tilt the board toward ``side``.

    Parameters
    ----------
    grid : Grid
        The board to tilt. It is not modified.
    side : Side
        The direction of the tilt.

    Returns
    -------
    TiltResult
        The tilted board, whether any column changed and the total score gained.

    Notes
    -----
    Every column of the logical frame of ``side`` is read through `from_view`, merged independently and written
    back at the same physical cells.
    """
    size = grid.size
    cells = grid.values
    result = zeros_like(cells)
    changed = False
    score = 0

    for col in range(size):
        coords = [from_view(side, col, row, size) for row in range(size)]
        merged = merge_column([cells[coord] for coord in coords])
        for coord, value in zip(coords, merged.values):
            result[coord] = value
        changed = changed or merged.changed
        score += merged.score

    return TiltResult(Grid.from_array(result), changed, score)


def spawn_tile(grid: Grid, seed: int | None = None, rng: Generator | None = None) -> Optional[Tile]:
    """
    Choose a random new tile for an empty cell of the board.

    Parameters
    ----------
    grid : Grid
        The current board. It is not modified.
    seed : int, optional
        Random number generator seed for reproducibility.
    rng : Generator, optional
        Generator to draw from; takes precedence over ``seed``.

    Returns
    -------
    Tile or None
        A 2 (90%) or a 4 (10%) on a uniformly chosen empty cell, None when the board is full.
    """
    # ##>: Use module-level generator for performance unless seed is specified.
    if rng is None:
        rng = default_rng(seed) if seed is not None else _GENERATOR

    available_cells = argwhere(grid.values == 0)
    if len(available_cells) == 0:
        return None

    value = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    col, row = available_cells[rng.integers(len(available_cells))]
    return Tile(int(value), int(col), int(row))
