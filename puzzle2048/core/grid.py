# -*- coding: utf-8 -*-
"""
Board storage for the 2048 game.

The grid knows nothing about the game rules: it stores at most one tile value per cell and offers coordinate
access. Coordinates are ``(col, row)`` with ``(0, 0)`` the lower-left corner of the board, like (x, y).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from numpy import any as np_any
from numpy import array, array_equal, flipud, int64, integer, ndarray, zeros


def is_tile_value(value: int) -> bool:
    """Return True iff ``value`` is an integer power of two no smaller than 2."""
    if isinstance(value, bool) or not isinstance(value, (int, integer)):
        return False
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """
    A numbered piece sitting at a cell of the board.

    Tiles have no identity across moves: a tilt drops the old tiles and the grid hands out fresh ones.
    """

    value: int
    col: int
    row: int

    def __post_init__(self):
        if not is_tile_value(self.value):
            raise ValueError(f"Tile value must be a power of two >= 2, got {self.value}")


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, integer)) or size <= 0:
        raise ValueError(f"Board size must be a positive integer, got {size!r}")
    return int(size)


def _check_values(cells: ndarray) -> None:
    non_zero = cells[cells != 0]
    if np_any(non_zero < 2) or np_any(non_zero & (non_zero - 1)):
        raise ValueError(f"Tile values must be powers of two >= 2, got {sorted(set(non_zero.tolist()))}")


class Grid:
    """
    Square N x N storage of optional tile values.

    Cells are kept in an ``int64`` array indexed ``[col, row]``, ``0`` standing for an empty cell, so that
    ``cells[col]`` is one column read from the bottom edge upward.
    """

    def __init__(self, size: int):
        """
        Create an empty board.

        Parameters
        ----------
        size : int
            Number of cells on one side of the board.
        """
        size = _check_size(size)
        self._cells: ndarray = zeros((size, size), dtype=int64)

    @classmethod
    def from_array(cls, cells: ndarray) -> Grid:
        """
        Build a board from an array already indexed ``[col, row]``.

        Parameters
        ----------
        cells : ndarray
            Square array of tile values, 0 for empty cells.

        Returns
        -------
        Grid
            A board holding a copy of ``cells``.
        """
        cells = array(cells, dtype=int64)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"Board must be a square matrix, got shape {cells.shape}")
        _check_values(cells)

        grid = cls(cells.shape[0])
        grid._cells = cells
        return grid

    @classmethod
    def from_display(cls, values) -> Grid:
        """
        Build a board from a matrix written the way the board is displayed.

        Parameters
        ----------
        values : array_like
            Square matrix of tile values; the first row is the top of the board (highest row index) and
            ``values[i][col]`` is the cell ``(col, size - 1 - i)``. 0 marks an empty cell.

        Returns
        -------
        Grid
            The corresponding board.
        """
        values = array(values, dtype=int64)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(f"Board must be a square matrix, got shape {values.shape}")
        return cls.from_array(flipud(values).T)

    @property
    def size(self) -> int:
        """Number of cells on one side of the board."""
        return self._cells.shape[0]

    @property
    def values(self) -> ndarray:
        """A copy of the cells, indexed ``[col, row]``."""
        return self._cells.copy()

    def to_display(self) -> ndarray:
        """Return the cells as a matrix whose first row is the top of the board."""
        return flipud(self._cells.T).copy()

    def value(self, col: int, row: int) -> int:
        """Return the value at (col, row), 0 when the cell is empty."""
        self._check_cell(col, row)
        return int(self._cells[col, row])

    def tile(self, col: int, row: int) -> Optional[Tile]:
        """Return the tile at (col, row), or None if there is no tile there."""
        value = self.value(col, row)
        return Tile(value, col, row) if value else None

    def tiles(self) -> Iterator[Tile]:
        """Iterate over every tile of the board, column by column from the bottom."""
        for col, row in zip(*self._cells.nonzero()):
            yield Tile(int(self._cells[col, row]), int(col), int(row))

    def add_tile(self, tile: Tile) -> None:
        """
        Place ``tile`` on the board.

        Raises
        ------
        ValueError
            If the tile lies outside the board or its cell is already occupied.
        """
        self._check_cell(tile.col, tile.row)
        if self._cells[tile.col, tile.row] != 0:
            raise ValueError(f"Cell ({tile.col}, {tile.row}) already holds {self._cells[tile.col, tile.row]}")
        self._cells[tile.col, tile.row] = tile.value

    def clear(self) -> None:
        """Remove every tile."""
        self._cells.fill(0)

    def copy(self) -> Grid:
        """Return an independent copy of the board."""
        return Grid.from_array(self._cells)

    def total(self) -> int:
        """Sum of all tile values."""
        return int(self._cells.sum())

    def is_empty(self) -> bool:
        """Return True iff no tile sits on the board."""
        return not self._cells.any()

    def _check_cell(self, col: int, row: int) -> None:
        size = self.size
        if not (0 <= col < size and 0 <= row < size):
            raise ValueError(f"Cell ({col}, {row}) is outside a {size}x{size} board")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.to_display().tolist()})"
