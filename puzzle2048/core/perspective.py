# -*- coding: utf-8 -*-
"""
Viewing perspectives used while tilting the board.

A perspective is a pure coordinate mapping: in the logical frame of side ``S``, sliding toward increasing logical
row is the same as sliding toward ``S`` on the physical board. The mapping is passed around as an argument and
never stored on the grid.
"""
from enum import Enum


class Side(Enum):
    """The four directions a board can be tilted toward."""

    NORTH = "up"
    EAST = "right"
    SOUTH = "down"
    WEST = "left"


def from_view(side: Side, col: int, row: int, size: int) -> tuple[int, int]:
    """
    Map logical coordinates seen from ``side`` to physical coordinates.

    Parameters
    ----------
    side : Side
        The direction of the tilt.
    col, row : int
        Logical coordinates; row ``size - 1`` is the wall tiles are pushed against.
    size : int
        Number of cells on one side of the board.

    Returns
    -------
    tuple[int, int]
        The physical (col, row).
    """
    last = size - 1
    if side is Side.NORTH:
        return col, row
    if side is Side.SOUTH:
        return last - col, last - row
    if side is Side.EAST:
        return row, last - col
    return last - row, col


def to_view(side: Side, col: int, row: int, size: int) -> tuple[int, int]:
    """
    Map physical coordinates to the logical frame of ``side``. Inverse of `from_view`.
    """
    last = size - 1
    if side is Side.NORTH:
        return col, row
    if side is Side.SOUTH:
        return last - col, last - row
    if side is Side.EAST:
        return last - row, col
    return row, last - col
