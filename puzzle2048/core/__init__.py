# -*- coding: utf-8 -*-
"""
Pure board logic for a 2048-like game.

It includes the grid storage, the viewing perspectives used to tilt toward any side, the column merge and board
tilt transition, random tile spawning, terminal-state detection and legal directions.
"""

from .gameboard import ColumnResult, Slot, TiltResult, merge_column, spawn_tile, tilt
from .gamemove import (
    at_least_one_move_exists,
    empty_space_exists,
    illegal_sides,
    is_done,
    legal_sides,
    legal_sides_mask,
    max_tile_exists,
)
from .grid import Grid, Tile, is_tile_value
from .perspective import Side, from_view, to_view

__all__ = [
    "ColumnResult",
    "Grid",
    "Side",
    "Slot",
    "Tile",
    "TiltResult",
    "at_least_one_move_exists",
    "empty_space_exists",
    "from_view",
    "illegal_sides",
    "is_done",
    "is_tile_value",
    "legal_sides",
    "legal_sides_mask",
    "max_tile_exists",
    "merge_column",
    "spawn_tile",
    "tilt",
    "to_view",
]
