# -*- coding: utf-8 -*-
"""
Python model of the 2048 sliding-merge puzzle.

The `core` package holds the pure board logic (grid, perspective, tilt and terminal detection) and the `envs`
package the stateful `Game` that collaborators such as the matplotlib viewer drive.
"""

from .config import MAX_PIECE, GameConfiguration
from .core import Grid, Side, Tile
from .envs import Game

__all__ = ["Game", "GameConfiguration", "Grid", "MAX_PIECE", "Side", "Tile"]
