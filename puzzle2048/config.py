# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass

# ##: Largest piece value, a board holding it ends the game.
MAX_PIECE = 2048

# ##: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##: Number of tiles placed on a fresh board.
START_TILES = 2


@dataclass(frozen=True)
class GameConfiguration:
    """Data needed to set up a game and its viewer."""

    size: int = 4
    max_piece: int = MAX_PIECE
    start_tiles: int = START_TILES
    title: str = "2048 Game"
