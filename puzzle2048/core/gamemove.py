"""
Game move utilities for the 2048 game: terminal-state detection and legal directions.

All predicates are derived from the current board contents only; they do not depend on how the board was reached.
"""
from numpy import any as np_any

from puzzle2048.config import MAX_PIECE
from puzzle2048.core.grid import Grid
from puzzle2048.core.perspective import Side


def empty_space_exists(grid: Grid) -> bool:
    """Return True iff at least one cell of the board is empty."""
    return bool(np_any(grid.values == 0))


def max_tile_exists(grid: Grid, max_piece: int = MAX_PIECE) -> bool:
    """Return True iff some tile holds the maximum piece value."""
    return bool(np_any(grid.values == max_piece))


def at_least_one_move_exists(grid: Grid) -> bool:
    """
    Return True if there are any valid moves on the board.

    There are two ways that there can be valid moves:
    1. There is at least one empty space on the board.
    2. There are two horizontally or vertically adjacent tiles with the same value.
    """
    if empty_space_exists(grid):
        return True

    cells = grid.values
    # ##>: Board is full here, so equal neighbours are equal tiles.
    return bool(np_any(cells[:-1, :] == cells[1:, :]) or np_any(cells[:, :-1] == cells[:, 1:]))


def is_done(grid: Grid, max_piece: int = MAX_PIECE) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    grid : Grid
        The current board.
    max_piece : int, optional
        Tile value that wins the game (default is 2048).

    Returns
    -------
    bool
        True if a tile holds ``max_piece``, or if the board is full and no two adjacent cells hold the same value.
    """
    return max_tile_exists(grid, max_piece) or not at_least_one_move_exists(grid)


def legal_sides_mask(grid: Grid) -> dict[Side, bool]:
    """
    Get, for every side, whether tilting toward it would change the board.

    Parameters
    ----------
    grid : Grid
        The current board.

    Returns
    -------
    dict[Side, bool]
        True for the sides whose tilt moves or merges at least one tile.

    Notes
    -----
    Horizontal and vertical adjacencies are computed once, then combined with the slide condition of each side.
    """
    cells = grid.values

    # ##>: Cells are indexed [col, row]: axis 0 runs west to east, axis 1 south to north.
    west_cells, east_cells = cells[:-1, :], cells[1:, :]
    h_can_merge = (west_cells != 0) & (west_cells == east_cells)

    south_cells, north_cells = cells[:, :-1], cells[:, 1:]
    v_can_merge = (south_cells != 0) & (south_cells == north_cells)

    # ##>: A tile can slide toward a side when the cell next to it on that side is empty.
    north = (north_cells == 0) & (south_cells != 0)
    south = (south_cells == 0) & (north_cells != 0)
    east = (east_cells == 0) & (west_cells != 0)
    west = (west_cells == 0) & (east_cells != 0)

    return {
        Side.NORTH: bool(north.any() or v_can_merge.any()),
        Side.EAST: bool(east.any() or h_can_merge.any()),
        Side.SOUTH: bool(south.any() or v_can_merge.any()),
        Side.WEST: bool(west.any() or h_can_merge.any()),
    }


def legal_sides(grid: Grid) -> list[Side]:
    """Return the sides whose tilt would change the board."""
    return [side for side, legal in legal_sides_mask(grid).items() if legal]


def illegal_sides(grid: Grid) -> list[Side]:
    """Return the sides whose tilt would leave the board unchanged."""
    return [side for side, legal in legal_sides_mask(grid).items() if not legal]
