"""2048 game state: board, score, maximum score and terminal flag."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from numpy.random import Generator, default_rng

from puzzle2048.config import MAX_PIECE, START_TILES, GameConfiguration
from puzzle2048.core.gameboard import spawn_tile, tilt
from puzzle2048.core.gamemove import is_done, legal_sides
from puzzle2048.core.grid import Grid, Tile
from puzzle2048.core.perspective import Side

logger = logging.getLogger(__name__)

Listener = Callable[["Game"], None]


class Game:
    """
    The state of a game of 2048.

    The game owns the board and the score. Every operation that changes the board, the score or the terminal flag
    calls the registered listeners exactly once; a tilt that leaves all three untouched calls none of them.
    """

    def __init__(self, size: int = 4, max_piece: int = MAX_PIECE):
        """
        A new game on an empty board with score 0.

        Parameters
        ----------
        size : int, optional
            Number of cells on one side of the board (default is 4).
        max_piece : int, optional
            Tile value that ends the game (default is 2048).
        """
        self._board = Grid(size)
        self._max_piece = max_piece
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._listeners: list[Listener] = []

    @classmethod
    def from_snapshot(cls, values, score: int, max_score: int, game_over: bool, max_piece: int = MAX_PIECE) -> Game:
        """
        A game restored from explicit values. Used for testing purposes.

        Parameters
        ----------
        values : array_like
            Square matrix of tile values written as the board is displayed: the first row is the top of the board.
            0 marks an empty cell.
        score : int
            Current score.
        max_score : int
            Maximum score so far.
        game_over : bool
            Whether the game is over.
        max_piece : int, optional
            Tile value that ends the game (default is 2048).
        """
        board = Grid.from_display(values)
        game = cls(board.size, max_piece=max_piece)
        game._board = board
        game._score = score
        game._max_score = max_score
        game._game_over = game_over
        return game

    @classmethod
    def from_configuration(cls, config: GameConfiguration) -> Game:
        """A new empty game with the size and maximum piece of ``config``."""
        return cls(config.size, max_piece=config.max_piece)

    @property
    def size(self) -> int:
        """Number of squares on one side of the board."""
        return self._board.size

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def max_score(self) -> int:
        """Maximum game score, updated when a game ends."""
        return self._max_score

    @property
    def max_piece(self) -> int:
        """Tile value that ends the game."""
        return self._max_piece

    @property
    def board(self) -> Grid:
        """A copy of the current board."""
        return self._board.copy()

    def tile(self, col: int, row: int) -> Optional[Tile]:
        """Return the tile at (col, row), where (0, 0) is the lower-left corner, or None if the cell is empty."""
        return self._board.tile(col, row)

    def game_over(self) -> bool:
        """
        Return True iff the game is over: there are no moves, or a tile holds the maximum piece value.

        Checking latches the maximum score when the game is over.
        """
        self._check_game_over()
        return self._game_over

    def legal_sides(self) -> list[Side]:
        """Return the sides a tilt would change the board toward."""
        return legal_sides(self._board)

    def add_listener(self, listener: Listener) -> None:
        """Register ``listener`` to be called with the game after every change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Stop calling ``listener``."""
        self._listeners.remove(listener)

    def clear(self) -> None:
        """Clear the board to empty and reset the score."""
        changed = not self._board.is_empty() or self._score != 0 or self._game_over
        self._reset_board()
        self._check_game_over()
        if changed:
            self._notify()

    def add_tile(self, tile: Tile) -> None:
        """
        Add ``tile`` to the board.

        Raises
        ------
        ValueError
            If a tile already sits at the same position.
        """
        self._board.add_tile(tile)
        self._check_game_over()
        self._notify()

    def spawn(self, seed: int | None = None, rng: Generator | None = None) -> Optional[Tile]:
        """
        Add a random tile (2 or 4) on an empty cell.

        Returns
        -------
        Tile or None
            The added tile, None if the board is full.
        """
        tile = spawn_tile(self._board, seed=seed, rng=rng)
        if tile is not None:
            self.add_tile(tile)
        return tile

    def reset(self, start_tiles: int = START_TILES, seed: int | None = None) -> Grid:
        """
        Start a new game: empty the board, reset the score and add ``start_tiles`` random tiles.

        Returns
        -------
        Grid
            A copy of the new board.
        """
        self._reset_board()
        rng = default_rng(seed) if seed is not None else None
        for _ in range(start_tiles):
            tile = spawn_tile(self._board, rng=rng)
            if tile is None:
                break
            self._board.add_tile(tile)
        self._check_game_over()
        self._notify()
        return self.board

    def tilt(self, side: Side) -> bool:
        """
        Tilt the board toward ``side``. Return True iff this changes the board.

        1. Two tiles adjacent in the direction of motion with the same value merge into one tile of twice the
           value, and that value is added to the score.
        2. A tile that results from a merge does not merge again on the same tilt.
        3. When three adjacent tiles in the direction of motion have the same value, the leading two merge and the
           trailing one does not.
        """
        result = tilt(self._board, side)
        if result.changed:
            self._board = result.grid
            self._score += result.score
        logger.debug("Tilt %s: changed=%s, score +%d", side.name, result.changed, result.score)

        status_changed = self._check_game_over()
        if result.changed or status_changed:
            self._notify()
        return result.changed

    def _reset_board(self) -> None:
        self._score = 0
        self._game_over = False
        self._board.clear()

    def _check_game_over(self) -> bool:
        """Re-derive the terminal flag from the board. Return True iff the flag or the maximum score changed."""
        over = is_done(self._board, self._max_piece)
        max_score = self._max_score
        if over:
            if not self._game_over:
                logger.info("Game over with score %d (max: %d)", self._score, max(self._score, self._max_score))
            max_score = max(self._score, self._max_score)
        changed = over != self._game_over or max_score != self._max_score
        self._game_over = over
        self._max_score = max_score
        return changed

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Game):
            return NotImplemented
        self._check_game_over()
        other._check_game_over()
        return (
            self._board == other._board
            and self._score == other._score
            and self._max_score == other._max_score
            and self._game_over == other._game_over
        )

    __hash__ = None

    def __str__(self) -> str:
        """Return the game as a string, used for debugging."""
        lines = ["", "["]
        cells = self._board.to_display()
        for row in cells.tolist():
            lines.append("".join(f"|{value:4d}" if value else "|    " for value in row) + "|")
        over = "over" if self.game_over() else "not over"
        lines.append(f"] {self._score} (max: {self._max_score}) (game is {over}) ")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Game(size={self.size}, score={self._score}, max_score={self._max_score}, over={self._game_over})"
