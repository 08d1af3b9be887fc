# -*-  coding: utf-8 -*-
"""
Set of test for the matplotlib window and the keyboard control.
"""
from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import MagicMock, patch

import matplotlib

matplotlib.use("Agg")

from matplotlib import pyplot as plt  # noqa: E402

import manuals_control  # noqa: E402
from puzzle2048 import Game, GameConfiguration, Side, Tile  # noqa: E402
from puzzle2048.utils import WindowBoard  # noqa: E402


class TestWindowBoard(TestCase):
    """Rendering a game."""

    def setUp(self):
        self.window = WindowBoard(title="2048 Game", size=2)
        patcher = patch("puzzle2048.utils.windows.plt.pause")
        self.pause = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        plt.close("all")

    def test_one_cell_per_tile(self):
        """The window holds one subplot per cell."""
        self.assertEqual(len(self.window.axes), 4)
        self.assertEqual(len(self.window.texts), 4)

    def test_show_game(self):
        """Cells are drawn from the top-left corner, empty cells blank."""
        game = Game(2)
        game.add_tile(Tile(2, 0, 0))
        game.add_tile(Tile(8, 1, 1))
        self.window.show_game(game)
        self.assertEqual([text.get_text() for text in self.window.texts], ["", "8", "2", ""])
        self.pause.assert_called_once()

    def test_redraw_through_listener(self):
        """Registered as a listener, the window follows every change."""
        game = Game(2)
        game.add_listener(self.window.show_game)
        game.add_tile(Tile(4, 0, 1))
        self.assertEqual(self.window.texts[0].get_text(), "4")
        game.tilt(Side.EAST)
        self.assertEqual([text.get_text() for text in self.window.texts], ["", "4", "", ""])

    def test_close(self):
        """Closing the window sets the closed flag."""
        self.window.close()
        self.assertTrue(self.window.closed)


class TestKeyHandler(TestCase):
    """Keyboard control of a game."""

    def setUp(self):
        self.window = MagicMock()
        self.config = GameConfiguration(size=4)

    def press(self, game: Game, key: str):
        manuals_control.key_handler(game, self.window, self.config, SimpleNamespace(key=key))

    def test_arrow_tilts_and_spawns(self):
        """An arrow key tilts the board and adds one random tile when something moved."""
        game = Game.from_snapshot([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], 0, 0, False)
        self.press(game, "left")
        self.assertEqual(game.score, 4)
        self.assertEqual(len(list(game.board.tiles())), 2)

    def test_no_op_arrow_does_not_spawn(self):
        """An arrow key that moves nothing leaves the board alone."""
        game = Game.from_snapshot([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]], 0, 0, False)
        self.press(game, "up")
        self.assertEqual(len(list(game.board.tiles())), 1)

    def test_backspace_restarts(self):
        """Backspace starts a new game."""
        game = Game.from_snapshot([[2, 4], [4, 2]], 20, 0, False)
        self.press(game, "backspace")
        self.assertEqual(game.score, 0)
        self.assertEqual(len(list(game.board.tiles())), 2)

    def test_escape_closes(self):
        """Escape closes the window."""
        self.press(Game(4), "escape")
        self.window.close.assert_called_once()

    def test_keys_cover_every_side(self):
        """Every side has an arrow key."""
        self.assertEqual(set(manuals_control.KEYS.values()), set(Side))


if __name__ == "__main__":
    main()
