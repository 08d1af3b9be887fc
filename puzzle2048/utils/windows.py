# -*- coding: utf-8 -*-
"""
Graphical User Interface for the 2048 Game

This module provides functionality to create and manage a graphical window for displaying a 2048 game. It
utilizes Matplotlib for rendering and handling user interactions, and can be registered as a listener of a `Game`
so that the window is redrawn after every change.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray

from puzzle2048.envs import Game


class WindowBoard:
    """
    A class for rendering and managing the 2048 game board using Matplotlib.

    Methods
    -------
    show_image(board: np.ndarray)
        Update the display with a board matrix, top row first.
    show_game(game: Game)
        Update the display and the window title with the state of a game.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.title = title
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up one subplot per cell of the board, filled row by row from the top-left corner.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_xticks([])
        self.axe.set_yticks([])

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        """Set the closed flag when the window is closed."""
        self.closed = True

    def show_image(self, board: ndarray):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            Board matrix to display, first row at the top of the window.
        """
        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(self.COLORS.get(value, "#3C3A32"))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def show_game(self, game: Game):
        """
        Redraw ``game``. Matches the `Listener` signature so it can be passed to `Game.add_listener`.
        """
        status = " - game over" if game.game_over() else ""
        self.fig.canvas.manager.set_window_title(f"{self.title} - score {game.score} (max: {game.max_score}){status}")
        self.show_image(game.board.to_display())

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler, called whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window and set the closed flag."""
        plt.close(self.fig)
        self.closed = True
