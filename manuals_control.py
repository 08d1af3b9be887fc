# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from typing import Any

from puzzle2048 import Game, GameConfiguration, Side
from puzzle2048.utils import WindowBoard

logger = logging.getLogger(__name__)

# ##: Arrow keys reported by matplotlib, mapped to the side they tilt toward.
KEYS = {side.value: side for side in Side}


def reset(game: Game, config: GameConfiguration):
    """
    Start a new game; the window redraws through its listener.

    Parameters
    ----------
    game: Game
        The game being played

    config: GameConfiguration
        Number of starting tiles to place
    """
    game.reset(start_tiles=config.start_tiles)


def step(game: Game, side: Side):
    """
    Tilt the board and add a random tile if anything moved.

    Parameters
    ----------
    game: Game
        The game being played

    side: Side
        Direction of the tilt
    """
    if game.game_over():
        return

    if game.tilt(side):
        game.spawn()
    logger.info("score=%d", game.score)

    if game.game_over():
        logger.info("terminated! (max score: %d)", game.max_score)


def key_handler(game: Game, window: WindowBoard, config: GameConfiguration, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: Game
        The game being played

    window: WindowBoard
        Class to draw the game board

    config: GameConfiguration
        Game settings

    event: Any
        event to handle
    """
    logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(game, config)
        return None

    if event.key in KEYS:
        step(game, KEYS[event.key])
        return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    configuration = GameConfiguration()
    env = Game.from_configuration(configuration)

    window_board = WindowBoard(title=configuration.title, size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, configuration, event))
    env.add_listener(window_board.show_game)

    reset(env, configuration)

    # Blocking event loop
    window_board.show(block=True)
