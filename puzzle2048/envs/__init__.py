# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `Game` class, which holds the board, the score and the terminal flag, and notifies
listeners whenever they change.
"""

from .game import Game, Listener

__all__ = ["Game", "Listener"]
