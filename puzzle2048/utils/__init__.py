# -*- coding: utf-8 -*-
"""
This module provides the `WindowBoard` class for displaying a 2048 game with Matplotlib.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
