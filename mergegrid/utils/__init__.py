# -*- coding: utf-8 -*-
"""
This module provides the input side of the game front end: mapping key presses and swipe gestures to
commands.

The Matplotlib window lives in ``mergegrid.utils.windows`` and is imported on demand, so the game logic never
pulls in a graphical backend.
"""

from .controls import direction_from_key, direction_from_swipe, reset_size_from_key

__all__ = ["direction_from_key", "direction_from_swipe", "reset_size_from_key"]
