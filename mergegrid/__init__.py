# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle (2048-style) on a square grid of configurable size.

The package keeps the numeric grid state and its transitions; drawing the board and wiring user input
are left to the caller (see ``mergegrid.utils`` for a matplotlib front end).
"""

from .config import GameConfiguration
from .core import EMPTY_CELL, Direction, merge_line
from .envs import GameState, MergeGame

__all__ = ["EMPTY_CELL", "Direction", "GameConfiguration", "GameState", "MergeGame", "merge_line"]
