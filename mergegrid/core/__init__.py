# -*- coding: utf-8 -*-
"""
This module provides the pure game logic of the merge puzzle.

It includes the merge engine applied to a single line of cells, the direction to line mapping, and the
board-wide operations used by the controller: sliding and merging every line, listing empty cells and
spawning a new tile.
"""

from .gameboard import empty_board, empty_cells, slide_and_merge, spawn_tile
from .gameline import EMPTY_CELL, merge_line
from .gamemove import Direction, line_indices

__all__ = [
    "EMPTY_CELL",
    "Direction",
    "empty_board",
    "empty_cells",
    "line_indices",
    "merge_line",
    "slide_and_merge",
    "spawn_tile",
]
