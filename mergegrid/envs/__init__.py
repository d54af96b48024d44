# -*- coding: utf-8 -*-
"""
Game controller of the merge puzzle.

This module provides the `MergeGame` class, which owns the board and drives the turn sequence of the game.
"""

from .game import GameState, MergeGame

__all__ = ["GameState", "MergeGame"]
