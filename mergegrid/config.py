# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass

from mergegrid.core.gameboard import START_VALUE

DEFAULT_SIZE = 4


@dataclass
class GameConfiguration:
    """
    Tunables of a game.

    Attributes
    ----------
    size : int
        Board size used when a reset does not name one.
    start_value : int
        Value of every spawned tile.
    reset_sizes : tuple[int, ...]
        Sizes offered as reset commands to the player.
    spawn_on_noop : bool
        Whether a move that changes no cell still spawns a tile.
    block_after_game_over : bool
        Whether moves are ignored once the game is over.
    """

    size: int = DEFAULT_SIZE
    start_value: int = START_VALUE
    reset_sizes: tuple[int, ...] = (4, 5)
    spawn_on_noop: bool = True
    block_after_game_over: bool = False

    def __post_init__(self):
        for size in (self.size, *self.reset_sizes):
            if isinstance(size, bool) or not isinstance(size, int) or size < 1:
                raise ValueError(f"Board size must be a positive integer, got {size!r}")
        if self.start_value < 2 or self.start_value & (self.start_value - 1):
            raise ValueError(f"Start value must be a power of two >= 2, got {self.start_value!r}")
