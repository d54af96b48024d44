"""Board controller of the merge puzzle."""

import logging
from enum import Enum

from numpy import array_equal, ndarray
from numpy.random import Generator, default_rng

from mergegrid.config import GameConfiguration
from mergegrid.core.gameboard import empty_board, empty_cells, slide_and_merge, spawn_tile
from mergegrid.core.gamemove import Direction

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Lifecycle of a game."""

    EMPTY = "empty"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class MergeGame:
    """
    Merge puzzle controller.

    This class owns the board of the game, applies moves to it, spawns new tiles and tracks whether the
    game is over. The board it exposes is a copy: callers render it, they never write it back.
    """

    def __init__(
        self,
        size: int | None = None,
        config: GameConfiguration | None = None,
        seed: int | None = None,
        generator: Generator | None = None,
    ):
        """
        Initialize the game and spawn its first tile.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is the configured size).
        config : GameConfiguration, optional
            Game tunables (default is ``GameConfiguration()``).
        seed : int, optional
            Seed of the random number generator used to spawn tiles.
        generator : Generator, optional
            Random number generator used to spawn tiles. Takes precedence over ``seed``.
        """
        self.config = config if config is not None else GameConfiguration()
        self._generator = generator if generator is not None else default_rng(seed)
        self._board: ndarray = empty_board(self.config.size)
        self.size = self.config.size
        self.state = GameState.EMPTY
        self.last_move_changed = False

        self.reset(size)

    @property
    def board(self) -> ndarray:
        """
        Get the current state of the game board.

        Returns
        -------
        ndarray
            A copy of the board as a 2D numpy array, ``0`` for empty cells.
        """
        return self._board.copy()

    @property
    def is_finished(self) -> bool:
        """True once a spawn found no empty cell."""
        return self.state is GameState.GAME_OVER

    def reset(self, size: int | None = None, seed: int | None = None) -> ndarray:
        """
        Replace the board with an empty one and spawn a tile.

        Parameters
        ----------
        size : int, optional
            The size of the new board (default is the configured size).
        seed : int, optional
            If given, reseed the random number generator before spawning.

        Returns
        -------
        ndarray
            The new game board.

        Raises
        ------
        ValueError
            If size is not a positive integer.
        """
        size = self.config.size if size is None else size
        self._board = empty_board(size)
        self.size = self._board.shape[0]
        if seed is not None:
            self._generator = default_rng(seed)

        self.state = GameState.EMPTY
        self.last_move_changed = False
        logger.debug("Reset board to %dx%d", self.size, self.size)

        self.spawn()
        return self.board

    def move(self, direction: Direction | str) -> tuple[ndarray, bool]:
        """
        Apply a move to the board, then spawn a tile.

        Parameters
        ----------
        direction : Direction or str
            The move to apply, a ``Direction`` or its name ("up", "down", "left", "right").

        Returns
        -------
        tuple[ndarray, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - Whether the game is over after this move (bool)

        Raises
        ------
        ValueError
            If direction names no move.

        Notes
        -----
        - By default a tile is spawned even if the move changed nothing, and moves keep being applied
          after the game is over. ``GameConfiguration`` switches both behaviours.
        - Without ``spawn_on_noop``, an unchanged full board still goes through spawn so that game over
          is signalled.
        """
        direction = Direction.parse(direction)
        if self.is_finished and self.config.block_after_game_over:
            logger.debug("Ignored move %s, game is over", direction.value)
            return self.board, True

        updated = slide_and_merge(self._board, direction)
        self.last_move_changed = not array_equal(updated, self._board)
        self._board = updated
        logger.debug("Move %s (changed=%s)", direction.value, self.last_move_changed)

        if self.last_move_changed or self.config.spawn_on_noop or len(empty_cells(self._board)) == 0:
            self.spawn()
        return self.board, self.is_finished

    def spawn(self) -> bool:
        """
        Place the start value in one uniformly random empty cell.

        Returns
        -------
        bool
            True if a tile was placed. False if the board is full, in which case the board is left as is
            and the game is over.
        """
        if spawn_tile(self._board, self._generator, value=self.config.start_value):
            self.state = GameState.PLAYING
            return True

        logger.info("Game over")
        self.state = GameState.GAME_OVER
        return False

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(" \t".join(str(value) if value else "." for value in row))
