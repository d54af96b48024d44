# -*- coding: utf-8 -*-
"""
Play the merge puzzle with the keyboard or the mouse.
"""
import argparse
import logging
from typing import Any

from mergegrid import Direction, GameConfiguration, MergeGame
from mergegrid.utils import direction_from_key, direction_from_swipe, reset_size_from_key
from mergegrid.utils.windows import WindowBoard

logger = logging.getLogger(__name__)


def redraw(window: WindowBoard, game: MergeGame):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    game: MergeGame
        The game whose board is drawn
    """
    window.show_image(game.board)


def reset(game: MergeGame, window: WindowBoard, size: int):
    """
    Reset the game to a board of the given size and redraw it.
    """
    game.reset(size)
    window.fig.suptitle("")
    redraw(window, game)


def step(game: MergeGame, window: WindowBoard, direction: Direction):
    """
    Apply a move to the game and redraw the board.

    Parameters
    ----------
    game: MergeGame
        The game

    window: WindowBoard
        Class to draw the game board

    direction: Direction
        Move to apply
    """
    _, finished = game.move(direction)
    redraw(window, game)
    if finished:
        window.fig.suptitle("Game over")


def key_handler(game: MergeGame, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Arrows move the tiles, the reset sizes start a new board of that size, backspace restarts at the
    current size and escape closes the window.
    """
    logger.debug("Pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(game, window, game.size)
        return None

    size = reset_size_from_key(event.key, game.config.reset_sizes)
    if size is not None:
        reset(game, window, size)
        return None

    direction = direction_from_key(event.key)
    if direction is not None:
        step(game, window, direction)
    return None


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play the merge puzzle.")
    parser.add_argument("--size", type=int, default=4, help="Initial board size.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tile spawning.")
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game_2048 = MergeGame(config=GameConfiguration(size=args.size), seed=args.seed)

    window_board = WindowBoard(title="2048 Game", size=game_2048.size)
    window_board.register_key_handler(lambda event: key_handler(game_2048, window_board, event))
    window_board.register_swipe_handler(
        lambda delta_x, delta_y: step(game_2048, window_board, direction_from_swipe(delta_x, delta_y))
    )

    redraw(window_board, game_2048)

    # Blocking event loop
    window_board.show(block=True)
