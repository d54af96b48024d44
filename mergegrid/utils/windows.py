# -*- coding: utf-8 -*-
"""
Graphical window for the merge puzzle.

This module draws the game board with Matplotlib and forwards keyboard and mouse input to the caller. It only
ever reads the board it is given: the game state lives in the controller.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event, KeyEvent, MouseEvent
from numpy import ndarray

# ##: Tiles from this value up share one style.
LARGEST_STYLED_TILE = 1024

EMPTY_COLOR = "#CCC0B3"
COLORS = {
    2: "#EEE4DA",
    4: "#ECE0C8",
    8: "#ECB280",
    16: "#EC8D53",
    32: "#F57C5F",
    64: "#E95937",
    128: "#F3D96B",
    256: "#F2D04A",
    512: "#E5BF2E",
    LARGEST_STYLED_TILE: "#E2B814",
}


def tile_color(value: int) -> str:
    """Return the face color of a cell holding the given value (0 for empty)."""
    if value == 0:
        return EMPTY_COLOR
    return COLORS.get(min(value, LARGEST_STYLED_TILE), COLORS[LARGEST_STYLED_TILE])


class WindowBoard:
    """
    A class for rendering the puzzle board using Matplotlib.

    Methods
    -------
    show_image(board: np.ndarray)
        Update the display with the given board, resizing the grid if needed.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    register_swipe_handler(swipe_handler: Callable)
        Register a function called with the displacement of each mouse drag.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.
    """

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.fig = plt.figure()
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor("#BBADA0")
        self.size = 0
        self.axes = []
        self.texts = []
        self._press: Optional[tuple[float, float]] = None
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Build one subplot per cell, dropping the previous grid.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.clear()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.05, hspace=0.05)

        self.size = size
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        self.texts = []
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_image(self, board: ndarray):
        """
        Show or update the game board.

        Parameters
        ----------
        board : ndarray
            The current state of the game board to be displayed.
        """
        if board.shape[0] != self.size:
            self._setup_axes(board.shape[0])

        for ax, text, value in zip(self.axes, self.texts, board.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            ax.set_facecolor(tile_color(value))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable[[KeyEvent], None]):
        """Register a function called on every key press in the window."""
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def register_swipe_handler(self, swipe_handler: Callable[[float, float], None]):
        """
        Register a function called with ``(delta_x, delta_y)`` for each mouse drag.

        The displacement is measured in pixels with the vertical axis growing downward, like a touch
        screen, so that an upward drag gives a negative ``delta_y``.
        """

        def on_press(event: MouseEvent):
            self._press = (event.x, event.y)

        def on_release(event: MouseEvent):
            if self._press is None:
                return
            start_x, start_y = self._press
            self._press = None
            swipe_handler(event.x - start_x, start_y - event.y)

        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("button_release_event", on_release)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
