"""
Translate player input (key presses and swipe gestures) into game commands.
"""

from typing import Iterable, Optional

from mergegrid.core.gamemove import Direction

# ##: Arrow keys as named by matplotlib key events.
KEY_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def direction_from_key(key: Optional[str]) -> Optional[Direction]:
    """Return the direction bound to a key, or None for any other key."""
    return KEY_DIRECTIONS.get(key)


def direction_from_swipe(delta_x: float, delta_y: float) -> Direction:
    """
    Classify a swipe gesture by its dominant axis.

    Parameters
    ----------
    delta_x : float
        Horizontal displacement between the start and the end of the gesture.
    delta_y : float
        Vertical displacement, in screen coordinates (growing downward).

    Returns
    -------
    Direction
        LEFT or RIGHT when the horizontal displacement is strictly larger, UP or DOWN otherwise.

    Notes
    -----
    A zero displacement on the selected axis counts as positive (RIGHT or DOWN).
    """
    if abs(delta_x) > abs(delta_y):
        return Direction.LEFT if delta_x < 0 else Direction.RIGHT
    return Direction.UP if delta_y < 0 else Direction.DOWN


def reset_size_from_key(key: Optional[str], sizes: Iterable[int]) -> Optional[int]:
    """Return the board size a key resets to ("4" for a 4x4 board), or None."""
    for size in sizes:
        if key == str(size):
            return size
    return None
