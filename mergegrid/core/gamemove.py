"""
Move directions of the puzzle and the way each one linearizes the board into lines.
"""

from enum import Enum

from numpy import arange, ndarray


class Direction(Enum):
    """
    The four moves of the puzzle.

    Each direction maps to a ``(major, minor, toward_start)`` triple for a board of size N: line ``i``
    begins at flat index ``i * major`` and its ``j``-th cell is at ``i * major + j * minor``.
    ``toward_start`` tells whether tiles flow toward the first cell of the line.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def toward_start(self) -> bool:
        """Whether tiles flow toward the start of each line."""
        return self in (Direction.UP, Direction.LEFT)

    def strides(self, size: int) -> tuple[int, int]:
        """
        Return the ``(major, minor)`` strides of this direction for a board of the given size.

        Up and Down walk columns, Left and Right walk rows.
        """
        if self in (Direction.UP, Direction.DOWN):
            return 1, size
        return size, 1

    @classmethod
    def parse(cls, value: "Direction | str") -> "Direction":
        """
        Convert a direction or its name to a ``Direction``.

        Raises
        ------
        ValueError
            If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown direction: {value!r}")


def line_indices(size: int, direction: Direction) -> list[ndarray]:
    """
    Compute the flat indices of every line addressed by a direction.

    Parameters
    ----------
    size : int
        The size of the square board.
    direction : Direction
        The move direction.

    Returns
    -------
    list[ndarray]
        ``size`` arrays of ``size`` flat (row-major) indices, in the order the merge engine reads them.
    """
    major, minor = direction.strides(size)
    steps = arange(size) * minor
    return [i * major + steps for i in range(size)]
