"""
Board-wide operations of the puzzle: sliding every line, finding empty cells and spawning tiles.
"""

from numpy import flatnonzero, int64, integer, ndarray, zeros
from numpy.random import Generator

from mergegrid.core.gameline import EMPTY_CELL, merge_line
from mergegrid.core.gamemove import Direction, line_indices

# ##: Value of every spawned tile.
START_VALUE = 2


def _check_board(board: ndarray) -> int:
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise ValueError(f"Board must be a square 2D array, got shape {board.shape}")
    return board.shape[0]


def empty_board(size: int) -> ndarray:
    """
    Create a board of the given size with every cell empty.

    Parameters
    ----------
    size : int
        The size of the square grid. Must be a positive integer.

    Returns
    -------
    ndarray
        A ``(size, size)`` array of ``EMPTY_CELL``.

    Raises
    ------
    ValueError
        If size is not a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, (int, integer)) or size < 1:
        raise ValueError(f"Board size must be a positive integer, got {size!r}")
    return zeros((int(size), int(size)), dtype=int64)


def empty_cells(board: ndarray) -> ndarray:
    """Return the flat (row-major) indices of the empty cells of a board."""
    return flatnonzero(board == EMPTY_CELL)


def slide_and_merge(board: ndarray, direction: Direction) -> ndarray:
    """
    Apply the merge engine to every line of the board for a direction.

    Parameters
    ----------
    board : ndarray
        The game board represented as a square 2D array.
    direction : Direction
        The move to apply.

    Returns
    -------
    ndarray
        The updated board. The input board is not modified.

    Notes
    -----
    - Up and Down merge columns, Left and Right merge rows.
    - Up and Left move tiles toward the low indices, Down and Right toward the high ones.
    """
    size = _check_board(board)
    cells = board.ravel().copy()

    for indices in line_indices(size, direction):
        cells[indices] = merge_line(cells[indices], toward_start=direction.toward_start)

    return cells.reshape(board.shape)


def spawn_tile(board: ndarray, generator: Generator, value: int = START_VALUE) -> bool:
    """
    Place a new tile in one uniformly random empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. **Modified in-place.**
    generator : Generator
        Random number generator used to pick the cell.
    value : int, optional
        Value of the new tile (default is 2).

    Returns
    -------
    bool
        True if a tile was placed, False if the board is full. A full board is left unchanged.
    """
    _check_board(board)
    available = empty_cells(board)
    if len(available) == 0:
        return False

    board.flat[available[generator.integers(len(available))]] = value
    return True
