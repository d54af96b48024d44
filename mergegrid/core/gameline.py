"""
Merge engine for a single line (row or column) of the puzzle.
"""

from numpy import asarray, full, ndarray

# ##: Value stored in a cell holding no tile.
EMPTY_CELL = 0


def merge_line(line: ndarray, toward_start: bool = False) -> ndarray:
    """
    Slide the tiles of a line toward one end and merge adjacent equal pairs.

    Parameters
    ----------
    line : ndarray
        A 1D array of cell values, ``EMPTY_CELL`` for empty cells.
    toward_start : bool, optional
        If True tiles flow toward index 0, otherwise toward the last index (default is False).

    Returns
    -------
    ndarray
        A new line of the same length and dtype. The input is left untouched.

    Notes
    -----
    - The line is read from the wall opposite to the flow end, and the resulting tiles are packed against
      the flow end.
    - A tile produced by a merge is never merged again in the same pass: ``[2, 2, 2, 2]`` gives
      ``[0, 0, 4, 4]`` and ``[2, 2, 4, 0]`` gives ``[0, 0, 4, 4]``.
    - The sum of the values is preserved.

    Example
    -------
    >>> import numpy as np
    >>> merge_line(np.array([4, 0, 2, 2]), toward_start=True)
    array([4, 4, 0, 0])
    """
    line = asarray(line)
    values = line[::-1] if toward_start else line

    # ##: Fold the non-empty values, each slot merging at most once.
    merged: list[int] = []
    fused: list[bool] = []
    for value in values[values != EMPTY_CELL].tolist():
        if merged and not fused[-1] and merged[-1] == value:
            merged[-1] *= 2
            fused[-1] = True
        else:
            merged.append(value)
            fused.append(False)

    # ##: Pad on the low-index side, tiles rest against the end.
    result = full(len(line), EMPTY_CELL, dtype=line.dtype)
    if merged:
        result[len(line) - len(merged) :] = merged

    return result[::-1].copy() if toward_start else result
