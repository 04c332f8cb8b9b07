from typing import List, Optional

from .grid import Grid


def _windows_around(line: List[Optional[int]], pos: int):
    """Yield every 3-cell window of ``line`` that contains ``pos``."""
    size = len(line)
    for start in (pos - 2, pos - 1, pos):
        if start >= 0 and start + 3 <= size:
            yield line[start:start + 3]


def _has_run(line: List[Optional[int]], pos: int, value: int) -> bool:
    return any(all(v == value for v in window) for window in _windows_around(line, pos))


def is_valid(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    Check whether placing ``value`` at (row, col) keeps the grid consistent.

    The grid is evaluated as if the value were already there; it is never
    mutated. The placement is rejected when the row or column would hold more
    than size/2 copies of ``value``, or when any three-cell window through
    (row, col) would be three equal values. Empty cells are not counted.
    Only windows touching the new cell are checked: every other window was
    already accepted when its own cells were placed.
    """
    size = grid.size
    grid.check_coordinates(row, col)
    row_values = grid.row_values(row)
    col_values = grid.col_values(col)
    row_values[col] = value
    col_values[row] = value

    half = size // 2
    if row_values.count(value) > half or col_values.count(value) > half:
        return False

    if _has_run(row_values, col, value) or _has_run(col_values, row, value):
        return False

    return True
