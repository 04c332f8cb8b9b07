import logging
import os
from typing import Optional

from binairocamp.src.errors import SearchBudgetExceeded

from .checker import is_valid
from .grid import Grid

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("BINAIRO_LOGGING_LEVEL", "WARN"))

VALUES = (0, 1)


def solve(grid: Grid, max_steps: Optional[int] = None) -> Grid:
    """
    Fill every empty cell of ``grid`` in place by chronological backtracking.

    Empty cells are visited in row-major order and each one tries 0 then 1,
    so the result is fully determined by the starting grid. The search keeps
    an explicit frame per empty cell (the index of the next value to try)
    instead of recursing, so large grids do not hit the recursion limit.

    When no completion exists every cell the search touched is back to empty
    and the grid is returned as it was given; callers detect the failure with
    ``grid.is_complete()``.

    Args:
        grid: the grid to solve; pre-filled cells are never changed
        max_steps: optional cap on checker calls. When it is hit the grid is
            restored and SearchBudgetExceeded is raised.

    Returns:
        Grid: the same grid object
    """
    empties = grid.empty_cells()
    next_try = [0] * len(empties)
    steps = 0
    pos = 0

    while 0 <= pos < len(empties):
        row, col = empties[pos]
        placed = False
        while next_try[pos] < len(VALUES):
            value = VALUES[next_try[pos]]
            next_try[pos] += 1
            steps += 1
            if max_steps is not None and steps > max_steps:
                for i, j in empties:
                    grid.clear(i, j)
                raise SearchBudgetExceeded(
                    f"Search stopped after {max_steps} steps on a {grid.size}x{grid.size} grid",
                    steps=max_steps,
                )
            if is_valid(grid, row, col, value):
                grid.set(row, col, value)
                placed = True
                break

        if placed:
            pos += 1
            continue

        # Both values failed here: reset this frame and undo the previous one.
        next_try[pos] = 0
        pos -= 1
        if pos >= 0:
            grid.clear(*empties[pos])

    if pos < 0:
        logger.info(f"No completion found for {grid.size}x{grid.size} grid after {steps} steps")
    else:
        logger.debug(f"Solved {grid.size}x{grid.size} grid in {steps} steps")
    return grid
