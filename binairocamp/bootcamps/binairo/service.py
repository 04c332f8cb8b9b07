"""
Request-level entry points.

Each call builds a fresh Grid from caller input and drops it when done, so
nothing is shared between requests. Input problems are raised as
InvalidSize / InvalidCellValue / InvalidCoordinate before any search runs.
"""
import logging
import os
from typing import Any, Dict, Optional, Sequence, Tuple

from binairocamp.src.errors import InvalidCellValue, InvalidCoordinate, InvalidSize

from .generator import generate
from .grid import Cell, Grid
from .solver import solve
from .validator import ValidationOutcome, validate

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("BINAIRO_LOGGING_LEVEL", "WARN"))


def parse_size(raw: Any, max_size: Optional[int] = None) -> int:
    """Parse a grid size from an int or a numeric string"""
    if isinstance(raw, bool):
        raise InvalidSize(f"Invalid grid size: {raw!r}")
    try:
        size = int(str(raw).strip()) if not isinstance(raw, int) else raw
    except (TypeError, ValueError):
        raise InvalidSize(f"Invalid grid size: {raw!r}")
    if size <= 0:
        raise InvalidSize(f"Invalid grid size: {size}")
    if max_size is not None and size > max_size:
        raise InvalidSize(f"Grid size {size} exceeds the maximum of {max_size}")
    return size


def parse_cell_value(raw: Any) -> Optional[int]:
    """None or "" is empty; 0/1 (int or string) are values; anything else is rejected"""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise InvalidCellValue(f"Invalid cell value: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if text == "":
            return None
        try:
            value = int(text)
        except ValueError:
            raise InvalidCellValue(f"Invalid cell value: {raw!r}")
    if value not in (0, 1):
        raise InvalidCellValue(f"Invalid cell value: {raw!r}")
    return value


def parse_grid(rows: Sequence[Sequence[Any]], size: Optional[int] = None,
               fixed: Optional[Sequence[Sequence[bool]]] = None,
               max_size: Optional[int] = None) -> Grid:
    """Build a Grid from a size×size array of optional 0/1 values"""
    if size is None:
        size = len(rows)
    size = parse_size(size, max_size)
    if len(rows) != size or any(len(row) != size for row in rows):
        raise InvalidSize(f"Grid data is not {size}x{size}")
    if fixed is not None and (len(fixed) != size or any(len(row) != size for row in fixed)):
        raise InvalidSize(f"Fixed mask is not {size}x{size}")
    values = [[parse_cell_value(cell) for cell in row] for row in rows]
    return Grid.from_values(values, fixed)


def parse_grid_form(fields: Dict[str, Any], max_size: Optional[int] = None) -> Tuple[Grid, int]:
    """
    Build a Grid from the HTML form encoding: ``gridSize`` plus one
    ``cell-<row>-<col>`` field per cell. Missing cell fields are empty.
    Read-only cells also post ``fixed-<row>-<col>``; those cells keep their
    fixed flag so clues stay read-only after a solve.
    """
    size = parse_size(fields.get("gridSize"), max_size)
    grid = Grid.empty(size)
    for i, j in grid.coordinates():
        cell = grid.cells[i][j]
        cell.value = parse_cell_value(fields.get(f"cell-{i}-{j}"))
        cell.fixed = cell.value is not None and str(fields.get(f"fixed-{i}-{j}", "")).strip().lower() in ("1", "true")
    return grid, size


def generate_puzzle(size: Any, seed: Optional[int] = None, max_size: Optional[int] = None,
                    max_steps: Optional[int] = None) -> Grid:
    size = parse_size(size, max_size)
    grid = generate(size, seed=seed, max_steps=max_steps)
    logger.debug(f"Generated {size}x{size} puzzle with {grid.filled_count()} clues")
    return grid


def solve_puzzle(grid: Grid, max_steps: Optional[int] = None) -> Grid:
    """Solve in place; an unsolvable grid comes back not complete"""
    solve(grid, max_steps=max_steps)
    if not grid.is_complete():
        logger.info(f"Grid of size {grid.size} has no completion")
    return grid


def validate_puzzle(grid: Grid) -> ValidationOutcome:
    return validate(grid)


def next_cell_state(cell: Cell) -> Cell:
    """Cycle empty -> 0 -> 1 -> empty; fixed cells do not change"""
    if cell.fixed:
        return cell.copy()
    if cell.value is None:
        return Cell(0)
    if cell.value == 0:
        return Cell(1)
    return Cell(None)


def toggle_cell(row: Any, col: Any, size: Any, value: Any = None, fixed: bool = False,
                max_size: Optional[int] = None) -> Cell:
    """
    Next state of the cell at (row, col).

    The caller passes the cell's current value and fixed flag, since the
    engine keeps no state between requests.
    """
    size = parse_size(size, max_size)
    try:
        row, col = int(row), int(col)
    except (TypeError, ValueError):
        raise InvalidCoordinate(f"Invalid cell coordinates: ({row!r}, {col!r})")
    if not (0 <= row < size and 0 <= col < size):
        raise InvalidCoordinate(f"Cell ({row}, {col}) is outside a {size}x{size} grid")
    return next_cell_state(Cell(parse_cell_value(value), bool(fixed)))
