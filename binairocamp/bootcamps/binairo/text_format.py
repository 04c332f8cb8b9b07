from typing import List, Optional

from binairocamp.src.errors import InvalidCellValue, InvalidSize

from .grid import Grid

EMPTY_TOKEN = "_"


def format_grid(grid: Grid) -> str:
    """Format the grid as rows of space separated 0/1/_ tokens"""
    return '\n'.join(
        ' '.join(EMPTY_TOKEN if value is None else str(value) for value in row)
        for row in grid.values()
    )


def parse_grid_text(text: str) -> Grid:
    """
    Parse the format written by format_grid.

    Blank lines are ignored. ``_`` (or ``.``) marks an empty cell.

    Raises:
        InvalidCellValue: a token other than 0, 1, _ or .
        InvalidSize: no rows, or rows of different length than the row count
    """
    rows: List[List[Optional[int]]] = []
    for line_no, line in enumerate(text.splitlines(), 1):
        tokens = line.split()
        if not tokens:
            continue
        row = []
        for token in tokens:
            if token in (EMPTY_TOKEN, "."):
                row.append(None)
            elif token in ("0", "1"):
                row.append(int(token))
            else:
                raise InvalidCellValue(f"Invalid cell value {token!r} on line {line_no}")
        rows.append(row)

    if not rows:
        raise InvalidSize("Invalid grid size: 0")
    if any(len(row) != len(rows) for row in rows):
        raise InvalidSize(f"Grid text is not square: {len(rows)} rows of lengths {[len(r) for r in rows]}")
    return Grid.from_values(rows)


def format_question_language(grid: Grid) -> str:
    """Rules plus a row-by-row listing of the current state"""
    size = grid.size
    question_language = f"""
Please examine the grid carefully. The grid shows a Binairo puzzle with 0s and 1s. Empty cells need to be filled.

## Rules:
1. Fill the grid with 0s and 1s
2. Each row and column must contain exactly {size//2} 0s and {size//2} 1s
3. No three consecutive identical digits in any row or column
### Current Game State (text representation):
"""
    for i, row in enumerate(grid.values(), 1):
        row_text = ' '.join([EMPTY_TOKEN if cell is None else str(cell) for cell in row])
        question_language += f"Row {i}: {row_text}\n"

    filled = grid.filled_count()
    question_language += f"""
### Game State Explanation:
- Grid dimensions: {size} rows × {size} columns
- Total cells: {size * size}
- Filled cells: {filled}
- Empty cells: {size * size - filled}

### Output Format:
Your answer must be formatted as a grid of 0s and 1s separated by spaces, with rows separated by newlines.
"""
    return question_language
