from typing import Iterator, List, Optional, Sequence, Tuple

from binairocamp.src.errors import InvalidCoordinate, InvalidSize


class Cell:
    """A single grid cell. ``value`` is None when the cell is empty."""

    __slots__ = ("value", "fixed")

    def __init__(self, value: Optional[int] = None, fixed: bool = False):
        self.value = value
        self.fixed = fixed

    def is_empty(self) -> bool:
        return self.value is None

    def copy(self) -> "Cell":
        return Cell(self.value, self.fixed)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.value == other.value and self.fixed == other.fixed

    def __repr__(self):
        return f"Cell(value={self.value!r}, fixed={self.fixed!r})"


class Grid:
    """Square n×n matrix of cells, indexed (row, col) in row-major order."""

    def __init__(self, cells: List[List[Cell]]):
        self.size = len(cells)
        if any(len(row) != self.size for row in cells):
            raise InvalidSize(f"Grid must be square, got {self.size} rows of unequal length")
        self.cells = cells

    @classmethod
    def empty(cls, size: int) -> "Grid":
        """Create an all-empty, all-editable grid."""
        if size <= 0:
            raise InvalidSize(f"Invalid grid size: {size}")
        return cls([[Cell() for _ in range(size)] for _ in range(size)])

    @classmethod
    def from_values(cls, rows: Sequence[Sequence[Optional[int]]],
                    fixed: Optional[Sequence[Sequence[bool]]] = None) -> "Grid":
        """Build a grid from rows of None/0/1, optionally with a fixed mask."""
        if not rows:
            raise InvalidSize("Invalid grid size: 0")
        cells = []
        for i, row in enumerate(rows):
            cells.append([
                Cell(value, bool(fixed[i][j]) if fixed is not None else False)
                for j, value in enumerate(row)
            ])
        return cls(cells)

    def check_coordinates(self, row: int, col: int):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise InvalidCoordinate(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid")

    def cell(self, row: int, col: int) -> Cell:
        self.check_coordinates(row, col)
        return self.cells[row][col]

    def get(self, row: int, col: int) -> Optional[int]:
        return self.cell(row, col).value

    def set(self, row: int, col: int, value: Optional[int]):
        self.cell(row, col).value = value

    def clear(self, row: int, col: int):
        self.cell(row, col).value = None

    def row_values(self, row: int) -> List[Optional[int]]:
        return [cell.value for cell in self.cells[row]]

    def col_values(self, col: int) -> List[Optional[int]]:
        return [self.cells[i][col].value for i in range(self.size)]

    def values(self) -> List[List[Optional[int]]]:
        return [self.row_values(i) for i in range(self.size)]

    def fixed_mask(self) -> List[List[bool]]:
        return [[cell.fixed for cell in row] for row in self.cells]

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.size):
            for j in range(self.size):
                yield i, j

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [(i, j) for i, j in self.coordinates() if self.cells[i][j].value is None]

    def filled_count(self) -> int:
        return sum(1 for i, j in self.coordinates() if self.cells[i][j].value is not None)

    def is_complete(self) -> bool:
        return all(cell.value is not None for row in self.cells for cell in row)

    def copy(self) -> "Grid":
        return Grid([[cell.copy() for cell in row] for row in self.cells])

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        return f"Grid(size={self.size}, values={self.values()!r})"
