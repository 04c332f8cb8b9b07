import pytest

from binairocamp.bootcamps.binairo import Cell, Grid
from binairocamp.src.errors import InvalidCoordinate, InvalidSize


def test_empty_grid_has_no_values_and_no_fixed_cells():
    grid = Grid.empty(4)
    assert grid.size == 4
    assert grid.values() == [[None] * 4 for _ in range(4)]
    assert grid.fixed_mask() == [[False] * 4 for _ in range(4)]
    assert len(grid.empty_cells()) == 16
    assert not grid.is_complete()


@pytest.mark.parametrize("size", [0, -2])
def test_empty_grid_rejects_non_positive_size(size):
    with pytest.raises(InvalidSize):
        Grid.empty(size)


def test_from_values_keeps_fixed_mask(canonical_4x4):
    fixed = [[j == 0 for j in range(4)] for _ in range(4)]
    grid = Grid.from_values(canonical_4x4, fixed)
    assert grid.is_complete()
    assert grid.cell(2, 0) == Cell(1, True)
    assert grid.cell(2, 1) == Cell(1, False)


def test_from_values_rejects_ragged_rows():
    with pytest.raises(InvalidSize):
        Grid.from_values([[0, 1], [1]])


def test_empty_cells_are_row_major():
    grid = Grid.from_values([[0, None], [None, 1]])
    assert grid.empty_cells() == [(0, 1), (1, 0)]
    assert grid.filled_count() == 2


def test_copy_is_independent(canonical_4x4):
    grid = Grid.from_values(canonical_4x4)
    clone = grid.copy()
    clone.clear(0, 0)
    assert grid.get(0, 0) == 0
    assert clone.get(0, 0) is None
    assert grid != clone


def test_out_of_range_coordinates():
    grid = Grid.empty(2)
    with pytest.raises(InvalidCoordinate):
        grid.get(2, 0)
    with pytest.raises(InvalidCoordinate):
        grid.set(0, -1, 1)
