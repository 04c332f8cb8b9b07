from binairocamp.bootcamps.binairo import Grid, ValidationOutcome, validate

from conftest import CANONICAL_4X4


def test_canonical_grid_is_valid():
    assert validate(Grid.from_values(CANONICAL_4X4)) is ValidationOutcome.VALID


def test_any_empty_cell_is_incomplete():
    values = [row[:] for row in CANONICAL_4X4]
    values[3][3] = None
    assert validate(Grid.from_values(values)) is ValidationOutcome.INCOMPLETE


def test_incomplete_wins_over_violations():
    values = [[1, 1, 1, None], [0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0]]
    assert validate(Grid.from_values(values)) is ValidationOutcome.INCOMPLETE


def test_unbalanced_grid_is_invalid():
    values = [
        [0, 1, 0, 1],
        [0, 1, 0, 1],
        [1, 0, 1, 0],
        [0, 1, 1, 0],
    ]
    assert validate(Grid.from_values(values)) is ValidationOutcome.INVALID


def test_three_in_a_row_is_invalid():
    values = [
        [0, 0, 0, 1, 1, 1],
        [1, 1, 0, 1, 0, 0],
        [0, 0, 1, 0, 1, 1],
        [1, 1, 0, 0, 1, 0],
        [0, 1, 1, 0, 0, 1],
        [1, 0, 1, 1, 0, 0],
    ]
    assert validate(Grid.from_values(values)) is ValidationOutcome.INVALID


def test_does_not_mutate():
    grid = Grid.from_values(CANONICAL_4X4)
    validate(grid)
    assert grid.values() == CANONICAL_4X4


def test_outcome_values_are_strings():
    assert [o.value for o in ValidationOutcome] == ["valid", "invalid", "incomplete"]
