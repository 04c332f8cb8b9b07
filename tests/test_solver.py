import pytest

from binairocamp.bootcamps.binairo import Grid, solve, validate, ValidationOutcome
from binairocamp.src.errors import SearchBudgetExceeded

from conftest import CANONICAL_4X4, assert_solved


def test_empty_4x4_yields_canonical_solution():
    grid = solve(Grid.empty(4))
    assert grid.values() == CANONICAL_4X4


def test_empty_2x2():
    assert solve(Grid.empty(2)).values() == [[0, 1], [1, 0]]


def test_solve_returns_same_object():
    grid = Grid.empty(4)
    assert solve(grid) is grid


@pytest.mark.parametrize("size", [2, 4, 6, 8])
def test_solutions_are_balanced_and_run_free(size):
    grid = solve(Grid.empty(size))
    assert grid.is_complete()
    assert_solved(grid.values())


@pytest.mark.parametrize("size", [4, 6, 8])
def test_solver_is_deterministic(size):
    assert solve(Grid.empty(size)).values() == solve(Grid.empty(size)).values()


@pytest.mark.parametrize("size", [4, 6, 8])
def test_solved_empty_grid_validates(size):
    assert validate(solve(Grid.empty(size))) is ValidationOutcome.VALID


def test_prefilled_cells_are_kept():
    grid = Grid.from_values([
        [1, None, None, None],
        [None, None, None, None],
        [None, None, None, None],
        [None, None, None, 1],
    ])
    solve(grid)
    assert grid.is_complete()
    assert grid.get(0, 0) == 1
    assert grid.get(3, 3) == 1
    assert_solved(grid.values())


def test_unsolvable_grid_is_left_as_given():
    grid = Grid.from_values([[0, None], [None, 1]])
    solve(grid)
    assert not grid.is_complete()
    assert grid.values() == [[0, None], [None, 1]]


@pytest.mark.parametrize("size", [1, 3, 5])
def test_odd_sizes_have_no_solution(size):
    grid = solve(Grid.empty(size))
    assert grid.values() == [[None] * size for _ in range(size)]


def test_step_budget_restores_grid():
    grid = Grid.from_values([[1, None, None, None]] + [[None] * 4 for _ in range(3)])
    with pytest.raises(SearchBudgetExceeded) as exc_info:
        solve(grid, max_steps=3)
    assert exc_info.value.steps == 3
    assert grid.get(0, 0) == 1
    assert grid.filled_count() == 1


def test_generous_budget_does_not_interfere():
    assert solve(Grid.empty(4), max_steps=10_000).values() == CANONICAL_4X4
