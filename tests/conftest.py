import pytest

from binairocamp.bootcamps.binairo import Grid

CANONICAL_4X4 = [
    [0, 0, 1, 1],
    [0, 0, 1, 1],
    [1, 1, 0, 0],
    [1, 1, 0, 0],
]


def assert_solved(values):
    """Every row and column balanced and free of three-in-a-row."""
    n = len(values)
    lines = [list(row) for row in values] + [[values[i][j] for i in range(n)] for j in range(n)]
    for line in lines:
        assert None not in line
        assert line.count(0) == n // 2
        assert line.count(1) == n // 2
        for k in range(n - 2):
            assert not (line[k] == line[k + 1] == line[k + 2]), line


@pytest.fixture
def canonical_4x4():
    return [row[:] for row in CANONICAL_4X4]


@pytest.fixture
def empty_4x4():
    return Grid.empty(4)
