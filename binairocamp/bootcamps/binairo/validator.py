from enum import Enum

from .checker import is_valid
from .grid import Grid


class ValidationOutcome(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    INCOMPLETE = "incomplete"


def validate(grid: Grid) -> ValidationOutcome:
    """Check a filled grid by re-running the placement check on every cell.

    A grid with any empty cell is INCOMPLETE; constraints are not looked at.
    """
    if not grid.is_complete():
        return ValidationOutcome.INCOMPLETE

    for i, j in grid.coordinates():
        if not is_valid(grid, i, j, grid.get(i, j)):
            return ValidationOutcome.INVALID
    return ValidationOutcome.VALID
