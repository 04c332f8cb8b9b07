from .checker import is_valid
from .generator import BinairoGenerator, generate
from .grid import Cell, Grid
from .render import create_grid_image, render_cell_html, render_grid_html, render_index_html
from .service import (
    generate_puzzle,
    parse_grid,
    parse_grid_form,
    parse_size,
    solve_puzzle,
    toggle_cell,
    validate_puzzle,
)
from .solver import solve
from .text_format import format_grid, parse_grid_text
from .validator import ValidationOutcome, validate

__all__ = [
    "Cell",
    "Grid",
    "is_valid",
    "solve",
    "generate",
    "BinairoGenerator",
    "validate",
    "ValidationOutcome",
    "render_cell_html",
    "render_grid_html",
    "render_index_html",
    "create_grid_image",
    "format_grid",
    "parse_grid_text",
    "parse_size",
    "parse_grid",
    "parse_grid_form",
    "generate_puzzle",
    "solve_puzzle",
    "validate_puzzle",
    "toggle_cell",
]
