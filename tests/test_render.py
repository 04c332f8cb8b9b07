import io

from PIL import Image

from binairocamp.bootcamps.binairo import (
    Cell,
    Grid,
    create_grid_image,
    render_cell_html,
    render_grid_html,
    render_index_html,
)


def test_fixed_cell_is_read_only():
    html = render_cell_html(Cell(1, fixed=True), 2, 3, 4)
    assert 'name="cell-2-3" value="1"' in html
    assert 'readonly="true"' in html
    assert "hx-post" not in html


def test_editable_cell_posts_its_state():
    html = render_cell_html(Cell(0), 0, 1, 4)
    assert 'name="cell-0-1" value="0"' in html
    assert 'hx-post="/toggleCell"' in html
    assert '"row": 0, "col": 1, "gridSize": "4", "value": "0"' in html
    assert "readonly" not in html


def test_empty_cell_renders_empty_value():
    html = render_cell_html(Cell(), 1, 1, 4)
    assert 'value=""' in html
    assert html.startswith('<div class="grid-cell">')
    assert html.endswith('maxlength="1" /></div>')


def test_grid_renders_every_cell_in_order():
    grid = Grid.from_values([[0, 1], [None, 0]], [[True, True], [False, False]])
    html = render_grid_html(grid)
    assert 'style="grid-template-columns: repeat(2, 1fr);"' in html
    assert html.count('class="grid-cell"') == 4
    assert html.count('readonly="true"') == 2
    assert html.index("cell-0-1") < html.index("cell-1-0")


def test_index_page_has_actions():
    html = render_index_html()
    for path in ("/generate", "/solve", "/validate"):
        assert f'hx-post="{path}"' in html
    assert 'name="gridSize"' in html


def test_grid_image_size_and_format():
    grid = Grid.from_values([[0, 1], [None, 0]], [[True, False], [False, False]])
    img = create_grid_image(grid, cell_size=40)
    assert img.size == (2 * 40 + 60, 2 * 40 + 60)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    assert Image.open(io.BytesIO(buffer.getvalue())).format == "PNG"


def test_fixed_cell_posts_its_fixed_flag():
    html = render_cell_html(Cell(0, fixed=True), 1, 2, 4)
    assert '<input type="hidden" name="fixed-1-2" value="1" />' in html
    assert "fixed-" not in render_cell_html(Cell(0), 1, 2, 4)
