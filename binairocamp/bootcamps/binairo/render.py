import json

from PIL import Image, ImageDraw, ImageFont

from .grid import Cell, Grid


def render_cell_html(cell: Cell, row: int, col: int, grid_size: int) -> str:
    """Render one cell as an input; fixed cells are read-only, others post to /toggleCell"""
    value = "" if cell.value is None else str(cell.value)
    parts = ['<div class="grid-cell">']
    parts.append(f'<input type="text" name="cell-{row}-{col}" value="{value}"')

    if cell.fixed:
        parts.append(' readonly="true"')
    else:
        hx_vals = json.dumps({"row": row, "col": col, "gridSize": str(grid_size), "value": value})
        parts.append(f" hx-post=\"/toggleCell\" hx-trigger=\"click\" hx-vals='{hx_vals}' hx-target=\"closest .grid-cell\" hx-swap=\"outerHTML\"")

    parts.append(' maxlength="1" />')
    if cell.fixed:
        parts.append(f'<input type="hidden" name="fixed-{row}-{col}" value="1" />')
    parts.append('</div>')
    return ''.join(parts)


def render_grid_html(grid: Grid) -> str:
    size = grid.size
    parts = [
        f'<div id="grid-container" class="grid-container" '
        f'style="grid-template-columns: repeat({size}, 1fr);">'
    ]
    for i, j in grid.coordinates():
        parts.append(render_cell_html(grid.cells[i][j], i, j, size))
    parts.append('</div>')
    return ''.join(parts)


INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Binairo</title>
  <script src="https://unpkg.com/htmx.org@1.9.12"></script>
  <script src="https://unpkg.com/htmx.org@1.9.12/dist/ext/json-enc.js"></script>
  <style>
    .grid-container { display: grid; gap: 2px; width: max-content; margin: 1em 0; }
    .grid-cell input { width: 2em; height: 2em; text-align: center; font-size: 1.2em; cursor: pointer; }
    .grid-cell input[readonly] { background: #e8e8f0; font-weight: bold; cursor: default; }
  </style>
</head>
<body hx-ext="json-enc">
  <h1>Binairo</h1>
  <form id="puzzle-form">
    <label>Grid size <input type="number" name="gridSize" value="6" min="2" step="2"></label>
    <button hx-post="/generate" hx-target="#grid">Generate</button>
    <button hx-post="/solve" hx-target="#grid">Solve</button>
    <button hx-post="/validate" hx-target="#result">Validate</button>
    <div id="grid"></div>
  </form>
  <div id="result"></div>
</body>
</html>
"""


def render_index_html() -> str:
    return INDEX_HTML


def create_grid_image(grid: Grid, cell_size: int = 60) -> Image.Image:
    """Draw the grid with Pillow: 0 in blue, 1 in red, fixed cells shaded"""
    size = grid.size
    border = 30
    grid_px = size * cell_size
    img_size = grid_px + 2 * border

    background_color = (248, 248, 252)
    fixed_color = (225, 225, 235)
    grid_color = (40, 40, 50)
    zero_color = (41, 128, 185)
    one_color = (192, 57, 43)

    img = Image.new('RGB', (img_size, img_size), color=background_color)
    draw = ImageDraw.Draw(img)

    cell_font = None
    for font in ["DejaVuSans.ttf", "Arial.ttf", "Helvetica.ttf"]:
        try:
            cell_font = ImageFont.truetype(font, int(cell_size * 0.55))
            break
        except IOError:
            continue
    if cell_font is None:
        cell_font = ImageFont.load_default()

    for i, j in grid.coordinates():
        cell = grid.cells[i][j]
        x0 = border + j * cell_size
        y0 = border + i * cell_size
        if cell.fixed:
            draw.rectangle([(x0, y0), (x0 + cell_size, y0 + cell_size)], fill=fixed_color)
        if cell.value is None:
            continue
        digit = str(cell.value)
        left, top, right, bottom = draw.textbbox((0, 0), digit, font=cell_font)
        text_x = x0 + (cell_size - (right - left)) // 2 - left
        text_y = y0 + (cell_size - (bottom - top)) // 2 - top
        draw.text((text_x, text_y), digit,
                  fill=zero_color if cell.value == 0 else one_color, font=cell_font)

    for k in range(size + 1):
        line_width = 3 if k in (0, size) else 1
        offset = border + k * cell_size
        draw.line([(border, offset), (border + grid_px, offset)], fill=grid_color, width=line_width)
        draw.line([(offset, border), (offset, border + grid_px)], fill=grid_color, width=line_width)

    return img
