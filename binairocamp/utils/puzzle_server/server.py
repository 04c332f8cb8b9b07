#!/usr/bin/env python3
"""
Binairo 谜题服务器

htmx 前端使用的 HTML 片段接口与 JSON API 共用同一套引擎入口；每个请求独立构建网格，
请求之间不共享任何可变状态。
"""
import io
from typing import Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from binairocamp.bootcamps.binairo import (
    create_grid_image,
    generate_puzzle,
    parse_grid,
    parse_grid_form,
    render_cell_html,
    render_grid_html,
    render_index_html,
    solve_puzzle,
    toggle_cell,
    validate_puzzle,
)
from binairocamp.bootcamps.binairo.grid import Grid
from binairocamp.src.base_server_setup import BaseFastApiServer
from binairocamp.src.errors import (
    BinairoError,
    InvalidCellValue,
    InvalidCoordinate,
    InvalidSize,
    SearchBudgetExceeded,
)

from .models import (
    ApiGenerateInput,
    GenerateInput,
    GridInput,
    GridOutput,
    ServerConfig,
    ToggleInput,
    ValidateOutput,
)


def _error_response(exc: BinairoError) -> PlainTextResponse:
    if isinstance(exc, InvalidSize):
        return PlainTextResponse("Invalid grid size", status_code=400)
    if isinstance(exc, (InvalidCellValue, InvalidCoordinate)):
        return PlainTextResponse("Invalid grid data", status_code=400)
    if isinstance(exc, SearchBudgetExceeded):
        return PlainTextResponse("Search budget exceeded", status_code=422)
    return PlainTextResponse(exc.message, status_code=400)


def _grid_output(grid: Grid) -> GridOutput:
    return GridOutput(size=grid.size, grid=grid.values(), fixed=grid.fixed_mask(),
                      complete=grid.is_complete())


class BinairoPuzzleServer(BaseFastApiServer):
    """Binairo 生成/求解/校验服务器"""

    def __init__(self, config: Optional[ServerConfig] = None):
        self.config = config or ServerConfig()
        super().__init__(self.config.host, self.config.port, title="Binairo Puzzle Server",
                         log_file=self.config.log_file)

    def _setup_routes(self):
        """设置路由

        调用引擎的路由声明为普通 def，由 FastAPI 在线程池中执行。
        """
        config = self.config

        @self.app.exception_handler(BinairoError)
        async def binairo_error_handler(request: Request, exc: BinairoError):
            self._log(f"[ERROR] {request.url.path} 请求被拒绝: {type(exc).__name__}: {exc.message}")
            return _error_response(exc)

        @self.app.get("/", response_class=HTMLResponse, tags=["Page"])
        async def index():
            return render_index_html()

        @self.app.get("/health", tags=["Server"])
        async def health_check():
            """健康检查端点"""
            return {
                "status": "ok",
                "max_grid_size": config.max_grid_size,
                "solver_max_steps": config.solver_max_steps,
            }

        @self.app.post("/generate", response_class=HTMLResponse, tags=["Page"])
        def generate_endpoint(input_data: GenerateInput):
            self._log(f"[DEBUG] generate 输入: gridSize={input_data.grid_size!r} seed={input_data.seed!r}")
            grid = generate_puzzle(input_data.grid_size, seed=input_data.seed, max_size=config.max_grid_size,
                                   max_steps=config.solver_max_steps)
            return render_grid_html(grid)

        @self.app.post("/solve", response_class=HTMLResponse, tags=["Page"])
        def solve_endpoint(input_data: dict):
            grid, size = parse_grid_form(input_data, max_size=config.max_grid_size)
            self._log(f"[DEBUG] solve 输入: {size}x{size}, 已填 {grid.filled_count()} 格")
            solve_puzzle(grid, max_steps=config.solver_max_steps)
            self._log(f"[DEBUG] solve 结果: complete={grid.is_complete()}")
            return render_grid_html(grid)

        @self.app.post("/validate", response_class=PlainTextResponse, tags=["Page"])
        def validate_endpoint(input_data: dict):
            grid, size = parse_grid_form(input_data, max_size=config.max_grid_size)
            outcome = validate_puzzle(grid)
            self._log(f"[DEBUG] validate {size}x{size}: {outcome.value}")
            return outcome.value

        @self.app.post("/toggleCell", response_class=HTMLResponse, tags=["Page"])
        def toggle_cell_endpoint(input_data: ToggleInput):
            cell = toggle_cell(input_data.row, input_data.col, input_data.grid_size,
                               value=input_data.value, fixed=input_data.fixed,
                               max_size=config.max_grid_size)
            return render_cell_html(cell, int(input_data.row), int(input_data.col), int(input_data.grid_size))

        @self.app.post("/api/generate", response_model=GridOutput, tags=["API"])
        def api_generate(input_data: ApiGenerateInput):
            grid = generate_puzzle(input_data.size, seed=input_data.seed, max_size=config.max_grid_size,
                                   max_steps=config.solver_max_steps)
            return _grid_output(grid)

        @self.app.post("/api/solve", tags=["API"])
        def api_solve(input_data: GridInput):
            grid = parse_grid(input_data.grid, fixed=input_data.fixed, max_size=config.max_grid_size)
            solve_puzzle(grid, max_steps=config.solver_max_steps)
            output = _grid_output(grid).model_dump()
            output["solved"] = output["complete"]
            return JSONResponse(output)

        @self.app.post("/api/validate", response_model=ValidateOutput, tags=["API"])
        def api_validate(input_data: GridInput):
            grid = parse_grid(input_data.grid, fixed=input_data.fixed, max_size=config.max_grid_size)
            return ValidateOutput(result=validate_puzzle(grid).value)

        @self.app.post("/image", tags=["API"])
        def image_endpoint(input_data: GridInput):
            grid = parse_grid(input_data.grid, fixed=input_data.fixed, max_size=config.max_grid_size)
            buffer = io.BytesIO()
            create_grid_image(grid).save(buffer, format="PNG")
            self._log(f"[DEBUG] image {grid.size}x{grid.size}: {len(buffer.getvalue())} bytes")
            return Response(content=buffer.getvalue(), media_type="image/png")

        self._log("  - ✅ 路由设置完成")
