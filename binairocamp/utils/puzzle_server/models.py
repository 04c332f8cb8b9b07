#!/usr/bin/env python3
"""
数据模型定义
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ServerConfig(BaseModel):
    """服务器配置（YAML 中的 server 字段）"""
    host: str = "0.0.0.0"
    port: int = 8080
    log_file: Optional[str] = None
    max_grid_size: Optional[int] = Field(default=None, gt=0)
    solver_max_steps: Optional[int] = Field(default=None, gt=0)


class GenerateInput(BaseModel):
    """htmx 生成请求，gridSize 保持原始值以便统一返回 Invalid grid size"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    grid_size: Any = Field(default=None, alias="gridSize")
    seed: Optional[int] = None


class ToggleInput(BaseModel):
    """htmx 单元格切换请求，携带当前单元格状态"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    row: Any = None
    col: Any = None
    grid_size: Any = Field(default=None, alias="gridSize")
    value: Any = None
    fixed: bool = False


class GridInput(BaseModel):
    """JSON API 的网格输入"""
    grid: List[List[Any]]
    fixed: Optional[List[List[bool]]] = None


class ApiGenerateInput(BaseModel):
    size: Any = None
    seed: Optional[int] = None


class GridOutput(BaseModel):
    size: int
    grid: List[List[Optional[int]]]
    fixed: List[List[bool]]
    complete: bool


class ValidateOutput(BaseModel):
    result: str
