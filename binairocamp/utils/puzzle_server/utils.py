#!/usr/bin/env python3
"""
工具函数
"""

import socket
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .models import ServerConfig


def load_server_config(yaml_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> ServerConfig:
    """
    加载服务器配置

    优先级：overrides（命令行显式参数）> YAML 文件 > 模型默认值

    Args:
        yaml_path: YAML 配置文件路径，顶层需要有 server 字段
        overrides: 需要覆盖的字段，值为 None 的字段会被忽略

    Raises:
        RuntimeError: 文件无法读取、缺少 server 字段或字段校验失败
    """
    values: Dict[str, Any] = {}
    if yaml_path:
        try:
            with open(yaml_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise RuntimeError(f"加载配置文件失败: {e}")

        if not isinstance(config, dict) or 'server' not in config:
            raise RuntimeError("配置文件中没有找到'server'字段")
        values.update(config['server'] or {})

    if overrides:
        values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ServerConfig(**values)
    except ValidationError as e:
        raise RuntimeError(f"配置校验失败: {e}")


def is_port_available(host: str, port: int) -> bool:
    """检查端口是否可用"""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            return sock.connect_ex((host, port)) != 0
    except OSError:
        return False
