#!/usr/bin/env python3
"""
Binairo 谜题服务器模块

提供：
- BinairoPuzzleServer：htmx 页面接口（/generate、/solve、/validate、/toggleCell）与 JSON API
- 命令行：serve / generate / solve / validate 四种模式

使用示例：
```python
from binairocamp.utils.puzzle_server import BinairoPuzzleServer, load_server_config

server = BinairoPuzzleServer(load_server_config("config/server.yaml"))
server.run()
```

命令行使用：
```bash
python -m binairocamp.utils.puzzle_server --mode serve --config_yaml_path config/server.yaml
```
"""

from .server import BinairoPuzzleServer
from .models import ServerConfig, GenerateInput, ToggleInput, GridInput
from .utils import load_server_config, is_port_available

__all__ = [
    "BinairoPuzzleServer",
    "ServerConfig",
    "GenerateInput",
    "ToggleInput",
    "GridInput",
    "load_server_config",
    "is_port_available",
]
