#!/usr/bin/env python3
"""
Binairo 命令行主入口

支持直接通过 python -m 运行：
python -m binairocamp.utils.puzzle_server --mode serve --port 8080
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
