"""
基础 FastAPI 服务器类
"""
from datetime import datetime
from typing import Optional

from fastapi import FastAPI
import uvicorn


class BaseFastApiServer:
    """FastAPI 服务器基类"""

    def __init__(self, host: str = "0.0.0.0", port: int = 8000, title: str = "Server",
                 log_file: Optional[str] = None):
        """
        初始化服务器

        Args:
            host: 服务器主机地址
            port: 服务器端口
            title: FastAPI 应用标题
            log_file: 可选日志文件，日志同时输出到控制台
        """
        self.host = host
        self.port = port
        self.log_file = log_file
        self.app = FastAPI(title=title)
        self._setup_routes()

    def _log(self, message: str):
        """统一的日志记录方法"""
        log_line = f"[{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}] {message}"
        print(log_line)
        if self.log_file:
            try:
                with open(self.log_file, 'a', encoding='utf-8') as f:
                    f.write(log_line + '\n')
            except OSError as e:
                print(f"警告：写入日志文件失败: {e}")

    def _setup_routes(self):
        """设置路由，由子类实现"""
        raise NotImplementedError("Subclasses must implement _setup_routes()")

    def run(self, **kwargs):
        """运行服务器"""
        self._log(f"🚀 服务器启动于 http://{self.host}:{self.port}")
        uvicorn.run(self.app, host=self.host, port=self.port, log_config=None, **kwargs)
