"""
嵌入式 HTTP 服务器
在当前进程内用 uvicorn 承载单个 ASGI 应用
"""

import atexit
import shutil
import tempfile
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.config import HOST, PORT
from app.exceptions import ServerStartupError


def create_temp_dir(port: int) -> str:
    """
    创建服务器内部使用的临时工作目录，进程退出时删除

    Args:
        port: 监听端口，作为目录名后缀

    Returns:
        临时目录的绝对路径

    Raises:
        ServerStartupError: 目录无法创建
    """
    try:
        temp_dir = tempfile.mkdtemp(prefix="uvicorn.", suffix=f".{port}")
    except OSError as e:
        raise ServerStartupError(
            f"无法创建临时目录, 系统临时目录为 {tempfile.gettempdir()}"
        ) from e

    atexit.register(shutil.rmtree, temp_dir, ignore_errors=True)
    return temp_dir


class EmbeddedServer:
    """
    嵌入式服务器

    使用示例：
        server = EmbeddedServer(app, port=8080)
        server.serve_forever()  # 阻塞直到 stop() 或收到信号
    """

    def __init__(self, app: FastAPI, port: int = PORT, host: str = HOST):
        self.app = app
        self.port = port
        self.host = host
        self.base_dir: Optional[str] = None
        self._server: Optional[uvicorn.Server] = None

    def start(self) -> uvicorn.Server:
        """准备工作目录和 uvicorn 服务器，尚不开始监听"""
        self.base_dir = create_temp_dir(self.port)
        self.app.state.base_dir = self.base_dir

        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_level="info")
        self._server = uvicorn.Server(config)
        print(f"[EmbeddedServer] 工作目录: {self.base_dir}")
        return self._server

    def serve_forever(self) -> None:
        """开始监听并阻塞当前线程"""
        if self._server is None:
            self.start()
        print(f"[EmbeddedServer] 监听 {self.host}:{self.port}")
        self._server.run()

    def stop(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
