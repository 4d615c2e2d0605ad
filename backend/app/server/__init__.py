"""
嵌入式 HTTP 服务器模块
"""

from .embedded import EmbeddedServer, create_temp_dir

__all__ = [
    "EmbeddedServer",
    "create_temp_dir"
]
