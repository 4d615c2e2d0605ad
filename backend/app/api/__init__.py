"""
HTTP 接口模块
"""

from .users import router as users_router

__all__ = [
    "users_router"
]
