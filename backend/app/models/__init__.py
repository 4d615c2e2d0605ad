"""
数据库模型模块
"""

from .user import User, UserBase, UserRead, UserRequest

__all__ = [
    "User",
    "UserBase",
    "UserRead",
    "UserRequest"
]
