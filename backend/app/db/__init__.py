"""
数据库模块
提供嵌入式数据库、会话管理和初始化功能
"""

from .database import EmbeddedDatabase, get_database_url
from .session import SessionProvider
from .init_db import init_db, create_tables, create_default_users

__all__ = [
    "EmbeddedDatabase",
    "get_database_url",
    "SessionProvider",
    "init_db",
    "create_tables",
    "create_default_users"
]
