"""
应用配置模块
所有配置都在代码中给出默认值，不读取命令行参数或环境变量
"""

from typing import Tuple

from pydantic import BaseModel

# HTTP 监听端口
PORT = 8080

HOST = "0.0.0.0"

# 嵌入式数据库的逻辑名称
DATABASE_NAME = "sample"

# 是否把生成的 SQL 输出到诊断日志
SHOW_SQL = True

# 启动时写入的默认用户（默认为空）
DEFAULT_SEED_USERS: Tuple[str, ...] = ()


class Settings(BaseModel):
    """运行时配置，默认值取自模块常量"""

    port: int = PORT
    host: str = HOST
    database_name: str = DATABASE_NAME
    show_sql: bool = SHOW_SQL
