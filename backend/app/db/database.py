"""
嵌入式数据库模块
在进程内创建一个按逻辑名称标识的内存 SQLite 数据库
"""

from typing import Optional

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool
from sqlmodel import create_engine

from app.config import DATABASE_NAME
from app.exceptions import DatabaseStartupError


def get_database_url(name: str) -> str:
    """
    获取数据库连接 URL
    使用共享缓存的内存数据库，同名的连接看到同一个数据库，不落盘
    """
    return f"sqlite:///file:{name}?mode=memory&cache=shared&uri=true"


class EmbeddedDatabase:
    """
    进程内的嵌入式数据库

    build() 之后持有一条保活连接，直到 shutdown()：
    共享缓存内存库在最后一条连接关闭时会被销毁
    """

    def __init__(self, name: str = DATABASE_NAME, echo: bool = False):
        """
        Args:
            name: 数据库逻辑名称
            echo: 是否把生成的 SQL 输出到 sqlalchemy.engine 日志
        """
        self.name = name
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._keeper: Optional[Connection] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError(f"数据库 '{self.name}' 尚未初始化，请先调用 build()")
        return self._engine

    @property
    def is_running(self) -> bool:
        return self._keeper is not None

    def build(self) -> "EmbeddedDatabase":
        """
        创建引擎并打开保活连接

        Returns:
            self，便于链式调用

        Raises:
            DatabaseStartupError: 嵌入式引擎初始化失败
        """
        if self.is_running:
            return self

        url = get_database_url(self.name)
        try:
            self._engine = create_engine(
                url,
                echo=self.echo,
                poolclass=QueuePool,  # mode=memory 时默认是 SingletonThreadPool
                connect_args={"check_same_thread": False}  # 连接会在请求线程间复用
            )
            self._keeper = self._engine.connect()
        except SQLAlchemyError as e:
            self._engine = None
            raise DatabaseStartupError(f"无法初始化嵌入式数据库 '{self.name}': {e}") from e

        print(f"[EmbeddedDatabase] 数据库 '{self.name}' 已启动")
        return self

    def shutdown(self) -> None:
        """关闭保活连接并释放连接池，数据库及其所有数据随之销毁"""
        if self._keeper is not None:
            self._keeper.close()
            self._keeper = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            print(f"[EmbeddedDatabase] 数据库 '{self.name}' 已关闭")
