"""
持久化会话模块
基于连接池的会话工厂、事务边界和 create-drop 表结构策略
"""

from contextlib import contextmanager
from typing import Generator

from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, Session

from app.db.database import EmbeddedDatabase

# 注册 users 表到 SQLModel.metadata
from app.models.user import User  # noqa: F401


class SessionProvider:
    """
    会话提供者

    进程内唯一实例，但每个工作单元都从连接池单独获取会话，
    结束时提交或回滚，并确定地归还连接
    """

    def __init__(self, database: EmbeddedDatabase):
        self.database = database
        self.session_factory = sessionmaker(
            bind=database.engine,
            class_=Session,
            expire_on_commit=False
        )

    def create_schema(self) -> None:
        """先删除再创建所有表（create-drop 策略，不做迁移）"""
        engine = self.database.engine
        SQLModel.metadata.drop_all(engine)
        SQLModel.metadata.create_all(engine)
        print(f"[SessionProvider] 表结构已创建: {', '.join(SQLModel.metadata.tables)}")

    def drop_schema(self) -> None:
        """删除所有表"""
        SQLModel.metadata.drop_all(self.database.engine)
        print("[SessionProvider] 表结构已删除")

    @contextmanager
    def transaction(self) -> Generator[Session, None, None]:
        """
        在一个事务中执行工作单元

        正常结束时提交；出现异常时回滚并继续抛出；无论如何都关闭会话
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def session_scope(self) -> Generator[Session, None, None]:
        """
        请求级会话

        以生成器形式提供，供 FastAPI 依赖注入使用
        """
        with self.transaction() as session:
            yield session
