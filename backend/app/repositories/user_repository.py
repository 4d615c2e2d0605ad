"""
用户管理 Repository
提供 users 表的查询操作
"""

from typing import Any, List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.exceptions import DataAccessError
from app.models.user import User


def _row_to_user(row: Any) -> User:
    """把 (id, name) 结果行映射为 User"""
    user_id, name = row
    return User(id=user_id, name=name)


class UserRepository:
    """
    用户数据访问对象
    封装所有与 users 表相关的数据库操作
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话（由调用方负责事务和关闭）
        """
        self.session = session

    def find_all_users(self) -> List[User]:
        """
        查询全部用户

        不过滤、不分页，顺序由数据库决定

        Returns:
            User 列表，可能为空

        Raises:
            DataAccessError: 查询失败（表不存在、连接断开等）
        """
        statement = select(User.id, User.name)
        try:
            rows = self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise DataAccessError(f"查询用户列表失败: {e}") from e
        return [_row_to_user(row) for row in rows]

    def create(self, name: str) -> User:
        """
        创建新用户，id 由数据库分配

        只刷新到当前事务，提交由调用方完成

        Args:
            name: 用户名称

        Returns:
            带有 id 的 User 对象
        """
        user = User(name=name)
        try:
            self.session.add(user)
            self.session.flush()
            self.session.refresh(user)
        except SQLAlchemyError as e:
            raise DataAccessError(f"创建用户 '{name}' 失败: {e}") from e
        return user
