"""
数据库初始化脚本
负责按 create-drop 策略重建表结构并写入默认用户
"""

from typing import List, Sequence

from sqlmodel import Session

from app.config import DEFAULT_SEED_USERS
from app.db.session import SessionProvider
from app.models.user import User
from app.repositories.user_repository import UserRepository


def create_tables(session_provider: SessionProvider) -> None:
    """
    重建所有数据库表
    SQLModel 会根据模型创建表结构，旧表及数据会被丢弃
    """
    session_provider.create_schema()
    print(f"Database tables created successfully in '{session_provider.database.name}'")


def create_default_users(session: Session, names: Sequence[str]) -> List[User]:
    """
    创建默认用户
    每个名称插入一行，名称不要求唯一
    """
    repository = UserRepository(session)
    users = []
    for name in names:
        user = repository.create(name)
        print(f"Created default user '{name}' (ID: {user.id})")
        users.append(user)
    return users


def init_db(session_provider: SessionProvider, seed_users: Sequence[str] = DEFAULT_SEED_USERS) -> None:
    """
    完整的数据库初始化流程
    1. 重建所有表结构
    2. 创建默认用户
    """
    print("\n=== Initializing database ===")

    create_tables(session_provider)

    if seed_users:
        with session_provider.transaction() as session:
            create_default_users(session, seed_users)

    print("=== Database initialization completed ===\n")
