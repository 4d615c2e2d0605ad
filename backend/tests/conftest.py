"""
Pytest 测试配置
提供独立的内存数据库、会话、Repository 和 HTTP 客户端等测试基础设施
"""

import sys
import uuid
from pathlib import Path
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

# 添加项目根目录到 sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import Settings
from app.db.database import EmbeddedDatabase
from app.db.session import SessionProvider
from app.main import create_app
from app.models.user import User
from app.repositories.user_repository import UserRepository


# ==================== 数据库 Fixtures ====================

@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """
    测试用配置
    每个测试使用唯一的数据库名称，互不干扰
    """
    return Settings(database_name=f"test_{uuid.uuid4().hex}", show_sql=False)


@pytest.fixture(scope="function")
def test_database(test_settings: Settings) -> Generator[EmbeddedDatabase, None, None]:
    """
    创建测试用的嵌入式数据库
    测试结束后关闭，数据随之销毁
    """
    database = EmbeddedDatabase(test_settings.database_name).build()

    yield database

    database.shutdown()


@pytest.fixture(scope="function")
def session_provider(test_database: EmbeddedDatabase) -> SessionProvider:
    """
    创建会话提供者并建好表结构
    """
    provider = SessionProvider(test_database)
    provider.create_schema()
    return provider


@pytest.fixture(scope="function")
def test_db_session(session_provider: SessionProvider) -> Generator[Session, None, None]:
    """
    创建测试用的数据库会话
    """
    with session_provider.transaction() as session:
        yield session


# ==================== 测试数据 Fixtures ====================

@pytest.fixture(scope="function")
def test_users(test_db_session: Session) -> List[User]:
    """
    创建测试用户 Alice 和 Bob
    """
    users = [User(name="Alice"), User(name="Bob")]
    for user in users:
        test_db_session.add(user)
    test_db_session.commit()
    for user in users:
        test_db_session.refresh(user)
    return users


# ==================== Repository Fixtures ====================

@pytest.fixture(scope="function")
def user_repository(test_db_session: Session) -> UserRepository:
    """
    创建 UserRepository 实例
    """
    return UserRepository(test_db_session)


# ==================== HTTP Fixtures ====================

@pytest.fixture(scope="function")
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """
    启动完整应用（种子数据 Alice）
    退出时触发 lifespan 关闭，删除表结构并销毁数据库
    """
    app = create_app(test_settings, seed_users=["Alice"])
    with TestClient(app) as test_client:
        yield test_client


# ==================== Pytest 配置 ====================

def pytest_configure(config):
    """
    Pytest 初始化配置
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
