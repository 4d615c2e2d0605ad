"""
应用入口

启动顺序：嵌入式数据库 -> 会话提供者 -> 表结构与默认数据 -> FastAPI 应用 -> 嵌入式服务器
所有对象在这里显式构造，没有基于反射的装配
"""

from contextlib import asynccontextmanager
from typing import Optional, Sequence

from fastapi import FastAPI

from app.api.users import router as users_router
from app.config import DEFAULT_SEED_USERS, Settings
from app.db.database import EmbeddedDatabase
from app.db.init_db import init_db
from app.db.session import SessionProvider
from app.server.embedded import EmbeddedServer


def create_app(settings: Optional[Settings] = None, seed_users: Optional[Sequence[str]] = None) -> FastAPI:
    """
    构造应用，只在进程启动时调用一次

    Args:
        settings: 运行配置，默认使用 Settings()
        seed_users: 启动时写入的用户名称，默认使用 DEFAULT_SEED_USERS

    Returns:
        已注册路由、持有数据库与会话提供者的 FastAPI 应用
    """
    settings = settings or Settings()
    if seed_users is None:
        seed_users = DEFAULT_SEED_USERS

    database = EmbeddedDatabase(settings.database_name, echo=settings.show_sql).build()
    try:
        session_provider = SessionProvider(database)
        init_db(session_provider, seed_users)
    except Exception:
        database.shutdown()
        raise

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # create-drop：关闭时删除表结构并销毁数据库
        session_provider.drop_schema()
        database.shutdown()
        print("[shutdown] 应用已关闭")

    app = FastAPI(title="Embedded User Service", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.session_provider = session_provider
    app.include_router(users_router)
    return app


def main() -> None:
    """进程入口：构造应用并阻塞运行"""
    settings = Settings()
    app = create_app(settings)
    server = EmbeddedServer(app, port=settings.port, host=settings.host)
    server.serve_forever()


if __name__ == "__main__":
    main()
