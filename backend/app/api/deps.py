"""
请求级依赖

应用级对象（SessionProvider）挂在 app.state 上，
Repository 在每个请求中基于新获取的会话构造
"""

from typing import Generator

from fastapi import Depends, Request
from sqlmodel import Session

from app.db.session import SessionProvider
from app.repositories.user_repository import UserRepository


def get_session(request: Request) -> Generator[Session, None, None]:
    """从连接池获取本次请求的会话，请求结束时提交/回滚并归还"""
    provider: SessionProvider = request.app.state.session_provider
    yield from provider.session_scope()


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return UserRepository(session)
