"""
用户接口
只暴露一个只读端点：GET / 返回全部用户
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_user_repository
from app.models.user import UserRead
from app.repositories.user_repository import UserRepository

router = APIRouter(tags=["users"])


@router.get("/", response_model=List[UserRead])
def list_users(user_repository: UserRepository = Depends(get_user_repository)):
    """
    返回全部用户

    查询失败时异常不做处理，由框架返回 500
    """
    return user_repository.find_all_users()
