"""
用户域模型 - 用户表
系统中唯一的实体
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import SQLModel, Field


class UserBase(SQLModel):
    """用户公共字段"""

    # 显示名称，不要求唯一
    name: str = Field(nullable=False)


class User(UserBase, table=True):
    """
    用户表
    id 由数据库在插入时分配，客户端从不提供
    """
    __tablename__ = "users"

    # 主键
    id: Optional[int] = Field(default=None, primary_key=True)


class UserRead(UserBase):
    """接口返回的用户结构：id 和 name 一一对应"""

    id: int


class UserRequest(BaseModel):
    """
    用户请求结构

    目前没有任何接口消费这个结构，只作为数据形状保留
    """
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    authority_name: Optional[str] = PydanticField(default=None, alias="authorityName")
