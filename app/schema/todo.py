from pydantic import BaseModel
from typing import Optional


# 创建 Todo 时的输入，所有字段都可以不传
class TodoCreate(BaseModel):
    title: str = ""
    completed: bool = False
    order: Optional[int] = None


# 更新 Todo 时的输入（PATCH，只修改传入的字段）
class TodoUpdate(BaseModel):
    title: Optional[str] = None
    completed: Optional[bool] = None
    order: Optional[int] = None


# 返回给前端的 Todo 结构
class TodoOut(BaseModel):
    id: int
    title: str
    completed: bool
    order: Optional[int] = None
    url: str
