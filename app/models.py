from typing import Optional

from pydantic import BaseModel


class Todo(BaseModel):
    """存储在内存中的待办记录，url 不保存，序列化时再计算"""

    id: int
    title: str = ""
    completed: bool = False
    order: Optional[int] = None
