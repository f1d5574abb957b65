# app/service/todo_service.py
import itertools
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional

from app.models import Todo

logger = logging.getLogger(__name__)

# 客户端可以修改的字段
UPDATABLE_FIELDS = ("title", "completed", "order")

# 允许用 null 清空的字段，其余字段传 null 视为不修改
NULLABLE_FIELDS = ("order",)


class TodoStore:
    """
    内存中的待办列表。

    - 按创建顺序保存，不按 order 排序（order 只是客户端数据，原样保存和返回）
    - id 自增且永不复用，clear() 之后也继续递增
    - 所有操作都在同一把锁里完成，返回的都是副本
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._todos: Dict[int, Todo] = {}

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._todos)

    def create(self, fields: Optional[Mapping[str, Any]] = None) -> Todo:
        values = _pick(fields or {})
        with self._lock:
            todo = Todo(id=next(self._ids), **values)
            self._todos[todo.id] = todo
        logger.info(f"创建待办 id={todo.id} title={todo.title!r}")
        return todo.model_copy()

    def list(self) -> List[Todo]:
        with self._lock:
            return [todo.model_copy() for todo in self._todos.values()]

    def get(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            todo = self._todos.get(todo_id)
            return todo.model_copy() if todo else None

    def update(self, todo_id: int, fields: Mapping[str, Any]) -> Optional[Todo]:
        """只覆盖 fields 里出现的字段，其他字段保持不变；不存在返回 None"""
        changes = _pick(fields)
        with self._lock:
            todo = self._todos.get(todo_id)
            if todo is None:
                return None
            todo = Todo(**{**todo.model_dump(), **changes})
            self._todos[todo_id] = todo
        logger.debug(f"更新待办 id={todo_id} 字段={sorted(changes)}")
        return todo.model_copy()

    def delete(self, todo_id: int) -> bool:
        with self._lock:
            removed = self._todos.pop(todo_id, None)
        if removed is None:
            logger.debug(f"删除待办 id={todo_id}：不存在，忽略")
            return False
        logger.info(f"删除待办 id={todo_id}")
        return True

    def clear(self) -> None:
        with self._lock:
            removed = len(self._todos)
            self._todos.clear()
        logger.info(f"清空待办列表，共删除 {removed} 条")


def _pick(fields: Mapping[str, Any]) -> Dict[str, Any]:
    picked = {}
    for key, value in fields.items():
        if key not in UPDATABLE_FIELDS:
            continue
        if value is None and key not in NULLABLE_FIELDS:
            continue
        picked[key] = value
    return picked
