from fastapi import Request

from app.service.todo_service import TodoStore


def get_store(request: Request) -> TodoStore:
    # 应用启动时创建的唯一实例，挂在 app.state 上
    return request.app.state.store
