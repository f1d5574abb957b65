from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app import config
from app.deps import get_store
from app.models import Todo
from app.schema.todo import TodoCreate, TodoOut, TodoUpdate
from app.service.todo_service import TodoStore

router = APIRouter(tags=["todos"])


def todo_url(request: Request, todo_id: int) -> str:
    if config.PUBLIC_URL:
        return f"{config.PUBLIC_URL.rstrip('/')}/{todo_id}"
    return str(request.url_for("get_todo", todo_id=todo_id))


def to_out(request: Request, todo: Todo) -> TodoOut:
    return TodoOut(**todo.model_dump(), url=todo_url(request, todo.id))


@router.get("/", response_model=list[TodoOut], response_model_exclude_none=True)
def list_todos(request: Request, store: TodoStore = Depends(get_store)):
    return [to_out(request, todo) for todo in store.list()]


@router.post("/", response_model=TodoOut, response_model_exclude_none=True)
def create_todo(
        request: Request,
        todo_data: Optional[TodoCreate] = None,
        store: TodoStore = Depends(get_store)
):
    # 没有请求体时按 {} 处理
    fields = todo_data.model_dump(exclude_unset=True) if todo_data else {}
    todo = store.create(fields)
    return to_out(request, todo)


@router.delete("/")
def clear_todos(store: TodoStore = Depends(get_store)):
    store.clear()
    return Response(status_code=200)


@router.get("/{todo_id}", response_model=TodoOut, response_model_exclude_none=True)
def get_todo(
        todo_id: int,
        request: Request,
        store: TodoStore = Depends(get_store)
):
    todo = store.get(todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail="待办事项不存在")
    return to_out(request, todo)


@router.patch("/{todo_id}", response_model=TodoOut, response_model_exclude_none=True)
def update_todo(
        todo_id: int,
        request: Request,
        todo_data: Optional[TodoUpdate] = None,
        store: TodoStore = Depends(get_store)
):
    fields = todo_data.model_dump(exclude_unset=True) if todo_data else {}
    todo = store.update(todo_id, fields)
    if todo is None:
        raise HTTPException(status_code=404, detail="待办事项不存在")
    return to_out(request, todo)


@router.delete("/{todo_id}")
def delete_todo(todo_id: int, store: TodoStore = Depends(get_store)):
    if not store.delete(todo_id):
        raise HTTPException(status_code=404, detail="待办事项不存在")
    return Response(status_code=200)
