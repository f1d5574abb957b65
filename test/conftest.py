import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.service.todo_service import TodoStore


@pytest.fixture()
def app():
    """每个测试一个新的应用，内存数据互不影响"""
    return create_app()


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def store():
    return TodoStore()
