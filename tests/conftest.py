"""
Pytest configuration and fixtures for test suite.
"""

import os
from typing import List

import pytest

# Set test environment variables before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_BASE_URL"] = "http://testserver"
os.environ["LOG_FORMAT"] = "console"
os.environ["LOG_LEVEL"] = "warning"

import httpx
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from my_todo.api.dependencies import get_db
from my_todo.core.deps import get_todo_api_client
from my_todo.main import app
from my_todo.models.database import create_tables
from my_todo.models.domain.label import Label, NewLabelPayload
from my_todo.models.domain.todo import NewTodoPayload, Todo, UpdateTodoPayload
from my_todo.services.todo_client import TodoApiClient
from my_todo.web.routes import reset_todo_app


@pytest.fixture
def engine():
    """Fresh in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client backed by the test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    reset_todo_app()
    yield TestClient(app)
    app.dependency_overrides.clear()
    reset_todo_app()


@pytest_asyncio.fixture
async def api_client(client):
    """TodoApiClient talking to the REST API in-process."""
    api_client = TodoApiClient(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=app),
    )
    yield api_client
    await api_client.close()


@pytest_asyncio.fixture
async def ui_client(client):
    """
    Test client for the browser UI: the UI's API client is routed back
    into the same app, so a UI action goes through the real REST API.
    """
    api_client = TodoApiClient(
        base_url="http://testserver",
        transport=httpx.ASGITransport(app=app),
    )

    async def override_get_todo_api_client():
        yield api_client

    app.dependency_overrides[get_todo_api_client] = override_get_todo_api_client
    yield client
    await api_client.close()


class FakeApiClient:
    """
    In-memory stand-in for TodoApiClient that records every call.

    `calls` holds (method_name, argument) tuples in call order.
    """

    def __init__(self, todos: List[Todo] | None = None, labels: List[Label] | None = None):
        self.todos = list(todos or [])
        self.labels = list(labels or [])
        self.calls = []
        self._next_id = 100

    def calls_to(self, name: str) -> list:
        return [arg for called, arg in self.calls if called == name]

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    async def get_todos(self) -> List[Todo]:
        self.calls.append(("get_todos", None))
        return list(self.todos)

    async def add_todo(self, payload: NewTodoPayload) -> Todo:
        self.calls.append(("add_todo", payload))
        labels = [label for label in self.labels if label.id in payload.labels]
        todo = Todo(id=self._new_id(), text=payload.text, completed=False, labels=labels)
        self.todos.insert(0, todo)
        return todo

    async def update_todo(self, payload: UpdateTodoPayload) -> Todo:
        self.calls.append(("update_todo", payload))
        index = next(i for i, todo in enumerate(self.todos) if todo.id == payload.id)
        changes = payload.changes()
        if "labels" in changes:
            changes["labels"] = [label for label in self.labels if label.id in changes["labels"]]
        self.todos[index] = self.todos[index].model_copy(update=changes)
        return self.todos[index]

    async def delete_todo(self, todo_id: int) -> None:
        self.calls.append(("delete_todo", todo_id))
        self.todos = [todo for todo in self.todos if todo.id != todo_id]

    async def get_labels(self) -> List[Label]:
        self.calls.append(("get_labels", None))
        return list(self.labels)

    async def add_label(self, payload: NewLabelPayload) -> Label:
        self.calls.append(("add_label", payload))
        label = Label(id=self._new_id(), name=payload.name)
        self.labels.append(label)
        return label

    async def delete_label(self, label_id: int) -> None:
        self.calls.append(("delete_label", label_id))
        self.labels = [label for label in self.labels if label.id != label_id]


@pytest.fixture
def sample_labels():
    return [Label(id=1, name="work"), Label(id=2, name="home"), Label(id=3, name="urgent")]


@pytest.fixture
def sample_todos(sample_labels):
    work, home, urgent = sample_labels
    return [
        Todo(id=3, text="Pay rent", completed=False, labels=[home, urgent]),
        Todo(id=2, text="Write report", completed=True, labels=[work]),
        Todo(id=1, text="Call mom", completed=False, labels=[]),
    ]


@pytest.fixture
def fake_api(sample_todos, sample_labels):
    return FakeApiClient(todos=sample_todos, labels=sample_labels)
