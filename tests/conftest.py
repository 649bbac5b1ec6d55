from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from todo_api.app import create_app
from todo_api.config import Settings
from todo_api.models import Todo
from todo_api.store import InMemoryTaskStore


def make_todo(todo_id=1, name="Buy groceries", days=1, completed=False):
    return Todo(
        id=todo_id,
        name=name,
        due_date=datetime.now(timezone.utc) + timedelta(days=days),
        is_completed=completed,
    )


def todo_payload(todo_id=1, name="Buy groceries", days=1, completed=False):
    due = datetime.now(timezone.utc) + timedelta(days=days)
    return {"id": todo_id, "name": name, "dueDate": due.isoformat(), "isCompleted": completed}


@pytest.fixture
def store():
    return InMemoryTaskStore()


@pytest.fixture
def app(store):
    return create_app(Settings(), store=store)


@pytest.fixture
def client(app):
    return TestClient(app)
