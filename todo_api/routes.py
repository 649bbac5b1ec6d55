import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from .errors import TodoNotFoundError, TodoValidationError
from .models import Todo
from .store import TaskStore
from .validation import ensure_valid_new_todo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


@router.get("", response_model=List[Todo])
def get_todos(store: TaskStore = Depends(get_store)):
    """Return all to-do items"""
    return store.list_all()


@router.get("/{todo_id}", response_model=Todo)
def get_todo(todo_id: int, store: TaskStore = Depends(get_store)):
    todo = store.get_by_id(todo_id)
    if todo is None:
        raise TodoNotFoundError(todo_id)
    return todo


@router.post("", response_model=Todo, status_code=201)
def create_todo(todo: Todo, response: Response, store: TaskStore = Depends(get_store)):
    try:
        ensure_valid_new_todo(todo)
    except TodoValidationError as exc:
        logger.info("Rejected todo %s: %s", todo.id, exc.errors)
        raise
    response.headers["Location"] = f"/todos/{todo.id}"
    return store.add(todo)


@router.delete("/{todo_id}", status_code=204)
def delete_todo(todo_id: int, store: TaskStore = Depends(get_store)):
    store.delete_by_id(todo_id)
