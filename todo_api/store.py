"""In-memory task store.

The store keeps todos in insertion order and does not enforce id
uniqueness. Lookups that hit more than one todo raise
``AmbiguousTodoIdError`` instead of picking one; deletes remove every match.
"""

import logging
import threading
from typing import List, Optional, Protocol

from .errors import AmbiguousTodoIdError
from .models import Todo

logger = logging.getLogger(__name__)


class TaskStore(Protocol):
    def list_all(self) -> List[Todo]: ...

    def get_by_id(self, todo_id: int) -> Optional[Todo]: ...

    def add(self, todo: Todo) -> Todo: ...

    def delete_by_id(self, todo_id: int) -> int: ...


class InMemoryTaskStore:
    def __init__(self, todos: Optional[List[Todo]] = None):
        self._todos: List[Todo] = list(todos or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list_all(self) -> List[Todo]:
        with self._lock:
            return list(self._todos)

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        with self._lock:
            matches = [t for t in self._todos if t.id == todo_id]
        if len(matches) > 1:
            raise AmbiguousTodoIdError(todo_id, len(matches))
        return matches[0] if matches else None

    def add(self, todo: Todo) -> Todo:
        with self._lock:
            self._todos.append(todo)
        logger.debug("Added todo %s", todo.id)
        return todo

    def delete_by_id(self, todo_id: int) -> int:
        with self._lock:
            before = len(self._todos)
            self._todos = [t for t in self._todos if t.id != todo_id]
            removed = before - len(self._todos)
        logger.debug("Deleted %d todo(s) with id %s", removed, todo_id)
        return removed
