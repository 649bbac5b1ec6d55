from datetime import datetime, timezone
from typing import Dict, List, Optional

from .errors import TodoValidationError
from .models import Todo

PAST_DUE_DATE = "cannot have due date in the past"
ALREADY_COMPLETED = "cannot add completed todo"


def validate_new_todo(todo: Todo, now: Optional[datetime] = None) -> Dict[str, List[str]]:
    """Check the creation rules for ``todo`` and return every failure.

    Keys are the JSON field names; an empty dict means the todo may be added.
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    errors: Dict[str, List[str]] = {}
    if todo.due_date < now:
        errors["dueDate"] = [PAST_DUE_DATE]
    if todo.is_completed:
        errors["isCompleted"] = [ALREADY_COMPLETED]
    return errors


def ensure_valid_new_todo(todo: Todo, now: Optional[datetime] = None) -> None:
    errors = validate_new_todo(todo, now)
    if errors:
        raise TodoValidationError(errors)
