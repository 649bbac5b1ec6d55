"""Exception types and the problem+json responses they map to."""

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"
VALIDATION_TITLE = "One or more validation errors occurred."


class TodoApiError(Exception):
    status_code = 500
    title = "An error occurred while processing your request."

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.title)
        self.detail = detail


class TodoNotFoundError(TodoApiError):
    status_code = 404
    title = "Not Found"

    def __init__(self, todo_id: int):
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class AmbiguousTodoIdError(TodoApiError):
    status_code = 409
    title = "Conflict"

    def __init__(self, todo_id: int, count: int):
        super().__init__(f"{count} todos share id {todo_id}")
        self.todo_id = todo_id
        self.count = count


class TodoValidationError(TodoApiError):
    status_code = 400
    title = VALIDATION_TITLE

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__()
        self.errors = errors


def problem_response(
    status_code: int,
    title: str,
    detail: Optional[str] = None,
    errors: Optional[Dict[str, List[str]]] = None,
) -> JSONResponse:
    body = {
        "type": f"https://httpstatuses.io/{status_code}",
        "title": title,
        "status": status_code,
    }
    if detail:
        body["detail"] = detail
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(body, status_code=status_code, media_type=PROBLEM_CONTENT_TYPE)


async def handle_todo_api_error(request: Request, exc: TodoApiError) -> JSONResponse:
    errors = exc.errors if isinstance(exc, TodoValidationError) else None
    return problem_response(exc.status_code, exc.title, exc.detail, errors)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"])
        errors.setdefault(key, []).append(error["msg"])
    logger.info("Rejected malformed %s %s: %s", request.method, request.url.path, errors)
    return problem_response(400, VALIDATION_TITLE, errors=errors)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoApiError, handle_todo_api_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
