import logging
import re
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

logger = logging.getLogger(__name__)

REDIRECT_PATTERN = re.compile(r"^/tasks/(.*)$")
REDIRECT_TARGET = r"/todos/\1"
REDIRECT_STATUS = 302

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def request_tag(request: Request) -> str:
    now = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
    return f"[{request.method} {request.url.path} {now}]"


def redirect_location(request: Request):
    match = REDIRECT_PATTERN.match(request.url.path)
    if match is None:
        return None
    location = match.expand(REDIRECT_TARGET)
    if request.url.query:
        location = f"{location}?{request.url.query}"
    return location


async def log_requests(request: Request, call_next):
    logger.info("%s Started.", request_tag(request))
    try:
        return await call_next(request)
    finally:
        logger.info("%s Finished.", request_tag(request))


async def redirect_tasks(request: Request, call_next):
    location = redirect_location(request)
    if location is not None:
        return RedirectResponse(location, status_code=REDIRECT_STATUS)
    return await call_next(request)


def install_middleware(app: FastAPI) -> None:
    # the last middleware registered runs first
    app.middleware("http")(log_requests)
    app.middleware("http")(redirect_tasks)
