import argparse
import logging

import uvicorn

from .app import create_app
from .config import load_settings
from .log import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None, settings=None):
    settings = settings or load_settings()
    ap = argparse.ArgumentParser(prog="todo-api", description="Run the in-memory To-Do API")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    ap.add_argument("--log-level", default=settings.log_level, type=str.upper)
    ap.add_argument("--reload", action="store_true", help="Reload server on code changes (dev mode)")
    return ap.parse_args(argv)


def main(argv=None):
    settings = load_settings()
    args = parse_args(argv, settings)
    configure_logging(args.log_level)
    logger.info("Serving %s on %s:%d", settings.title, args.host, args.port)
    uvicorn.run(
        "todo_api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
