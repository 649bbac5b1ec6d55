from typing import Optional

from fastapi import FastAPI

from . import __version__
from .config import Settings, load_settings
from .errors import install_error_handlers
from .middleware import install_middleware
from .routes import router
from .store import InMemoryTaskStore, TaskStore


def create_app(settings: Optional[Settings] = None, store: Optional[TaskStore] = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(
        title=settings.title,
        description="Simple in-memory to-do API built with FastAPI",
        version=__version__,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else InMemoryTaskStore()

    install_error_handlers(app)
    install_middleware(app)
    app.include_router(router)
    return app
