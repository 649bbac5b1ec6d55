"""Settings for the To-Do API, read from the environment."""

import os
from dataclasses import dataclass

ENV_PREFIX = "TODO_API_"


@dataclass
class Settings:
    title: str = "To-Do API"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        title=os.getenv(ENV_PREFIX + "TITLE", defaults.title),
        host=os.getenv(ENV_PREFIX + "HOST", defaults.host),
        port=int(os.getenv(ENV_PREFIX + "PORT", defaults.port)),
        log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
    )
