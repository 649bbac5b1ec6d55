"""In-memory To-Do API built with FastAPI."""

__version__ = "1.0.0"
