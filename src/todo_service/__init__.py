# todo_service/__init__.py
from .app import build_container, create_app
from .config import TodoConfig
from .exceptions import ConfigurationError, TodoError, TodoNotFoundError
from .models import Todo
from .store import TodoStore

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Todo",
    "TodoStore",
    "TodoConfig",
    "TodoError",
    "TodoNotFoundError",
    "ConfigurationError",
    "build_container",
    "create_app",
]
