"""Exception hierarchy for the todo service.

All service-specific exceptions inherit from :class:`TodoError`, making it
easy to catch any of them with a single ``except TodoError`` clause.
"""


class TodoError(Exception):
    """Base exception for all todo service errors."""

    pass


class TodoNotFoundError(TodoError):
    """Raised when an operation references a todo id that is not stored.

    Attributes:
        todo_id: The id that was looked up.
    """

    def __init__(self, todo_id: str):
        super().__init__(f"Todo '{todo_id}' not found")
        self.todo_id = todo_id


class ConfigurationError(TodoError):
    """Raised for invalid settings (bad port, malformed API prefix, unknown log level)."""

    def __init__(self, msg: str):
        super().__init__(msg)
