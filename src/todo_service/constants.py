"""Constants used throughout the todo service.

This module defines the package logger, the configuration prefix and the
fixed demonstration records inserted into a freshly seeded store.
"""

import logging

LOGGER_NAME: str = "todo_service"
"""Default logger name for the todo service."""

LOGGER: logging.Logger = logging.getLogger(LOGGER_NAME)
"""Package logger; handlers are installed only by the command line entry point."""

CONFIG_PREFIX: str = "TODO_"
"""Prefix of every flat configuration key (e.g. ``TODO_BIND_PORT``)."""

DEFAULT_PORT: int = 4000
"""Port the service listens on when nothing else is configured."""

SEED_TODOS: tuple[tuple[str, bool, int], ...] = (
    ("Pick up dry cleaning", True, 1),
    ("Grab coffee", False, 2),
    ("Solve world hunger", False, 3),
)
"""Demonstration records as ``(description, completed, created_at)`` in creation order."""
