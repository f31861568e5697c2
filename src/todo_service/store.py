# todo_service/store.py
import threading
import time
import uuid
from typing import Dict, List

from pico_ioc import cleanup, component

from .config import TodoConfig
from .constants import LOGGER, SEED_TODOS
from .exceptions import TodoNotFoundError
from .models import Todo


def _now() -> int:
    return int(time.time())


def _new_id() -> str:
    return str(uuid.uuid4())


@component
class TodoStore:
    """In-memory collection of todos keyed by id.

    Every public method holds the store lock for its whole duration, so
    callers on different threads observe each operation atomically.
    Records are immutable; callers receive the stored instances, which
    later operations replace rather than mutate.
    """

    def __init__(self, config: TodoConfig):
        self._lock = threading.Lock()
        self._todos: Dict[str, Todo] = {}
        if config.seed_demo:
            self.seed()

    def seed(self) -> None:
        with self._lock:
            for description, completed, created_at in SEED_TODOS:
                todo = Todo(id=_new_id(), description=description, completed=completed, created_at=created_at)
                self._todos[todo.id] = todo
        LOGGER.debug("Seeded store with %d demonstration todos", len(SEED_TODOS))

    def create(self, description: str) -> Todo:
        todo = Todo(id=_new_id(), description=description, completed=False, created_at=_now())
        with self._lock:
            # ids stay unique among stored todos
            while todo.id in self._todos:
                todo = Todo(id=_new_id(), description=description, created_at=todo.created_at)
            self._todos[todo.id] = todo
        LOGGER.debug("Created todo %s", todo.id)
        return todo

    def check(self, todo_id: str, completed: bool) -> Todo:
        with self._lock:
            current = self._todos.get(todo_id)
            if current is None:
                LOGGER.info("Check on unknown todo %s", todo_id)
                raise TodoNotFoundError(todo_id)
            updated = current.with_completed(completed)
            self._todos[todo_id] = updated
        LOGGER.debug("Marked todo %s completed=%s", todo_id, updated.completed)
        return updated

    def delete(self, todo_id: str) -> None:
        with self._lock:
            removed = self._todos.pop(todo_id, None)
        if removed is not None:
            LOGGER.debug("Deleted todo %s", todo_id)

    def get(self, todo_id: str) -> Todo:
        with self._lock:
            todo = self._todos.get(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return todo

    def list(self) -> List[Todo]:
        with self._lock:
            snapshot = list(self._todos.values())
        snapshot.sort(key=lambda t: (t.created_at, t.id))
        return snapshot

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def __contains__(self, todo_id: object) -> bool:
        with self._lock:
            return todo_id in self._todos

    @cleanup
    def close(self) -> None:
        with self._lock:
            discarded = len(self._todos)
            self._todos.clear()
        LOGGER.info("Store closed, discarded %d todos", discarded)
