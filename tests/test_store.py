# tests/test_store.py
import threading
import time

import pytest

from todo_service import TodoConfig, TodoNotFoundError, TodoStore
from todo_service.constants import SEED_TODOS


class TestCreate:
    def test_create_returns_fresh_incomplete_todo(self, store):
        before = int(time.time())
        todo = store.create("Buy milk")
        assert todo.description == "Buy milk"
        assert todo.completed is False
        assert todo.id
        assert todo.created_at >= before

    def test_create_stores_description_verbatim(self, store):
        """Empty and unicode descriptions are kept as given."""
        empty = store.create("")
        fancy = store.create("  café ☕ \n")
        assert store.get(empty.id).description == ""
        assert store.get(fancy.id).description == "  café ☕ \n"

    def test_created_ids_are_unique(self, store):
        ids = [store.create(f"todo {i}").id for i in range(200)]
        assert len(set(ids)) == 200
        assert len(store) == 200

    def test_create_uses_clock(self, store, clock):
        assert store.create("x").created_at == clock.now


class TestCheck:
    def test_check_marks_completed_and_keeps_other_fields(self, store):
        original = store.create("Grab coffee")
        checked = store.check(original.id, True)
        assert checked.completed is True
        assert (checked.id, checked.description, checked.created_at) == (
            original.id,
            original.description,
            original.created_at,
        )
        assert checked in store.list()

    def test_check_can_mark_incomplete_again(self, store):
        todo = store.create("Solve world hunger")
        store.check(todo.id, True)
        assert store.check(todo.id, False).completed is False
        assert store.get(todo.id).completed is False

    def test_check_unknown_id_raises_and_leaves_store_unchanged(self, store):
        store.create("a")
        before = store.list()
        with pytest.raises(TodoNotFoundError) as exc:
            store.check("does-not-exist", True)
        assert exc.value.todo_id == "does-not-exist"
        assert store.list() == before

    def test_check_unknown_id_is_logged(self, store, caplog):
        with caplog.at_level("INFO", logger="todo_service"):
            with pytest.raises(TodoNotFoundError):
                store.check("missing", False)
        assert "missing" in caplog.text


class TestDelete:
    def test_delete_is_idempotent(self, store):
        todo = store.create("x")
        store.delete(todo.id)
        store.delete(todo.id)
        assert todo.id not in store
        assert all(t.id != todo.id for t in store.list())

    def test_delete_unknown_id_is_noop(self, store):
        kept = store.create("keep")
        store.delete("nope")
        assert [t.id for t in store.list()] == [kept.id]

    def test_get_after_delete_raises(self, store):
        todo = store.create("x")
        store.delete(todo.id)
        with pytest.raises(TodoNotFoundError):
            store.get(todo.id)


class TestList:
    def test_list_orders_by_creation_time(self, store, clock):
        clock.now = 300
        third = store.create("third")
        clock.now = 100
        first = store.create("first")
        clock.now = 200
        second = store.create("second")
        assert [t.id for t in store.list()] == [first.id, second.id, third.id]

    def test_list_breaks_ties_by_id(self, store, clock):
        created = [store.create(str(i)) for i in range(10)]
        assert [t.id for t in store.list()] == sorted(t.id for t in created)

    def test_list_is_a_snapshot(self, store):
        a = store.create("a")
        b = store.create("b")
        snapshot = store.list()
        store.check(a.id, True)
        store.delete(b.id)
        store.create("c")
        assert len(snapshot) == 2
        assert snapshot[0].completed is False
        assert {t.id for t in snapshot} == {a.id, b.id}

    def test_empty_store_lists_nothing(self, store):
        assert store.list() == []


class TestSeed:
    def test_seeded_store_holds_demonstration_todos(self):
        store = TodoStore(TodoConfig())
        todos = store.list()
        assert [(t.description, t.completed, t.created_at) for t in todos] == list(SEED_TODOS)
        assert todos[0].completed is True
        assert len({t.id for t in todos}) == 3

    def test_seed_disabled(self):
        assert len(TodoStore(TodoConfig(seed_demo=False))) == 0

    def test_new_todos_sort_after_seed(self, store):
        store.seed()
        todo = store.create("fresh")
        assert store.list()[-1].id == todo.id


class TestLifecycle:
    def test_close_discards_everything(self, store):
        store.create("a")
        store.close()
        assert len(store) == 0


class TestConcurrency:
    def test_parallel_creates_are_all_kept(self, store):
        def worker():
            for i in range(50):
                store.create(f"job {i}")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        todos = store.list()
        assert len(todos) == 400
        assert len({t.id for t in todos}) == 400

    def test_check_and_delete_race_never_resurrects(self, store):
        todos = [store.create(str(i)) for i in range(100)]

        def checker():
            for t in todos:
                try:
                    store.check(t.id, True)
                except TodoNotFoundError:
                    continue

        def deleter():
            for t in todos:
                store.delete(t.id)

        threads = [threading.Thread(target=checker), threading.Thread(target=deleter)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert store.list() == []
