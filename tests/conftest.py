import pytest
from fastapi.testclient import TestClient
from pico_ioc.config_builder import FlatDictSource, configuration

import todo_service.store as store_module
from todo_service import TodoConfig, TodoStore, build_container, create_app


class FakeClock:
    def __init__(self, start: int = 1_700_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int = 1) -> None:
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(store_module, "_now", fake)
    return fake


@pytest.fixture
def store():
    return TodoStore(TodoConfig(seed_demo=False))


@pytest.fixture
def settings():
    return {"TODO_SEED_DEMO": "false"}


@pytest.fixture
def container(settings):
    c = build_container(configuration(FlatDictSource(settings)))
    yield c
    c.shutdown()


@pytest.fixture
def client(container):
    return TestClient(create_app(container=container))
