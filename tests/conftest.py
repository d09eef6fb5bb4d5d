from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from src.tracker.domain.models.category import Category
from src.tracker.domain.models.priority import Priority
from src.tracker.domain.models.task import Task
from src.tracker.domain.repositories import TaskSource, TaskStore
from tests.fakes import TODAY, StubTaskSource, StubTaskStore, make_task


@pytest.fixture
def task_factory() -> Callable[..., Task]:
    return make_task


@pytest.fixture
def sample_tasks() -> list[Task]:
    """Three tasks: one done, one urgent and overdue, one open and due later."""
    return [
        make_task(
            priority=Priority.HIGH,
            category=Category.WORK,
            completed=True,
            due_date=TODAY + timedelta(days=5),
        ),
        make_task(
            priority=Priority.URGENT,
            category=Category.PERSONAL,
            completed=False,
            due_date=TODAY - timedelta(days=2),
        ),
        make_task(
            priority=Priority.LOW,
            category=Category.WORK,
            completed=False,
            due_date=TODAY + timedelta(days=10),
        ),
    ]


@pytest.fixture
def env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Provide environment variables for ApiSettings."""
    monkeypatch.setenv("APP_NAME", "Test API")
    monkeypatch.setenv("APP_VERSION", "0.1.0")


def _patch_inject_instance(
    monkeypatch: pytest.MonkeyPatch,
    store_stub: StubTaskStore,
    source_stub: StubTaskSource,
) -> Callable[[object], object]:
    """Patch `inject.instance` to always return the stub collaborators."""
    import inject

    def fake_instance(interface: object) -> object:
        if interface is TaskStore:
            return store_stub
        if interface is TaskSource:
            return source_stub
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    return fake_instance


@pytest.fixture
def api_client(env_settings: None, monkeypatch: pytest.MonkeyPatch):
    """FastAPI test client with services wired to the stub store and source."""
    from src.tracker.presentation.app import create_app

    store_stub = StubTaskStore()
    source_stub = StubTaskSource()
    _patch_inject_instance(monkeypatch, store_stub, source_stub)

    client = TestClient(create_app())
    return client, store_stub, source_stub
