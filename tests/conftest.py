# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.storage.kv_store import SqliteKeyValueStore
from task_tracker.tasks.ids import SequentialIdGenerator
from task_tracker.tasks.task_store import TaskStore

SEED_TODAY = date(2025, 1, 1)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="DEBUG",
        color=False,
        data_dir=tmp_path,
        store_path=tmp_path / "storage.sqlite3",
        log_dir=tmp_path,
    )


@pytest.fixture()
def ids() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture()
def kv(settings: SimpleNamespace) -> SqliteKeyValueStore:
    return SqliteKeyValueStore(settings.store_path)


@pytest.fixture()
def store(kv: SqliteKeyValueStore, ids: SequentialIdGenerator) -> TaskStore:
    return TaskStore(kv, ids=ids, today=SEED_TODAY)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, ids: SequentialIdGenerator) -> AppState:
    """
    AppState with an empty collection.

    NOTE: We keep a real SQLite store here because persistence after every
    mutation is part of what we want to test.
    """
    store.save([])
    return AppState(settings=settings, store=store, ids=ids, tasks=store.load())
