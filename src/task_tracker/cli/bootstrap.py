# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key/value store, id generator and task store into AppState,
- loads the persisted collection and theme.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import IdGenerator
from ..core.state import AppState
from ..storage.kv_store import SqliteKeyValueStore
from ..tasks.ids import SecureIdGenerator
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, ids: IdGenerator | None = None) -> AppState:
    """
    Create AppState from the provided settings and load persisted data.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    if ids is None:
        ids = SecureIdGenerator()

    _ensure_local_dirs(settings)

    store = TaskStore(SqliteKeyValueStore(settings.store_path), ids=ids)
    state = AppState(settings=settings, store=store, ids=ids)

    state.tasks = store.load()
    state.theme = store.load_theme()
    logger.info("Loaded %d tasks (theme=%s).", len(state.tasks), state.theme.value)
    return state
