# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import date

from ..core.ports import IdGenerator, KeyValueStore
from .seed import seed_demo_tasks
from .task_models import Task, Theme, task_from_dict, task_to_dict

logger = logging.getLogger(__name__)

TASKS_KEY = "task_manager_tasks_v2"
THEME_KEY = "task_manager_theme_v2"


class StorageCorruptError(ValueError):
    """The stored task payload could not be decoded."""


def encode_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([task_to_dict(t) for t in tasks], ensure_ascii=False)


def decode_tasks(payload: str) -> list[Task]:
    """
    Decode a stored payload.

    The payload is all-or-nothing: a single bad record marks the whole
    payload as corrupt.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise StorageCorruptError(f"payload is not JSON: {e}") from e

    if not isinstance(data, list):
        raise StorageCorruptError(f"payload must be a list, got {type(data).__name__}")

    tasks: list[Task] = []
    seen: set[str] = set()
    for i, raw in enumerate(data):
        try:
            task = task_from_dict(raw)
        except ValueError as e:
            raise StorageCorruptError(f"record #{i}: {e}") from e
        if task.id in seen:
            raise StorageCorruptError(f"record #{i}: duplicate id {task.id}")
        seen.add(task.id)
        tasks.append(task)
    return tasks


class TaskStore:
    """
    Persistence adapter: task collection + theme preference over a key/value store.

    - load(): first run (or a corrupt payload) writes and returns the demo seed set
    - save(): overwrites the whole collection (no merge)
    - load_theme()/save_theme(): independent scalar key, default "light"
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        ids: IdGenerator,
        today: date | None = None,
    ) -> None:
        self._kv = kv
        self._ids = ids
        # Pinned "today" for deterministic seeding in tests; None means the real date.
        self._today = today

    def load(self) -> list[Task]:
        raw = self._kv.get(TASKS_KEY)
        if raw is None:
            logger.info("No stored tasks (key=%s); seeding demo tasks.", TASKS_KEY)
            return self._bootstrap()

        try:
            tasks = decode_tasks(raw)
        except StorageCorruptError as e:
            logger.warning("Stored tasks are corrupt (%s); replacing with demo tasks.", e)
            return self._bootstrap()

        logger.debug("Loaded %d tasks from key=%s", len(tasks), TASKS_KEY)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        self._kv.set(TASKS_KEY, encode_tasks(tasks))
        logger.debug("Saved %d tasks to key=%s", len(tasks), TASKS_KEY)

    def load_theme(self) -> Theme:
        raw = self._kv.get(THEME_KEY)
        theme = Theme.from_db(raw)
        if raw != theme.value:
            if raw is not None:
                logger.warning("Unknown stored theme %r; using %s.", raw, theme.value)
            self.save_theme(theme)
        return theme

    def save_theme(self, theme: Theme) -> None:
        self._kv.set(THEME_KEY, Theme(theme).value)

    def _bootstrap(self) -> list[Task]:
        tasks = seed_demo_tasks(ids=self._ids, today=self._today)
        self.save(tasks)
        return tasks
