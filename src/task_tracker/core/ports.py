# src/task_tracker/core/ports.py

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and id generation swappable and makes testing easier.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task, Theme


class KeyValueStore(Protocol):
    """String keys to string values; the local-storage contract."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class IdGenerator(Protocol):
    def new_id(self) -> str: ...


class TaskRepo(Protocol):
    """Persistence adapter for the task collection and the theme preference."""

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> None: ...
    def load_theme(self) -> Theme: ...
    def save_theme(self, theme: Theme) -> None: ...
