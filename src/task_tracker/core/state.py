# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from ..tasks.query import SortKey
from ..tasks.task_models import ALL_CATEGORIES, Task, Theme
from .ports import IdGenerator, TaskRepo


class Page(StrEnum):
    DASHBOARD = "dashboard"
    STATS = "stats"
    SETTINGS = "settings"

    @classmethod
    def parse(cls, raw: str) -> Page:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown page: {raw!r}") from None


@dataclass(slots=True)
class ViewState:
    """Ephemeral selections; never persisted, reset every session."""

    search_term: str = ""
    category: str = ALL_CATEGORIES
    sort_key: SortKey = SortKey.NAME
    page: Page = Page.DASHBOARD


@dataclass
class AppState:
    """
    Session state. The task list is mutated only through tasks/task_api.py.
    """

    # Settings are duck-typed so tests can pass a SimpleNamespace.
    settings: Any

    store: TaskRepo
    ids: IdGenerator

    tasks: list[Task] = field(default_factory=list)
    theme: Theme = Theme.LIGHT
    view: ViewState = field(default_factory=ViewState)
