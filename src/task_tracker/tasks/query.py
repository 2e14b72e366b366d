# src/task_tracker/tasks/query.py

"""
Derived views over the task collection: search, category filter and sort.

All functions are pure and return new lists. Nothing is cached; callers
recompute from the full collection whenever the view state changes.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from enum import StrEnum
from typing import TYPE_CHECKING

from .task_models import ALL_CATEGORIES, Task, priority_rank

if TYPE_CHECKING:
    from ..core.state import ViewState


class SortKey(StrEnum):
    NAME = "name"
    DUE_DATE = "dueDate"
    CATEGORY = "category"
    PRIORITY = "priority"

    @classmethod
    def parse(cls, raw: str) -> SortKey:
        key = raw.strip().lower()
        for k in cls:
            if k.value.lower() == key:
                return k
        raise ValueError(f"unknown sort key: {raw!r}")


def collation_key(text: str) -> tuple[str, str, str]:
    """
    Locale-style ordering key: accents and case are ignored first,
    then case-folded text, then the raw text as a final tie-break.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), text.casefold(), text


def filter_tasks(tasks: Iterable[Task], search_term: str, category: str) -> list[Task]:
    needle = search_term.casefold()
    return [
        t
        for t in tasks
        if needle in t.name.casefold()
        and (category == ALL_CATEGORIES or t.category == category)
    ]


def sort_tasks(tasks: Iterable[Task], sort_key: SortKey | str) -> list[Task]:
    """Stable sort; ties keep input order."""
    key = SortKey.parse(sort_key) if not isinstance(sort_key, SortKey) else sort_key
    items = list(tasks)

    if key is SortKey.NAME:
        items.sort(key=lambda t: collation_key(t.name))
    elif key is SortKey.DUE_DATE:
        # ISO dates order lexicographically; absent sorts first as "".
        items.sort(key=lambda t: t.due_date or "")
    elif key is SortKey.CATEGORY:
        items.sort(key=lambda t: collation_key(t.category or ""))
    elif key is SortKey.PRIORITY:
        items.sort(key=lambda t: priority_rank(t.priority), reverse=True)

    return items


def visible_tasks(tasks: Iterable[Task], view: ViewState) -> list[Task]:
    """Filter first, then sort."""
    return sort_tasks(filter_tasks(tasks, view.search_term, view.category), view.sort_key)
