# src/task_tracker/tasks/task_api.py

"""
Lifecycle operations over AppState.

Every mutation builds the new collection, persists it through
state.store and only then installs it on the state, so memory and
storage never disagree after a failed write.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from ..core.state import AppState, Page, ViewState
from .query import SortKey, visible_tasks
from .stats import TaskCounts, TaskStats, compute_stats, counts
from .task_models import ALL_CATEGORIES, Task, Theme, create_task

logger = logging.getLogger(__name__)


def _commit(state: AppState, tasks: list[Task]) -> None:
    state.store.save(tasks)
    state.tasks = tasks


def find_task(state: AppState, task_id: str) -> Task | None:
    for t in state.tasks:
        if t.id == task_id:
            return t
    return None


# ---- lifecycle ----


def add_task(
    state: AppState,
    name: str,
    due_date: str | None = None,
    category: str | None = None,
    priority: str | None = None,
) -> Task:
    """
    Validate, append and persist a new task.
    Raises TaskValidationError without touching the collection.
    """
    task = create_task(name, due_date, category, priority, ids=state.ids)

    taken = {t.id for t in state.tasks}
    while task.id in taken:
        logger.warning("Generated task id %s collides; drawing a new one.", task.id)
        task = replace(task, id=state.ids.new_id())

    _commit(state, [*state.tasks, task])
    logger.debug("Task added id=%s name=%r due=%s", task.id, task.name, task.due_date)
    return task


def remove_task(state: AppState, task_id: str) -> bool:
    """Returns False (and writes nothing) when the id is unknown."""
    remaining = [t for t in state.tasks if t.id != task_id]
    if len(remaining) == len(state.tasks):
        logger.debug("remove_task: id=%s not found", task_id)
        return False

    _commit(state, remaining)
    logger.debug("Task removed id=%s", task_id)
    return True


def toggle_complete(state: AppState, task_id: str) -> Task | None:
    """Flip completion; returns the updated task or None for an unknown id."""
    updated: Task | None = None
    new_tasks: list[Task] = []
    for t in state.tasks:
        if t.id == task_id:
            updated = replace(t, completed=not t.completed)
            new_tasks.append(updated)
        else:
            new_tasks.append(t)

    if updated is None:
        logger.debug("toggle_complete: id=%s not found", task_id)
        return None

    _commit(state, new_tasks)
    logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
    return updated


def reset_all(state: AppState, *, confirmed: bool) -> bool:
    """Delete every task in one persisted step. Not confirmed -> no-op."""
    if not confirmed:
        logger.debug("reset_all cancelled (not confirmed)")
        return False

    removed = len(state.tasks)
    _commit(state, [])
    logger.info("All tasks reset (%d removed).", removed)
    return True


# ---- view state ----


def set_search_term(state: AppState, term: str) -> None:
    state.view.search_term = term


def set_category_filter(state: AppState, category: str | None) -> None:
    category = (category or "").strip()
    state.view.category = category or ALL_CATEGORIES


def set_sort_key(state: AppState, raw: str) -> SortKey:
    """Raises ValueError for an unknown key."""
    state.view.sort_key = SortKey.parse(raw)
    return state.view.sort_key


def set_page(state: AppState, raw: str) -> Page:
    """Raises ValueError for an unknown page."""
    state.view.page = Page.parse(raw)
    return state.view.page


def reset_view(state: AppState) -> None:
    state.view = ViewState()


# ---- theme ----


def set_theme(state: AppState, theme: Theme | str) -> Theme:
    """Raises ValueError for anything other than light/dark."""
    new_theme = Theme(str(theme).strip().lower())
    state.store.save_theme(new_theme)
    state.theme = new_theme
    logger.debug("Theme set to %s", new_theme.value)
    return new_theme


def toggle_theme(state: AppState) -> Theme:
    return set_theme(state, state.theme.toggled())


# ---- read helpers for presentation ----


def current_view(state: AppState) -> list[Task]:
    return visible_tasks(state.tasks, state.view)


def dashboard_counts(state: AppState) -> TaskCounts:
    """Counters shown above the list: they follow the search/category filter."""
    return counts(current_view(state))


def current_stats(state: AppState, today: date | None = None) -> TaskStats:
    return compute_stats(state.tasks, today or date.today())
