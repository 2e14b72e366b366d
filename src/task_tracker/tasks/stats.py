# src/task_tracker/tasks/stats.py

"""
Aggregate statistics. Callers pass the full collection, never a filtered view.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from .task_models import NO_CATEGORY, SUGGESTED_CATEGORIES, Task


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    completed: int
    pending: int


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    overdue: int
    completion_pct: int
    per_category: dict[str, int]


def counts(tasks: Sequence[Task]) -> TaskCounts:
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    return TaskCounts(total=total, completed=completed, pending=total - completed)


def is_overdue(task: Task, today: date) -> bool:
    if task.completed:
        return False
    due = task.due()
    return due is not None and due < today


def overdue_count(tasks: Sequence[Task], today: date) -> int:
    return sum(1 for t in tasks if is_overdue(t, today))


def completion_percentage(tasks: Sequence[Task]) -> int:
    """Whole percent of completed tasks, halves rounded up; 0 when empty."""
    total = len(tasks)
    if total == 0:
        return 0
    completed = sum(1 for t in tasks if t.completed)
    # floor(100 * completed / total + 0.5) in integer arithmetic
    return (200 * completed + total) // (2 * total)


def per_category_breakdown(tasks: Sequence[Task]) -> dict[str, int]:
    """
    Task count per category.

    The suggested categories and "None" are always present; any other
    category seen in the data is appended in first-seen order.
    """
    out: dict[str, int] = {c: 0 for c in (*SUGGESTED_CATEGORIES, NO_CATEGORY)}
    for t in tasks:
        key = t.category or NO_CATEGORY
        out[key] = out.get(key, 0) + 1
    return out


def compute_stats(tasks: Sequence[Task], today: date) -> TaskStats:
    c = counts(tasks)
    return TaskStats(
        total=c.total,
        completed=c.completed,
        pending=c.pending,
        overdue=overdue_count(tasks, today),
        completion_pct=completion_percentage(tasks),
        per_category=per_category_breakdown(tasks),
    )
