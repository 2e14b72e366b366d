# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any

from ..core.ports import IdGenerator

# Categories offered by the UI. The set is a suggestion, not a constraint:
# any non-empty label is accepted and counted on its own in statistics.
SUGGESTED_CATEGORIES: tuple[str, ...] = ("Work", "School", "Personal", "Home", "Other")
NO_CATEGORY = "None"
ALL_CATEGORIES = "All"


class TaskValidationError(ValueError):
    """Raised when task input is rejected (empty name, bad date, unknown priority)."""


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Case-insensitive lookup; raises ValueError for unknown names."""
        key = raw.strip().lower()
        for p in cls:
            if p.value.lower() == key:
                return p
        raise ValueError(f"unknown priority: {raw!r}")

    @classmethod
    def from_db(cls, raw: Any) -> Priority | None:
        if not raw or not isinstance(raw, str):
            return None
        try:
            return cls.parse(raw)
        except ValueError:
            return None


_PRIORITY_RANK = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


def priority_rank(priority: Priority | None) -> int:
    """High=3, Medium=2, Low=1, absent=0."""
    return 0 if priority is None else priority.rank


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_db(cls, raw: str | None) -> Theme:
        if not raw:
            return cls.LIGHT
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.LIGHT

    def toggled(self) -> Theme:
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    name: str
    due_date: str | None = None  # ISO calendar date, YYYY-MM-DD
    category: str | None = None
    priority: Priority | None = None
    completed: bool = False
    created_at: str = ""  # ISO datetime

    def due(self) -> date | None:
        """Due date as a calendar date; None when absent or unparsable."""
        if not self.due_date:
            return None
        try:
            return date.fromisoformat(self.due_date)
        except ValueError:
            return None


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def create_task(
    name: str,
    due_date: str | None = None,
    category: str | None = None,
    priority: str | Priority | None = None,
    *,
    ids: IdGenerator,
    now: datetime | None = None,
) -> Task:
    """
    Build a new, incomplete task from raw user input.

    Text inputs are trimmed; empty optional fields become None.
    Raises TaskValidationError when the name is empty, the due date is not
    an ISO calendar date or the priority is not High/Medium/Low.
    """
    clean_name = _clean(name)
    if not clean_name:
        raise TaskValidationError("task name is required")

    clean_due = _clean(due_date)
    if clean_due is not None:
        try:
            clean_due = date.fromisoformat(clean_due).isoformat()
        except ValueError:
            raise TaskValidationError(f"due date must be YYYY-MM-DD, got {clean_due!r}") from None

    prio: Priority | None = None
    if isinstance(priority, Priority):
        prio = priority
    else:
        raw_prio = _clean(priority)
        if raw_prio is not None:
            try:
                prio = Priority.parse(raw_prio)
            except ValueError:
                raise TaskValidationError(
                    f"priority must be High, Medium or Low, got {raw_prio!r}"
                ) from None

    created = (now or datetime.now(UTC)).isoformat()

    return Task(
        id=ids.new_id(),
        name=clean_name,
        due_date=clean_due,
        category=_clean(category),
        priority=prio,
        completed=False,
        created_at=created,
    )


# ---- storage mapping ----
# Field names follow the stored JSON layout; absent values are written as ""
# so that records stay readable by the browser build sharing the same keys.


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "name": task.name,
        "dueDate": task.due_date or "",
        "category": task.category or "",
        "priority": task.priority.value if task.priority else "",
        "completed": bool(task.completed),
        "createdAt": task.created_at,
    }


def task_from_dict(raw: Any) -> Task:
    """Decode one stored record; raises ValueError when it is not a task."""
    if not isinstance(raw, dict):
        raise ValueError("task record must be an object")

    task_id = raw.get("id")
    name = raw.get("name")
    if not isinstance(task_id, str) or not task_id:
        raise ValueError("task record is missing a string id")
    if not isinstance(name, str):
        raise ValueError(f"task {task_id} is missing a string name")

    def opt_str(key: str) -> str | None:
        v = raw.get(key)
        return v if isinstance(v, str) and v != "" else None

    return Task(
        id=task_id,
        name=name,
        due_date=opt_str("dueDate"),
        category=opt_str("category"),
        priority=Priority.from_db(raw.get("priority")),
        completed=raw.get("completed") is True,
        created_at=opt_str("createdAt") or "",
    )
