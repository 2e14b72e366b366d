# src/task_tracker/tasks/seed.py

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from ..core.ports import IdGenerator
from .task_models import Priority, Task

# (name, days from today or None, category, priority)
_DEMO_TASKS: tuple[tuple[str, int | None, str, Priority | None], ...] = (
    ("Finish math assignment", 1, "School", Priority.HIGH),
    ("Team stand-up", 0, "Work", Priority.MEDIUM),
    ("Buy groceries", 2, "Home", Priority.LOW),
    ("Gym session", 3, "Personal", Priority.MEDIUM),
    ("Misc reminders", None, "Other", None),
)


def seed_demo_tasks(
    *,
    ids: IdGenerator,
    today: date | None = None,
    now: datetime | None = None,
) -> list[Task]:
    """Five incomplete demo tasks, due dates relative to `today`."""
    today = today or date.today()
    created = (now or datetime.now(UTC)).isoformat()

    out: list[Task] = []
    for name, offset, category, priority in _DEMO_TASKS:
        due = None if offset is None else (today + timedelta(days=offset)).isoformat()
        out.append(
            Task(
                id=ids.new_id(),
                name=name,
                due_date=due,
                category=category,
                priority=priority,
                completed=False,
                created_at=created,
            )
        )
    return out
