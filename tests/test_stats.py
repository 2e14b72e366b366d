# tests/test_stats.py

from __future__ import annotations

from datetime import date

from task_tracker.tasks.stats import (
    compute_stats,
    completion_percentage,
    counts,
    is_overdue,
    overdue_count,
    per_category_breakdown,
)
from task_tracker.tasks.task_models import Task


def _t(id_: str, **kw) -> Task:
    return Task(id=id_, name=f"task {id_}", **kw)


def test_counts() -> None:
    tasks = [_t("1", completed=True), _t("2"), _t("3")]
    c = counts(tasks)
    assert (c.total, c.completed, c.pending) == (3, 1, 2)
    assert counts([]).total == 0


def test_overdue_scenario() -> None:
    tasks = [Task(id="a", name="A", due_date="2020-01-01", completed=False)]
    assert overdue_count(tasks, date(2025, 1, 1)) == 1


def test_overdue_rules() -> None:
    today = date(2025, 1, 10)
    assert not is_overdue(_t("due-today", due_date="2025-01-10"), today)
    assert is_overdue(_t("yesterday", due_date="2025-01-09"), today)
    assert not is_overdue(_t("done", due_date="2025-01-01", completed=True), today)
    assert not is_overdue(_t("no-date"), today)
    assert not is_overdue(_t("garbage", due_date="soon"), today)


def test_completion_percentage() -> None:
    assert completion_percentage([]) == 0
    assert completion_percentage([_t("1", completed=True), _t("2", completed=True)]) == 100
    assert completion_percentage([_t("1", completed=True), _t("2"), _t("3")]) == 33
    assert completion_percentage([_t("1", completed=True), _t("2"), _t("3"), _t("4"), _t("5"),
                                  _t("6"), _t("7"), _t("8")]) == 13  # 12.5 rounds up


def test_per_category_breakdown_defaults_and_open_keys() -> None:
    empty = per_category_breakdown([])
    assert list(empty) == ["Work", "School", "Personal", "Home", "Other", "None"]
    assert set(empty.values()) == {0}

    tasks = [_t("1", category="Work"), _t("2"), _t("3", category="Hobby"), _t("4", category="Work")]
    out = per_category_breakdown(tasks)
    assert out["Work"] == 2
    assert out["None"] == 1
    assert out["Hobby"] == 1
    assert list(out)[-1] == "Hobby"


def test_compute_stats_bundle() -> None:
    tasks = [
        _t("1", completed=True, category="Home"),
        _t("2", due_date="2024-12-31"),
        _t("3", due_date="2026-01-01", category="Work"),
    ]
    s = compute_stats(tasks, date(2025, 1, 1))
    assert (s.total, s.completed, s.pending, s.overdue, s.completion_pct) == (3, 1, 2, 1, 33)
    assert s.per_category["None"] == 1
