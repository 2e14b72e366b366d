# tests/test_task_models.py

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from task_tracker.tasks.ids import SecureIdGenerator, SequentialIdGenerator
from task_tracker.tasks.task_models import (
    Priority,
    Task,
    TaskValidationError,
    Theme,
    create_task,
    task_from_dict,
    task_to_dict,
)


def test_create_task_trims_and_defaults() -> None:
    now = datetime(2025, 3, 4, 5, 6, 7, tzinfo=UTC)
    t = create_task(
        "  Write report  ",
        " 2025-03-10 ",
        "  Work ",
        " high ",
        ids=SequentialIdGenerator(),
        now=now,
    )
    assert t.id == "task-1"
    assert t.name == "Write report"
    assert t.due_date == "2025-03-10"
    assert t.category == "Work"
    assert t.priority is Priority.HIGH
    assert t.completed is False
    assert t.created_at == now.isoformat()


def test_create_task_blank_optionals_become_none() -> None:
    t = create_task("Read", "", "   ", "", ids=SequentialIdGenerator())
    assert t.due_date is None
    assert t.category is None
    assert t.priority is None
    assert t.created_at


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_create_task_rejects_empty_name(name: str) -> None:
    with pytest.raises(TaskValidationError):
        create_task(name, ids=SequentialIdGenerator())


def test_create_task_rejects_bad_date_and_priority() -> None:
    ids = SequentialIdGenerator()
    with pytest.raises(TaskValidationError):
        create_task("x", due_date="31/01/2025", ids=ids)
    with pytest.raises(TaskValidationError):
        create_task("x", priority="Urgent", ids=ids)


def test_unknown_category_is_accepted() -> None:
    t = create_task("x", category="Hobby", ids=SequentialIdGenerator())
    assert t.category == "Hobby"


def test_task_is_immutable() -> None:
    t = create_task("x", ids=SequentialIdGenerator())
    with pytest.raises(AttributeError):
        t.completed = True  # type: ignore[misc]


def test_storage_mapping_uses_stored_field_names() -> None:
    t = Task(id="a1", name="A", created_at="2025-01-01T00:00:00+00:00")
    raw = task_to_dict(t)
    assert raw == {
        "id": "a1",
        "name": "A",
        "dueDate": "",
        "category": "",
        "priority": "",
        "completed": False,
        "createdAt": "2025-01-01T00:00:00+00:00",
    }
    assert task_from_dict(raw) == t


def test_task_from_dict_rejects_non_tasks() -> None:
    with pytest.raises(ValueError):
        task_from_dict(["not", "a", "dict"])
    with pytest.raises(ValueError):
        task_from_dict({"name": "no id"})
    with pytest.raises(ValueError):
        task_from_dict({"id": "x", "name": 5})


def test_task_from_dict_tolerates_unknown_priority_and_nulls() -> None:
    t = task_from_dict({"id": "x", "name": "A", "priority": "Urgent", "dueDate": None})
    assert t.priority is None
    assert t.due_date is None
    assert t.completed is False


def test_theme_from_db_defaults_to_light() -> None:
    assert Theme.from_db(None) is Theme.LIGHT
    assert Theme.from_db("purple") is Theme.LIGHT
    assert Theme.from_db("dark") is Theme.DARK
    assert Theme.DARK.toggled() is Theme.LIGHT


def test_id_generators() -> None:
    seq = SequentialIdGenerator(prefix="t", start=7)
    assert [seq.new_id(), seq.new_id()] == ["t7", "t8"]

    secure = SecureIdGenerator()
    generated = {secure.new_id() for _ in range(200)}
    assert len(generated) == 200
    assert all(len(i) == 32 for i in generated)


def test_secure_id_generator_falls_back_without_os_randomness(monkeypatch) -> None:
    import task_tracker.tasks.ids as ids_mod

    def no_entropy(_n: int) -> str:
        raise NotImplementedError

    monkeypatch.setattr(ids_mod.secrets, "token_hex", no_entropy)
    gen = ids_mod.SecureIdGenerator()
    a, b = gen.new_id(), gen.new_id()
    assert a and b and a != b
