# tests/test_commands.py

from __future__ import annotations

from task_tracker.cli.commands import CommandRegistry, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, confirm):
        called["h3"] += 1
        assert confirm is not None and confirm("sure?") is True
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b")

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/b y", confirm=lambda _: True) == "h3"
    assert called == {"h2": 1, "h3": 1}


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_list_done_rm_flow(state) -> None:
    reply = registry.handle(state, "/add Buy milk due:2025-01-31 cat:Home prio:high")
    assert reply is not None and reply.startswith("Task added: Buy milk")
    task = state.tasks[0]
    assert (task.due_date, task.category, task.priority.value) == ("2025-01-31", "Home", "High")

    listing = registry.handle(state, "/ls") or ""
    assert "Buy milk" in listing and "(Home)" in listing and "[High]" in listing
    assert "total 1 | completed 0 | pending 1" in listing

    assert registry.handle(state, "/done #1") == "Task completed: Buy milk"
    assert registry.handle(state, f"/toggle {task.id}") == "Marked as pending: Buy milk"

    assert registry.handle(state, f"/rm {task.id[:4]}") == "Task removed: Buy milk"
    assert state.tasks == []
    assert "No task with id" in (registry.handle(state, "/rm zzz") or "")


def test_add_validation_replies(state) -> None:
    assert "Enter a task name" in (registry.handle(state, "/add prio:High") or "")
    assert "Task not added" in (registry.handle(state, "/add x due:tomorrow") or "")
    assert state.tasks == []


def test_search_filter_sort_commands(state) -> None:
    registry.handle(state, "/add Alpha cat:Work prio:Low")
    registry.handle(state, "/add Beta cat:Home prio:High")

    out = registry.handle(state, "/filter Home") or ""
    assert "Beta" in out and "Alpha" not in out

    registry.handle(state, "/filter All")
    out = registry.handle(state, "/sort priority") or ""
    assert out.index("Beta") < out.index("Alpha")
    assert "Usage" in (registry.handle(state, "/sort size") or "")

    out = registry.handle(state, "/search alp") or ""
    assert "Alpha" in out and "Beta" not in out
    registry.handle(state, "/search")
    assert state.view.search_term == ""


def test_reset_confirmation(state) -> None:
    registry.handle(state, "/add one")
    assert "/reset yes" in (registry.handle(state, "/reset") or "")
    assert registry.handle(state, "/reset", confirm=lambda _: False) == "Reset cancelled."
    assert len(state.tasks) == 1
    assert registry.handle(state, "/reset yes") == "All tasks reset"
    assert state.tasks == []


def test_theme_stats_and_pages(state) -> None:
    assert registry.handle(state, "/theme") == "Dark mode on"
    assert registry.handle(state, "/theme light") == "Light mode on"
    assert "Usage" in (registry.handle(state, "/theme sepia") or "")

    registry.handle(state, "/add a cat:Hobby")
    stats = registry.handle(state, "/stats") or ""
    assert "Total:     1" in stats and "Hobby: 1" in stats and "0%" in stats

    assert "Statistics" in (registry.handle(state, "/page stats") or "")
    assert "Settings" in (registry.handle(state, "/page settings") or "")
    assert "Usage" in (registry.handle(state, "/page admin") or "")
    assert "Page: settings" in (registry.handle(state, "/status") or "")
