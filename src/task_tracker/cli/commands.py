# src/task_tracker/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import date
from typing import cast

from ..connectors.palette import Painter, color_enabled
from ..core.state import AppState, Page
from ..tasks import task_api
from ..tasks.stats import TaskStats, is_overdue
from ..tasks.task_models import (
    ALL_CATEGORIES,
    SUGGESTED_CATEGORIES,
    Task,
    TaskValidationError,
    Theme,
)

ConfirmPrompt = Callable[[str], bool]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], ConfirmPrompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

SHORT_ID_LEN = 8
_ADD_OPTIONS = ("due:", "cat:", "prio:")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        confirm: ConfirmPrompt | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, confirm)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _painter(state: AppState) -> Painter:
    return Painter(state.theme, color_enabled(state.settings))


def short_id(task: Task) -> str:
    return task.id[:SHORT_ID_LEN]


def resolve_task(state: AppState, token: str) -> Task | str:
    """
    Find a task by "#N" (row N of the current list), full id or unique id prefix.
    Returns the task, or a reply explaining why none matched.
    """
    if token.startswith("#"):
        try:
            row = int(token[1:])
        except ValueError:
            return f"Not a row number: {token}"
        view = task_api.current_view(state)
        if 1 <= row <= len(view):
            return view[row - 1]
        return f"No row {token} in the current list."

    exact = task_api.find_task(state, token)
    if exact is not None:
        return exact

    matches = [t for t in state.tasks if t.id.startswith(token)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        return f"No task with id {token}."
    return f"Id prefix {token} is ambiguous ({len(matches)} tasks)."


def format_task_line(task: Task, row: int, painter: Painter, today: date) -> str:
    pal = painter.palette
    check = "[x]" if task.completed else "[ ]"
    title = painter.paint(task.name, pal.done if task.completed else "")
    badges: list[str] = []
    if task.category:
        badges.append(painter.paint(f"({task.category})", pal.accent))
    if task.priority:
        badges.append(painter.paint(f"[{task.priority.value}]", pal.priority[task.priority]))
    if task.due_date:
        badges.append(f"due {task.due_date}")
        if is_overdue(task, today):
            badges.append(painter.paint("OVERDUE", pal.overdue, bold=True))
    tail = painter.paint(f"id:{short_id(task)}", pal.muted)
    return " ".join([f"{row:>3}. {check} {title}", *badges, tail])


def render_dashboard(state: AppState, today: date | None = None) -> str:
    today = today or date.today()
    painter = _painter(state)
    pal = painter.palette
    view = task_api.current_view(state)
    c = task_api.dashboard_counts(state)
    v = state.view

    header = painter.paint(
        f"Tasks  total {c.total} | completed {c.completed} | pending {c.pending}",
        pal.header,
        bold=True,
    )
    criteria = painter.paint(
        f"search={v.search_term!r} category={v.category} sort={v.sort_key.value}", pal.muted
    )
    lines = [header, criteria]
    if not view:
        lines.append(painter.paint("No tasks to show.", pal.muted))
    for i, t in enumerate(view, start=1):
        lines.append(format_task_line(t, i, painter, today))
    return "\n".join(lines)


def render_stats(state: AppState, stats: TaskStats) -> str:
    painter = _painter(state)
    pal = painter.palette
    width = 20
    filled = round(width * stats.completion_pct / 100)
    bar = "#" * filled + "-" * (width - filled)

    lines = [
        painter.paint("Statistics", pal.header, bold=True),
        f"  Total:     {stats.total}",
        f"  Completed: {stats.completed}",
        f"  Pending:   {stats.pending}",
        f"  Overdue:   {painter.paint(str(stats.overdue), pal.overdue if stats.overdue else '')}",
        f"  Completion: [{bar}] {stats.completion_pct}%",
        "  Per category:",
    ]
    for cat, n in stats.per_category.items():
        lines.append(f"    {cat}: {n}")
    return "\n".join(lines)


def render_settings(state: AppState) -> str:
    store_path = getattr(state.settings, "store_path", "?")
    return (
        "Settings:\n"
        f"  Theme: {state.theme.value} (use /theme light|dark)\n"
        f"  Storage: {store_path}\n"
        "  Reset all tasks: /reset"
    )


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    v = state.view
    return (
        "Status:\n"
        f"  Tasks: {len(state.tasks)}\n"
        f"  Theme: {state.theme.value}\n"
        f"  Page: {v.page.value}\n"
        f"  Search: {v.search_term!r}  Category: {v.category}  Sort: {v.sort_key.value}\n"
        f"  Storage: {getattr(state.settings, 'store_path', '?')}"
    )


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_dashboard(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add Buy milk due:2025-01-31 cat:Home prio:High
    Options may appear anywhere; the remaining words form the name.
    """
    opts: dict[str, str] = {}
    words: list[str] = []
    for a in args:
        prefix = next((p for p in _ADD_OPTIONS if a.lower().startswith(p)), None)
        if prefix is None:
            words.append(a)
        else:
            opts[prefix] = a[len(prefix):]

    try:
        task = task_api.add_task(
            state,
            " ".join(words),
            due_date=opts.get("due:"),
            category=opts.get("cat:"),
            priority=opts.get("prio:"),
        )
    except TaskValidationError as e:
        if not " ".join(words).strip():
            return "Enter a task name. Usage: /add <name> [due:YYYY-MM-DD] [cat:<category>] [prio:High|Medium|Low]"
        return f"Task not added: {e}"

    return f"Task added: {task.name} (id:{short_id(task)})"


def cmd_done(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <id | #row>"
    found = resolve_task(state, args[0])
    if isinstance(found, str):
        return found
    updated = task_api.toggle_complete(state, found.id)
    if updated is None:
        return f"No task with id {args[0]}."
    return f"Task completed: {updated.name}" if updated.completed else f"Marked as pending: {updated.name}"


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <id | #row>"
    found = resolve_task(state, args[0])
    if isinstance(found, str):
        return found
    if not task_api.remove_task(state, found.id):
        return f"No task with id {args[0]}."
    return f"Task removed: {found.name}"


def cmd_search(state: AppState, args: list[str]) -> str:
    term = " ".join(args)
    task_api.set_search_term(state, term)
    return render_dashboard(state)


def cmd_filter(state: AppState, args: list[str]) -> str:
    if not args:
        cats = ", ".join((ALL_CATEGORIES, *SUGGESTED_CATEGORIES))
        return f"Category filter: {state.view.category}. Use /filter <{cats}>."
    task_api.set_category_filter(state, " ".join(args))
    return render_dashboard(state)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Sorted by {state.view.sort_key.value}. Use /sort name|dueDate|category|priority."
    try:
        task_api.set_sort_key(state, args[0])
    except ValueError:
        return "Usage: /sort name|dueDate|category|priority"
    return render_dashboard(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render_stats(state, task_api.current_stats(state))


def cmd_page(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Current page: {state.view.page.value}. Use /page dashboard|stats|settings."
    try:
        page = task_api.set_page(state, args[0])
    except ValueError:
        return "Usage: /page dashboard|stats|settings"

    if page is Page.STATS:
        return render_stats(state, task_api.current_stats(state))
    if page is Page.SETTINGS:
        return render_settings(state)
    return render_dashboard(state)


def cmd_theme(state: AppState, args: list[str]) -> str:
    """
    /theme        -> toggle
    /theme dark   -> set explicitly
    """
    if not args:
        theme = task_api.toggle_theme(state)
    else:
        try:
            theme = task_api.set_theme(state, args[0])
        except ValueError:
            return "Usage: /theme [light|dark]"
    return "Dark mode on" if theme is Theme.DARK else "Light mode on"


def cmd_reset(state: AppState, args: list[str], confirm: ConfirmPrompt | None = None) -> str:
    """
    /reset yes  -> delete everything
    /reset      -> ask first (when the connector can ask), otherwise explain
    """
    if args and args[0].lower() in ("yes", "y"):
        confirmed = True
    elif confirm is not None:
        confirmed = confirm("Reset all tasks? This cannot be undone.")
    else:
        return "This deletes every task and cannot be undone. Run /reset yes to confirm."

    if not task_api.reset_all(state, confirmed=confirmed):
        return "Reset cancelled."
    return "All tasks reset"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show session status (theme, view, storage).")
registry.register("list", cmd_list, help_text="Show the filtered and sorted task list.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <name> [due:YYYY-MM-DD] [cat:<category>] [prio:High|Medium|Low].",
)
registry.register("done", cmd_done, help_text="Toggle completion: /done <id | #row>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id | #row>.", aliases=["del", "delete"])
registry.register("search", cmd_search, help_text="Filter by name: /search [term] (empty clears).")
registry.register("filter", cmd_filter, help_text="Filter by category: /filter <category|All>.")
registry.register("sort", cmd_sort, help_text="Sort: /sort name|dueDate|category|priority.")
registry.register("stats", cmd_stats, help_text="Show statistics over all tasks.")
registry.register("page", cmd_page, help_text="Navigate: /page dashboard|stats|settings.")
registry.register("theme", cmd_theme, help_text="Switch theme: /theme [light|dark].")
registry.register("reset", cmd_reset, help_text="Delete all tasks (asks for confirmation).")
