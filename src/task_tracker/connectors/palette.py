# src/task_tracker/connectors/palette.py

"""ANSI colour palettes for the console, one per theme.

Colour is disabled when output is not a TTY or when settings.color is off.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from ..tasks.task_models import Priority, Theme

RESET = "\033[0m"
BOLD = "\033[1m"


@dataclass(frozen=True, slots=True)
class Palette:
    header: str
    muted: str
    done: str
    overdue: str
    accent: str
    priority: dict[Priority, str]


_PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(
        header="\033[34m",
        muted="\033[90m",
        done="\033[32m",
        overdue="\033[31m",
        accent="\033[35m",
        priority={Priority.HIGH: "\033[31m", Priority.MEDIUM: "\033[33m", Priority.LOW: "\033[36m"},
    ),
    Theme.DARK: Palette(
        header="\033[94m",
        muted="\033[37m",
        done="\033[92m",
        overdue="\033[91m",
        accent="\033[95m",
        priority={Priority.HIGH: "\033[91m", Priority.MEDIUM: "\033[93m", Priority.LOW: "\033[96m"},
    ),
}


def palette_for(theme: Theme) -> Palette:
    return _PALETTES[theme]


def color_enabled(settings) -> bool:
    return bool(getattr(settings, "color", True)) and sys.stdout.isatty()


class Painter:
    """Wraps text in palette codes, or passes it through when colour is off."""

    def __init__(self, theme: Theme, enabled: bool) -> None:
        self.palette = palette_for(theme)
        self.enabled = enabled

    def paint(self, text: str, code: str, *, bold: bool = False) -> str:
        if not self.enabled or not code:
            return text
        return f"{BOLD if bold else ''}{code}{text}{RESET}"
