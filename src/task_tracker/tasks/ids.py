# src/task_tracker/tasks/ids.py

from __future__ import annotations

import itertools
import logging
import random
import secrets
import time

logger = logging.getLogger(__name__)


class SecureIdGenerator:
    """
    Opaque 128-bit hex ids from the OS randomness source.

    If the platform has no randomness source, falls back to a
    pseudo-random value mixed with the current time in nanoseconds.
    """

    def __init__(self) -> None:
        self._fallback = random.Random()
        self._warned = False

    def new_id(self) -> str:
        try:
            return secrets.token_hex(16)
        except NotImplementedError:
            if not self._warned:
                logger.warning("OS randomness unavailable; using time-mixed pseudo-random ids.")
                self._warned = True
            return f"{self._fallback.getrandbits(64):016x}{time.time_ns():x}"


class SequentialIdGenerator:
    """Deterministic ids (task-1, task-2, ...) for tests and demos."""

    def __init__(self, prefix: str = "task-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
