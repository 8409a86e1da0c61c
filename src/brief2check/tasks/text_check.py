# src/brief2check/tasks/text_check.py

"""
Advisory validation of task text.

Nothing here blocks a write: the store always keeps what the user typed.
The result only drives the validity indicator next to the field.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)

MAX_TASK_CHARS = 1000
DEBOUNCE_SECONDS = 0.3


@dataclass(slots=True, frozen=True)
class TextCheck:
    is_valid: bool
    error: str | None = None


def check_task_text(text: Any, max_chars: int = MAX_TASK_CHARS) -> TextCheck:
    if not isinstance(text, str):
        return TextCheck(False, "Task text must be a string")

    trimmed = text.strip()
    if not trimmed:
        return TextCheck(False, "Task cannot be empty")
    if len(trimmed) > max_chars:
        return TextCheck(False, f"Task is too long (max {max_chars} characters)")
    return TextCheck(True)


class TimerHandle(Protocol):
    def start(self) -> None: ...
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(delay: float, fn: Callable[[], None]) -> TimerHandle:
    t = threading.Timer(delay, fn)
    t.daemon = True
    return t


class DebouncedTextCheck:
    """
    Debounced validator for one editable field.

    - on_input: (re)arms the timer; the check runs once typing pauses for `delay`.
    - on_blur / on_remove: cancel the pending timer and check right away.

    All three go through `_run`, so both triggers report the same result for the same text.
    """

    def __init__(
        self,
        on_result: Callable[[TextCheck], None],
        *,
        delay: float = DEBOUNCE_SECONDS,
        max_chars: int = MAX_TASK_CHARS,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        self._on_result = on_result
        self._delay = float(delay)
        self._max_chars = int(max_chars)
        self._timer_factory = timer_factory
        self._pending: TimerHandle | None = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _cancel_pending(self) -> None:
        with self._lock:
            pending, self._pending = self._pending, None
        if pending is not None:
            pending.cancel()

    def _run(self, text: Any) -> TextCheck:
        result = check_task_text(text, self._max_chars)
        self._on_result(result)
        return result

    def on_input(self, text: Any) -> None:
        self._cancel_pending()

        handle: TimerHandle | None = None

        def fire() -> None:
            with self._lock:
                if self._pending is not handle:
                    return
                self._pending = None
            self._run(text)

        handle = self._timer_factory(self._delay, fire)
        with self._lock:
            self._pending = handle
        handle.start()

    def on_blur(self, text: Any) -> TextCheck:
        self._cancel_pending()
        return self._run(text)

    def on_remove(self, text: Any) -> TextCheck:
        self._cancel_pending()
        return self._run(text)

    def cancel(self) -> None:
        self._cancel_pending()
