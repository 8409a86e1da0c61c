# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable, Iterable

from brief2check.core.ports import ChatMessage


class FakeLLMClient:
    """
    Deterministic LLM client for unit tests.

    - Captures calls for assertions
    - Yields a predefined text (optionally split into chunks), or raises `error`
    """

    def __init__(self, next_text: str = "{}", *, chunks: int = 1, error: Exception | None = None) -> None:
        self.next_text = next_text
        self.chunks = max(1, chunks)
        self.error = error
        self.calls: list[tuple[list[ChatMessage], str]] = []

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        self.calls.append((messages, system_prompt))
        if self.error is not None:
            raise self.error
        step = max(1, len(self.next_text) // self.chunks)
        for i in range(0, len(self.next_text), step):
            yield self.next_text[i : i + step]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ManualTimer:
    """Timer stand-in: never fires on its own; tests call fire()."""

    def __init__(self, delay: float, fn: Callable[[], None]) -> None:
        self.delay = delay
        self.fn = fn
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        if self.started and not self.cancelled:
            self.fn()


class ManualTimerFactory:
    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def __call__(self, delay: float, fn: Callable[[], None]) -> ManualTimer:
        t = ManualTimer(delay, fn)
        self.timers.append(t)
        return t

    @property
    def last(self) -> ManualTimer:
        return self.timers[-1]
