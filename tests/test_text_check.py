# tests/test_text_check.py

from __future__ import annotations

from brief2check.tasks.text_check import DebouncedTextCheck, TextCheck, check_task_text

from .fakes import ManualTimerFactory


def test_check_task_text_rules() -> None:
    assert check_task_text("Add footer") == TextCheck(True)
    assert check_task_text("   ") == TextCheck(False, "Task cannot be empty")
    assert check_task_text("x" * 1001).error == "Task is too long (max 1000 characters)"
    assert check_task_text("  " + "x" * 1000 + "  ").is_valid
    assert check_task_text(None).error == "Task text must be a string"


def test_input_is_debounced_until_timer_fires() -> None:
    results: list[TextCheck] = []
    timers = ManualTimerFactory()
    checker = DebouncedTextCheck(results.append, delay=0.3, timer_factory=timers)

    checker.on_input("")
    assert results == []
    assert checker.pending
    assert timers.last.delay == 0.3

    timers.last.fire()
    assert results == [TextCheck(False, "Task cannot be empty")]
    assert not checker.pending


def test_new_input_cancels_previous_timer() -> None:
    results: list[TextCheck] = []
    timers = ManualTimerFactory()
    checker = DebouncedTextCheck(results.append, timer_factory=timers)

    checker.on_input("")
    first = timers.last
    checker.on_input("Valid text")

    assert first.cancelled
    first.fire()  # cancelled: no effect
    assert results == []

    timers.last.fire()
    assert results == [TextCheck(True)]


def test_blur_validates_immediately_and_cancels_pending() -> None:
    results: list[TextCheck] = []
    timers = ManualTimerFactory()
    checker = DebouncedTextCheck(results.append, timer_factory=timers)

    checker.on_input("draft")
    pending = timers.last

    assert checker.on_blur("") == TextCheck(False, "Task cannot be empty")
    assert pending.cancelled
    assert not checker.pending
    assert results == [TextCheck(False, "Task cannot be empty")]


def test_remove_and_blur_report_the_same_result() -> None:
    timers = ManualTimerFactory()
    checker = DebouncedTextCheck(lambda _: None, max_chars=3, timer_factory=timers)

    checker.on_input("abcd")
    assert checker.on_remove("abcd") == checker.on_blur("abcd")
    assert timers.last.cancelled


def test_stale_timer_does_not_fire_after_blur() -> None:
    results: list[TextCheck] = []
    timers = ManualTimerFactory()
    checker = DebouncedTextCheck(results.append, timer_factory=timers)

    checker.on_input("a")
    stale = timers.last
    checker.on_blur("a")
    stale.cancelled = False  # simulate a timer that raced past cancel()
    stale.fire()

    assert results == [TextCheck(True)]


def test_cancel_drops_pending_check_without_reporting() -> None:
    results: list[TextCheck] = []
    timers = ManualTimerFactory()
    check = DebouncedTextCheck(results.append, timer_factory=timers)

    check.on_input("draft")
    check.cancel()
    timers.last.fire()

    assert timers.last.cancelled
    assert not check.pending
    assert results == []
