# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from brief2check.core.notices import ErrorNotice
from brief2check.core.state import AppState
from brief2check.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeLLMClient


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="brief2check-test",
        data_dir=tmp_path / "data",
        offline=False,
        llm_models=["fake/model"],
        validation_debounce_ms=300,
        validation_debounce_seconds=0.3,
        max_task_chars=1000,
        error_display_seconds=5.0,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def llm() -> FakeLLMClient:
    return FakeLLMClient('{"Marketing": ["Launch teaser"], "Legal": ["Add T&C footer"]}')


@pytest.fixture()
def state(settings: SimpleNamespace, llm: FakeLLMClient, clock: FakeClock) -> AppState:
    """AppState wired with a fake LLM and a fake clock for the error notice."""
    return AppState(
        settings=settings,
        llm=llm,
        task_store=TaskStore(max_task_chars=settings.max_task_chars),
        notice=ErrorNotice(display_seconds=settings.error_display_seconds, clock=clock),
    )
