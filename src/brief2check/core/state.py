# src/brief2check/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_store import TaskStore
from ..tasks.text_check import DebouncedTextCheck
from .notices import ErrorNotice
from .ports import LLMClient


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: Any

    llm: LLMClient
    task_store: TaskStore
    notice: ErrorNotice

    # Held for the duration of one provider call; at most one parse in flight.
    parse_lock: threading.Lock = field(default_factory=threading.Lock)
    last_instructions: str = ""

    # Debounced text checkers for fields being edited, keyed by (department, index).
    field_checks: dict[tuple[str, int], DebouncedTextCheck] = field(default_factory=dict)
