# src/brief2check/tasks/normalizer.py

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .task_models import Task, TaskCollection


def normalize_item(item: Any) -> Task:
    """
    Coerce one payload item into a Task.

    Precedence: task record (keeps completion) > plain string > anything else (stringified).
    `completed` is True only for a real boolean True, never for "true" or 1.
    """
    if isinstance(item, Task):
        return Task(text=str(item.text or ""), completed=item.completed is True)
    if isinstance(item, Mapping) and "text" in item:
        return Task(text=str(item.get("text") or ""), completed=item.get("completed") is True)
    if isinstance(item, str):
        return Task(text=item, completed=False)
    return Task(text=str(item), completed=False)


def normalize(validated: Mapping[str, Any]) -> TaskCollection:
    """
    Build a fresh TaskCollection from a validated payload.

    Never raises on validated input and is idempotent:
    normalize(normalize(x)) == normalize(x).
    A department value that is not a list becomes an empty list.
    """
    out: TaskCollection = {}
    for department, tasks in validated.items():
        if not isinstance(tasks, list):
            out[str(department)] = []
            continue
        out[str(department)] = [normalize_item(t) for t in tasks]
    return out
