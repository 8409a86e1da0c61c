# src/brief2check/tasks/export.py

"""
Plain-text export of the checklist.

Output depends only on (department, collection, now), so it can be compared
literally in tests and against what the user copies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from .normalizer import normalize_item
from .task_models import sort_departments

STATUS_COMPLETED = "   Status: Completed"
STATUS_PENDING = "   Status: Pending"


def format_timestamp(now: datetime) -> str:
    """Locale representation of `now` (strftime %c)."""
    return now.strftime("%c")


def format_department(
    department: str,
    collection: Mapping[str, Sequence[Any]],
    now: datetime,
) -> str:
    """Render one department; returns "" when it has no tasks."""
    tasks = collection.get(department) or []
    if not tasks:
        return ""

    lines = [
        f"{department} Checklist",
        f"Exported: {format_timestamp(now)}",
        "",
    ]
    for i, item in enumerate(tasks, start=1):
        task = normalize_item(item)
        lines.append(f"{i}. {task.text}")
        lines.append(STATUS_COMPLETED if task.completed else STATUS_PENDING)
    return "\n".join(lines)


def format_collection(collection: Mapping[str, Sequence[Any]], now: datetime) -> str:
    blocks = [format_department(dept, collection, now) for dept in sort_departments(collection)]
    return "\n\n".join(b for b in blocks if b)
