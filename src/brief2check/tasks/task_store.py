# src/brief2check/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .normalizer import normalize
from .task_models import Progress, Task, TaskCollection, sort_departments
from .text_check import MAX_TASK_CHARS, check_task_text

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection for the current session.

    Addressing:
    - a task is addressed by (department, index), where index is the current list offset;
    - remove() shifts every later task in that department down by one, so callers
      must re-read indices after add/remove.

    Operations never raise on bad addresses: missing departments/slots are created
    (set_text/set_completed) or the call is a no-op (remove). Text validity is
    advisory and reported by text_issues(); it never blocks a write.
    """

    def __init__(self, *, max_task_chars: int = MAX_TASK_CHARS) -> None:
        self._data: TaskCollection = {}
        self._max_task_chars = int(max_task_chars)

    # ---- low-level helpers ----

    def _department(self, department: str) -> list[Task]:
        tasks = self._data.get(department)
        if not isinstance(tasks, list):
            tasks = []
            self._data[department] = tasks
        return tasks

    def _slot(self, department: str, index: int) -> Task | None:
        """Return the Task at (department, index), creating/healing it if needed."""
        if index < 0:
            logger.warning("TaskStore: ignoring negative index dept=%s index=%s", department, index)
            return None

        tasks = self._department(department)
        while len(tasks) <= index:
            tasks.append(Task())

        slot: Any = tasks[index]
        if not isinstance(slot, Task):
            # Keep whatever text the malformed slot carried.
            slot = Task(text="" if slot is None else str(slot), completed=False)
            tasks[index] = slot
        return slot

    # ---- public API ----

    def seed(self, collection: Mapping[str, Any]) -> None:
        """Replace the whole store with a freshly normalized collection."""
        self._data = normalize(collection)
        p = self.progress()
        logger.info(
            "TaskStore seeded departments=%d tasks=%d completed=%d",
            len(self._data),
            p.total,
            p.completed,
        )

    def is_empty(self) -> bool:
        return not self._data

    def departments(self) -> list[str]:
        """Department names in display order."""
        return sort_departments(self._data.keys())

    def tasks(self, department: str) -> list[Task]:
        return [Task(t.text, t.completed) for t in self._data.get(department, [])]

    def get(self, department: str, index: int) -> Task | None:
        tasks = self._data.get(department, [])
        if 0 <= index < len(tasks):
            t = tasks[index]
            return Task(t.text, t.completed)
        return None

    def snapshot(self) -> TaskCollection:
        """Read-only copy of the full collection (mutating it does not touch the store)."""
        return {dept: self.tasks(dept) for dept in self.departments()}

    def set_text(self, department: str, index: int, text: Any) -> None:
        slot = self._slot(department, index)
        if slot is None:
            return
        slot.text = "" if text is None else str(text)
        logger.debug("TaskStore text updated dept=%s index=%d len=%d", department, index, len(slot.text))

    def set_completed(self, department: str, index: int, completed: Any) -> None:
        slot = self._slot(department, index)
        if slot is None:
            return
        slot.completed = completed is True
        logger.debug(
            "TaskStore completion updated dept=%s index=%d completed=%s",
            department,
            index,
            slot.completed,
        )

    def add(self, department: str) -> int:
        """Append an empty, incomplete task and return its index."""
        tasks = self._department(department)
        tasks.append(Task())
        index = len(tasks) - 1
        logger.debug("TaskStore task added dept=%s index=%d", department, index)
        return index

    def remove(self, department: str, index: int) -> None:
        tasks = self._data.get(department)
        if not isinstance(tasks, list) or not 0 <= index < len(tasks):
            logger.debug("TaskStore remove ignored dept=%s index=%s", department, index)
            return
        del tasks[index]
        logger.debug("TaskStore task removed dept=%s index=%d", department, index)

    def progress(self) -> Progress:
        total = 0
        completed = 0
        for tasks in self._data.values():
            for t in tasks:
                total += 1
                if isinstance(t, Task) and t.completed is True:
                    completed += 1
        return Progress(completed=completed, total=total)

    def text_issues(self) -> list[str]:
        """Advisory messages for tasks whose text would fail validation (1-based positions)."""
        issues: list[str] = []
        for dept in self.departments():
            for i, t in enumerate(self._data[dept], start=1):
                check = check_task_text(t.text, self._max_task_chars)
                if not check.is_valid:
                    issues.append(f"{dept} task {i}: {check.error}")
        return issues
