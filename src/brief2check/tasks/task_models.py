# src/brief2check/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Final

DEPARTMENT_ORDER: Final[tuple[str, ...]] = ("Marketing", "Product", "Legal", "Brand", "Other")


@dataclass(slots=True)
class Task:
    """
    A single checklist item.

    `text` may be empty while the user is editing; `completed` is always a real bool.
    """

    text: str = ""
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "completed": self.completed}


TaskCollection = dict[str, list[Task]]


@dataclass(slots=True, frozen=True)
class Progress:
    completed: int
    total: int


def sort_departments(names: Iterable[str]) -> list[str]:
    """Known departments first (fixed order), then unknown ones sorted by name."""
    names = list(names)
    rank = {name: i for i, name in enumerate(DEPARTMENT_ORDER)}
    known = sorted((n for n in names if n in rank), key=rank.__getitem__)
    unknown = sorted(n for n in names if n not in rank)
    return known + unknown


def collection_to_dict(collection: TaskCollection) -> dict[str, list[dict[str, Any]]]:
    return {dept: [t.to_dict() for t in tasks] for dept, tasks in collection.items()}
