# src/brief2check/tasks/validator.py

"""
Structural validation of the parsed provider payload.

Rules (checked in order, first failure wins):
1. the value is a mapping (arrays and scalars are rejected);
2. every department value is a list;
3. every item is a string or a task record (mapping / Task with "text");
4. there is at least one department.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..core.errors import SchemaError
from .task_models import Task


@dataclass(slots=True, frozen=True)
class ValidationResult:
    is_valid: bool
    error: str | None = None
    key: str | None = None
    expected: str | None = None
    actual: str | None = None

    def raise_for_error(self) -> None:
        if self.is_valid:
            return
        raise SchemaError(
            self.error or "Invalid response structure",
            key=self.key,
            expected=self.expected,
            actual=self.actual,
        )


_OK = ValidationResult(is_valid=True)


def json_type_name(value: Any) -> str:
    """Type name as a JSON reader would describe it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, (Mapping, Task)):
        return "object"
    return type(value).__name__


def is_task_record(item: Any) -> bool:
    if isinstance(item, Task):
        return True
    return isinstance(item, Mapping) and "text" in item


def validate(value: Any) -> ValidationResult:
    if not isinstance(value, Mapping):
        return ValidationResult(
            is_valid=False,
            error="Invalid response: expected an object with department keys, "
            f"got {json_type_name(value)}",
            expected="object",
            actual=json_type_name(value),
        )

    for key, tasks in value.items():
        if not isinstance(tasks, list):
            actual = json_type_name(tasks)
            return ValidationResult(
                is_valid=False,
                error=f'Invalid structure: department "{key}" should be an array, got {actual}',
                key=str(key),
                expected="array",
                actual=actual,
            )

        for item in tasks:
            if isinstance(item, str) or is_task_record(item):
                continue
            actual = json_type_name(item)
            return ValidationResult(
                is_valid=False,
                error=f'Invalid structure: department "{key}" contains non-string items',
                key=str(key),
                expected="string or task record",
                actual=actual,
            )

    if not value:
        return ValidationResult(
            is_valid=False,
            error="Invalid response: no departments found in the response",
        )

    return _OK
