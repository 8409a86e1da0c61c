# tests/test_validator.py

from __future__ import annotations

import pytest

from brief2check.core.errors import SchemaError
from brief2check.tasks.task_models import Task
from brief2check.tasks.validator import validate


def test_valid_string_payload() -> None:
    result = validate({"Marketing": ["a", "b"], "Legal": []})
    assert result.is_valid
    assert result.error is None


def test_valid_round_trip_payload() -> None:
    result = validate({"Product": [{"text": "Ship", "completed": True}, "legacy string"]})
    assert result.is_valid


def test_valid_task_instances() -> None:
    assert validate({"Brand": [Task("Logo", False)]}).is_valid


def test_array_payload_rejected() -> None:
    result = validate([1, 2, 3])
    assert not result.is_valid
    assert result.actual == "array"
    assert "expected an object" in (result.error or "")


@pytest.mark.parametrize("value", [None, "text", 42, True])
def test_scalar_payload_rejected(value) -> None:
    assert not validate(value).is_valid


def test_non_array_department_names_key_and_type() -> None:
    result = validate({"A": "not-array"})
    assert not result.is_valid
    assert result.key == "A"
    assert result.actual == "string"
    assert '"A"' in (result.error or "")
    assert "string" in (result.error or "")


def test_mixed_items_rejected_with_key() -> None:
    result = validate({"Marketing": ["ok"], "Legal": ["ok", 3]})
    assert not result.is_valid
    assert result.key == "Legal"
    assert result.actual == "number"


def test_object_without_text_rejected() -> None:
    result = validate({"Other": [{"completed": True}]})
    assert not result.is_valid
    assert result.key == "Other"


def test_empty_object_rejected() -> None:
    result = validate({})
    assert not result.is_valid
    assert "no departments" in (result.error or "")


def test_per_key_checks_run_before_empty_check() -> None:
    result = validate({"Marketing": None})
    assert result.key == "Marketing"
    assert result.actual == "null"


def test_raise_for_error_carries_details() -> None:
    with pytest.raises(SchemaError) as exc_info:
        validate({"A": {"nested": 1}}).raise_for_error()
    assert exc_info.value.key == "A"
    assert exc_info.value.expected == "array"
    assert exc_info.value.actual == "object"


def test_unknown_departments_accepted() -> None:
    assert validate({"Finance": ["Check budget"]}).is_valid
