# tests/test_normalizer.py

from __future__ import annotations

from brief2check.tasks.normalizer import normalize, normalize_item
from brief2check.tasks.task_models import Task
from brief2check.tasks.validator import validate


def test_strings_become_incomplete_tasks() -> None:
    payload = {"Marketing": ["Use brand blue", "Set CTA"], "Legal": []}
    assert validate(payload).is_valid

    out = normalize(payload)

    assert out == {
        "Marketing": [Task("Use brand blue", False), Task("Set CTA", False)],
        "Legal": [],
    }


def test_task_records_keep_completion() -> None:
    out = normalize({"Product": [{"text": "Ship", "completed": True}, {"text": "Test"}]})
    assert out["Product"] == [Task("Ship", True), Task("Test", False)]


def test_completed_is_strict_boolean() -> None:
    out = normalize(
        {
            "Brand": [
                {"text": "a", "completed": "true"},
                {"text": "b", "completed": 1},
                {"text": "c", "completed": True},
            ]
        }
    )
    assert [t.completed for t in out["Brand"]] == [False, False, True]


def test_text_coerced_to_string() -> None:
    out = normalize({"Other": [{"text": 42}, {"text": None}]})
    assert out["Other"] == [Task("42", False), Task("", False)]


def test_fallback_stringifies_unknown_items() -> None:
    assert normalize_item(3.5) == Task("3.5", False)


def test_non_list_department_becomes_empty() -> None:
    assert normalize({"Legal": "oops", "Brand": ["x"]}) == {"Legal": [], "Brand": [Task("x")]}


def test_idempotent_on_canonical_collection() -> None:
    once = normalize({"Marketing": ["a", {"text": "b", "completed": True}], "Finance": []})
    twice = normalize(once)
    assert twice == once
    # fresh objects: normalizing must not alias the input records
    assert twice["Marketing"][0] is not once["Marketing"][0]


def test_idempotent_on_round_trip_dicts() -> None:
    data = {"Legal": [{"text": "Add T&C", "completed": True}]}
    assert normalize(normalize(data)) == normalize(data)
