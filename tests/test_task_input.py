# tests/test_task_input.py

from __future__ import annotations

from datetime import date

import pytest

from todo_list.errors import ValidationError
from todo_list.tasks.task_input import build_task, format_due, parse_due_date, parse_priority
from todo_list.tasks.task_models import Priority, Task


def test_build_task_strips_title_and_defaults() -> None:
    t = build_task("  Buy milk  ")
    assert t == Task("Buy milk", None, Priority.MEDIUM, False)


def test_build_task_with_all_fields() -> None:
    t = build_task("Pay rent", "2025-01-01", "High", done=True)
    assert t == Task("Pay rent", date(2025, 1, 1), Priority.HIGH, True)


@pytest.mark.parametrize("title", ["", "   ", None])
def test_empty_title_rejected(title) -> None:
    with pytest.raises(ValidationError, match="title"):
        build_task(title)


@pytest.mark.parametrize("text", ["2025/01/01", "01-01-2025", "20250101", "2025-02-30", "tomorrow"])
def test_bad_due_date_rejected(text: str) -> None:
    with pytest.raises(ValidationError, match="yyyy-MM-dd"):
        parse_due_date(text)


def test_blank_due_date_means_none() -> None:
    assert parse_due_date("") is None
    assert parse_due_date("  ") is None
    assert parse_due_date(None) is None


def test_priority_is_case_sensitive() -> None:
    assert parse_priority("Low") is Priority.LOW
    assert parse_priority(Priority.HIGH) is Priority.HIGH
    with pytest.raises(ValidationError):
        parse_priority("low")
    with pytest.raises(ValidationError):
        parse_priority("Urgent")


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        build_task("x", "nope")


def test_format_due() -> None:
    assert format_due(date(2025, 1, 1)) == "2025-01-01"
    assert format_due(None) == ""
    assert format_due(Task("x")) == ""
    assert format_due(Task("x", date(2024, 2, 29))) == "2024-02-29"
