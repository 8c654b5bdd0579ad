# tests/test_task_store.py

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from todo_list.errors import IndexOutOfRange
from todo_list.tasks.task_models import ChangeKind, Priority, Task, TaskChange
from todo_list.tasks.task_store import TaskStore

from .fakes import ExplodingObserver, RecordingObserver


def test_insert_front_then_get_returns_same_task(store: TaskStore) -> None:
    t = Task("Write report", date(2025, 3, 1), Priority.HIGH, False)
    store.insert_front(t)
    assert store.get(0) == t
    assert len(store) == 1


def test_newest_first_and_done_toggle_isolated(store: TaskStore) -> None:
    store.insert_front(Task("Buy milk", None, Priority.LOW, False))
    store.insert_front(Task("Pay rent", date(2025, 1, 1), Priority.HIGH, False))

    assert [t.title for t in store.snapshot()] == ["Pay rent", "Buy milk"]

    store.set_done(0, True)
    assert store.get(0).done is True
    assert store.get(1) == Task("Buy milk", None, Priority.LOW, False)


def test_remove_at_shifts_following_tasks(store: TaskStore, sample_tasks: list[Task]) -> None:
    store.replace_all(sample_tasks)

    removed = store.remove_at(0)

    assert removed.title == "Pay rent"
    assert len(store) == 2
    assert list(store.snapshot()) == sample_tasks[1:]


@pytest.mark.parametrize("bad", [-1, 3, 99])
def test_out_of_range_leaves_list_unchanged(
    store: TaskStore, sample_tasks: list[Task], bad: int
) -> None:
    store.replace_all(sample_tasks)
    before = [replace(t) for t in store.snapshot()]
    obs = RecordingObserver()
    store.subscribe(obs)

    with pytest.raises(IndexOutOfRange):
        store.get(bad)
    with pytest.raises(IndexOutOfRange):
        store.remove_at(bad)
    with pytest.raises(IndexOutOfRange):
        store.update_at(bad, title="x")
    with pytest.raises(IndexOutOfRange):
        store.set_done(bad, True)

    assert list(store.snapshot()) == before
    assert obs.changes == []


def test_index_out_of_range_is_an_index_error(store: TaskStore) -> None:
    with pytest.raises(IndexError) as exc_info:
        store.get(0)
    assert exc_info.value.index == 0
    assert exc_info.value.length == 0


def test_update_at_mutates_in_place(store: TaskStore) -> None:
    t = Task("Draft", None, Priority.LOW, False)
    store.insert_front(t)

    updated = store.update_at(0, title="Final", due_date=date(2025, 5, 5), priority="High")

    assert updated is t
    assert store.get(0) is t
    assert t == Task("Final", date(2025, 5, 5), Priority.HIGH, False)


def test_update_at_rejects_bad_changes_without_partial_apply(store: TaskStore) -> None:
    t = Task("Draft", None, Priority.LOW, False)
    store.insert_front(t)
    obs = RecordingObserver()
    store.subscribe(obs)

    with pytest.raises(TypeError):
        store.update_at(0, title="Changed", colour="red")
    with pytest.raises(ValueError):
        store.update_at(0, title="Changed", priority="urgent")
    with pytest.raises(TypeError):
        store.update_at(0, title="Changed", done="yes")

    assert t == Task("Draft", None, Priority.LOW, False)
    assert obs.changes == []


def test_replace_all_adopts_sequence_verbatim(store: TaskStore, sample_tasks: list[Task]) -> None:
    store.insert_front(Task("old", None, Priority.MEDIUM, False))

    store.replace_all(sample_tasks)

    assert list(store.snapshot()) == sample_tasks
    sample_tasks.append(Task("later", None, Priority.LOW, False))
    assert len(store) == 3


def test_snapshot_is_read_only(store: TaskStore, sample_tasks: list[Task]) -> None:
    store.replace_all(sample_tasks)
    snap = store.snapshot()
    assert isinstance(snap, tuple)
    with pytest.raises(AttributeError):
        snap.append(Task("x"))  # type: ignore[attr-defined]


def test_change_events(store: TaskStore, sample_tasks: list[Task]) -> None:
    obs = RecordingObserver()
    store.subscribe(obs)

    store.insert_front(Task("a"))
    store.update_at(0, title="b")
    store.set_done(0, True)
    store.remove_at(0)
    store.replace_all(sample_tasks)

    assert obs.changes == [
        TaskChange(ChangeKind.INSERTED, 0),
        TaskChange(ChangeKind.UPDATED, 0),
        TaskChange(ChangeKind.UPDATED, 0),
        TaskChange(ChangeKind.REMOVED, 0),
        TaskChange(ChangeKind.RESET, None),
    ]


def test_unsubscribe_and_failing_observer(store: TaskStore) -> None:
    bad = ExplodingObserver()
    good = RecordingObserver()
    store.subscribe(bad)
    unsubscribe = store.subscribe(good)

    store.insert_front(Task("a"))
    assert bad.calls == 1
    assert good.kinds == [ChangeKind.INSERTED]
    assert len(store) == 1

    unsubscribe()
    unsubscribe()
    store.insert_front(Task("b"))
    assert good.kinds == [ChangeKind.INSERTED]


@pytest.mark.parametrize("bad_due", ["2025-01-01", 20250101, datetime(2025, 1, 1, 9, 30)])
def test_update_at_rejects_non_date_due(store: TaskStore, bad_due) -> None:
    t = Task("Draft", date(2024, 6, 1), Priority.LOW, False)
    store.insert_front(t)
    obs = RecordingObserver()
    store.subscribe(obs)

    with pytest.raises(TypeError, match="due_date"):
        store.update_at(0, title="Changed", due_date=bad_due)

    assert t == Task("Draft", date(2024, 6, 1), Priority.LOW, False)
    assert obs.changes == []


def test_update_at_accepts_date_or_none_for_due(store: TaskStore) -> None:
    store.insert_front(Task("Draft", None, Priority.LOW, False))
    store.update_at(0, due_date=date(2025, 1, 1))
    assert store.get(0).due_date == date(2025, 1, 1)
    store.update_at(0, due_date=None)
    assert store.get(0).due_date is None
