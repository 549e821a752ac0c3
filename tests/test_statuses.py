from types import SimpleNamespace

import pytest

from app.core import statuses


def _column(status, order, title=None, id=None):
    return SimpleNamespace(id=id or f"col-{status}", status=status, order=order, title=title or status.title())


def _board(columns=(), tasks=()):
    return SimpleNamespace(columns=list(columns), tasks=list(tasks))


@pytest.mark.parametrize("title, expected", [
    ("In Review", "IN_REVIEW"),
    ("code   review", "CODE_REVIEW"),
    ("Code\tReview\nNow", "CODE_REVIEW_NOW"),
    ("qa", "QA"),
    ("  Blocked  ", "BLOCKED"),
])
def test_derive_status_key(title, expected):
    assert statuses.derive_status_key(title) == expected


@pytest.mark.parametrize("title", ["In Review", "code   review", "already_KEY", " x y ", "Straße 2"])
def test_derive_status_key_is_idempotent(title):
    once = statuses.derive_status_key(title)
    assert statuses.derive_status_key(once) == once


def test_differently_worded_titles_share_a_key():
    assert statuses.derive_status_key("In  review") == statuses.derive_status_key("IN REVIEW")


def test_next_column_order():
    assert statuses.next_column_order([]) == 0
    assert statuses.next_column_order([_column("A", 0), _column("B", 3)]) == 4
    assert statuses.next_column_order([_column("A", 0)]) == 1


@pytest.mark.parametrize("status, deletable", [
    ("TODO", False),
    ("IN_PROGRESS", False),
    ("DONE", False),
    ("CODE_REVIEW", True),
    ("todo", True),
])
def test_is_deletable(status, deletable):
    assert statuses.is_deletable(status) is deletable


def test_assign_task_status_accepts_any_string():
    task = SimpleNamespace(status="TODO")
    assert statuses.assign_task_status(task, "NOT A COLUMN") is task
    assert task.status == "NOT A COLUMN"


def test_effective_columns_without_stored_columns():
    columns = statuses.effective_columns(_board())
    assert [(c.status, c.title, c.is_static) for c in columns] == [
        ("TODO", "TODO", True),
        ("IN_PROGRESS", "DOING", True),
        ("DONE", "DONE", True),
    ]


def test_effective_columns_static_first_then_by_order():
    board = _board([
        _column("QA", 5),
        _column("IN_REVIEW", 1, title="In Review"),
        _column("BLOCKED", 1),
    ])
    columns = statuses.effective_columns(board)
    assert [c.status for c in columns] == ["TODO", "IN_PROGRESS", "DONE", "IN_REVIEW", "BLOCKED", "QA"]
    assert [c.is_static for c in columns] == [True, True, True, False, False, False]
    assert columns[3].title == "In Review"
    assert columns[3].column_id == "col-IN_REVIEW"


def test_stored_static_status_overrides_label_in_place():
    board = _board([_column("DONE", 0, title="Shipped", id="c1"), _column("QA", 1)])
    columns = statuses.effective_columns(board)
    assert [c.status for c in columns] == ["TODO", "IN_PROGRESS", "DONE", "QA"]
    assert columns[2].title == "Shipped"
    assert columns[2].is_static is True
    assert columns[2].column_id == "c1"


def test_repeated_stored_status_is_shown_once():
    board = _board([_column("QA", 2, title="Second"), _column("QA", 0, title="First")])
    columns = statuses.effective_columns(board)
    assert [c.title for c in columns if c.status == "QA"] == ["First"]


def test_group_tasks_partitions_by_status():
    tasks = [
        SimpleNamespace(title="a", status="TODO"),
        SimpleNamespace(title="b", status="IN_REVIEW"),
        SimpleNamespace(title="c", status="GONE"),
        SimpleNamespace(title="d", status="TODO"),
    ]
    groups, unassigned = statuses.group_tasks(_board([_column("IN_REVIEW", 0)], tasks))
    grouped = {column.status: [t.title for t in group] for column, group in groups}
    assert grouped == {"TODO": ["a", "d"], "IN_PROGRESS": [], "DONE": [], "IN_REVIEW": ["b"]}
    assert [t.title for t in unassigned] == ["c"]


def test_derive_status_key_drops_trailing_whitespace():
    assert statuses.derive_status_key("In Review ") == "IN_REVIEW"
