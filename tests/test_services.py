import pytest
from sqlalchemy.orm import Session

import app.api.boards.services as board_services
import app.api.columns.services as column_services
import app.api.tasks.services as task_services
import app.api.boards.schemas as board_schemas
import app.api.columns.schemas as column_schemas
import app.api.tasks.schemas as task_schemas
from app.core.errors import ConflictError
from app.db.models.kanban import Board, BoardColumn, Task, Priority


def _create_board(session: Session, title: str = "Sprint 1"):
    return board_services.create_board(session, board_schemas.BoardCreate(title=title))


def _create_column(session: Session, board, title: str, status: str):
    column_in = column_schemas.ColumnCreate(title=title, status=status, board_id=board.id)
    return column_services.create_column(session, column_in)


def _create_task(session: Session, board, title: str, **fields):
    task_in = task_schemas.TaskCreate(title=title, board_id=board.id, **fields)
    return task_services.create_task(session, task_in)


def test_task_defaults(db_session: Session):
    board = _create_board(db_session)
    task = _create_task(db_session, board, "Fix bug")
    assert task.status == "TODO"
    assert task.priority == Priority.MEDIUM

    blank_status = _create_task(db_session, board, "Other", status="")
    assert blank_status.status == "TODO"


def test_column_orders_are_assigned_in_sequence(db_session: Session):
    board = _create_board(db_session)
    first = _create_column(db_session, board, "In Review", "IN_REVIEW")
    second = _create_column(db_session, board, "QA", "QA")
    assert (first.order, second.order) == (0, 1)

    column_services.update_column(db_session, first.id, column_schemas.ColumnUpdate(order=7))
    third = _create_column(db_session, board, "Blocked", "BLOCKED")
    assert third.order == 8


def test_column_orders_are_per_board(db_session: Session):
    board_a = _create_board(db_session, "A")
    board_b = _create_board(db_session, "B")
    _create_column(db_session, board_a, "QA", "QA")
    assert _create_column(db_session, board_b, "QA", "QA").order == 0


def test_column_status_collisions_are_rejected(db_session: Session):
    board = _create_board(db_session)
    _create_column(db_session, board, "In Review", "IN_REVIEW")

    with pytest.raises(ConflictError):
        _create_column(db_session, board, "in  review", "IN_REVIEW")
    with pytest.raises(ConflictError):
        _create_column(db_session, board, "Done", "DONE")
    assert db_session.query(BoardColumn).count() == 1


def test_column_status_update_collision(db_session: Session):
    board = _create_board(db_session)
    review = _create_column(db_session, board, "In Review", "IN_REVIEW")
    qa = _create_column(db_session, board, "QA", "QA")

    with pytest.raises(ConflictError):
        column_services.update_column(db_session, qa.id, column_schemas.ColumnUpdate(status="IN_REVIEW"))

    # keeping its own status is not a collision
    updated = column_services.update_column(
        db_session, review.id, column_schemas.ColumnUpdate(title="Review", status="IN_REVIEW"))
    assert updated.title == "Review"


def test_deleting_column_leaves_tasks_untouched(db_session: Session):
    board = _create_board(db_session)
    column = _create_column(db_session, board, "In Review", "IN_REVIEW")
    task = _create_task(db_session, board, "Fix bug", status="IN_REVIEW")

    assert column_services.delete_column(db_session, column.id) is not None
    db_session.expire_all()
    assert db_session.get(Task, task.id).status == "IN_REVIEW"
    assert column_services.get_column(db_session, column.id) is None


def test_static_column_rows_cannot_be_deleted(db_session: Session):
    board = _create_board(db_session)
    legacy = BoardColumn(title="Finished", status="DONE", board_id=board.id, order=0)
    db_session.add(legacy)
    db_session.commit()

    with pytest.raises(ConflictError):
        column_services.delete_column(db_session, legacy.id)
    assert column_services.get_column(db_session, legacy.id) is not None


def test_delete_board_cascades(db_session: Session):
    board = _create_board(db_session)
    other = _create_board(db_session, "Other")
    _create_column(db_session, board, "QA", "QA")
    _create_task(db_session, board, "One")
    _create_task(db_session, board, "Two", status="QA")
    kept = _create_task(db_session, other, "Kept")

    board_services.delete_board(db_session, board.id)

    assert db_session.query(Board).count() == 1
    assert db_session.query(BoardColumn).count() == 0
    assert [t.id for t in db_session.query(Task).all()] == [kept.id]


def test_update_task_status_and_fields(db_session: Session):
    board = _create_board(db_session)
    task = _create_task(db_session, board, "Fix bug", priority=Priority.LOW)

    updated = task_services.update_task(
        db_session, task.id, task_schemas.TaskUpdate(status="ANYTHING", priority="HIGH"))
    assert updated.status == "ANYTHING"
    assert updated.priority == Priority.HIGH
    assert updated.title == "Fix bug"


def test_missing_entities_return_none(db_session: Session):
    assert board_services.get_board(db_session, "missing") is None
    assert board_services.update_board(db_session, "missing", board_schemas.BoardUpdate(title="x")) is None
    assert task_services.delete_task(db_session, "missing") is None
    assert column_services.update_column(db_session, "missing", column_schemas.ColumnUpdate(order=1)) is None
    assert board_services.board_exists(db_session, "missing") is False


def test_board_view_groups_tasks(db_session: Session):
    board = _create_board(db_session)
    _create_column(db_session, board, "In Review", "IN_REVIEW")
    _create_task(db_session, board, "Fix bug", status="IN_REVIEW")
    _create_task(db_session, board, "Write docs")
    _create_task(db_session, board, "Lost", status="ARCHIVED")

    view = board_services.build_board_view(board_services.get_board(db_session, board.id))

    assert [c.status for c in view.columns] == ["TODO", "IN_PROGRESS", "DONE", "IN_REVIEW"]
    review = view.columns[3]
    assert review.title == "In Review"
    assert [t.title for t in review.tasks] == ["Fix bug"]
    assert [t.title for t in view.columns[0].tasks] == ["Write docs"]
    assert [t.title for t in view.unassigned_tasks] == ["Lost"]
