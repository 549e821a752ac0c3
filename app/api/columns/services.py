import logging
from typing import Optional

from sqlalchemy.orm import Session
from app.db.models.kanban import BoardColumn
from app.core import statuses
from app.core.errors import ConflictError
from . import schemas

logger = logging.getLogger(__name__)


def _ensure_status_available(db: Session, board_id: str, status: str, exclude_id: Optional[str] = None):
    """Reject statuses that would merge two columns' task groupings."""
    if statuses.is_static(status):
        raise ConflictError(f"Status '{status}' is reserved for a built-in column")
    query = db.query(BoardColumn.id).filter(
        BoardColumn.board_id == board_id,
        BoardColumn.status == status,
    )
    if exclude_id is not None:
        query = query.filter(BoardColumn.id != exclude_id)
    if query.first() is not None:
        raise ConflictError(f"A column with status '{status}' already exists on this board")


def create_column(db: Session, column: schemas.ColumnCreate):
    """Insert a column at the end of the board. The board must exist."""
    _ensure_status_available(db, column.board_id, column.status)
    existing = db.query(BoardColumn).filter(BoardColumn.board_id == column.board_id).all()
    db_column = BoardColumn(
        title=column.title,
        status=column.status,
        board_id=column.board_id,
        order=statuses.next_column_order(existing),
    )
    db.add(db_column)
    db.commit()
    db.refresh(db_column)
    logger.info("Created column %s (%s) on board %s at order %d",
                db_column.id, db_column.status, db_column.board_id, db_column.order)
    return db_column


def get_columns(db: Session, board_id: Optional[str] = None):
    query = db.query(BoardColumn)
    if board_id:
        query = query.filter(BoardColumn.board_id == board_id)
    return query.order_by(BoardColumn.order.asc(), BoardColumn.created_at.asc()).all()


def get_column(db: Session, column_id: str):
    return db.query(BoardColumn).filter(BoardColumn.id == column_id).first()


def update_column(db: Session, column_id: str, column: schemas.ColumnUpdate):
    db_column = get_column(db, column_id)
    if db_column:
        changes = column.model_dump(exclude_unset=True)
        new_status = changes.get("status")
        if new_status is not None and new_status != db_column.status:
            _ensure_status_available(db, db_column.board_id, new_status, exclude_id=db_column.id)
        for key, value in changes.items():
            setattr(db_column, key, value)
        db.commit()
        db.refresh(db_column)
    return db_column


def delete_column(db: Session, column_id: str):
    """Delete the column row only. Tasks with its status keep that status."""
    db_column = get_column(db, column_id)
    if db_column:
        if not statuses.is_deletable(db_column.status):
            raise ConflictError(f"Column '{db_column.status}' cannot be deleted")
        status, board_id = db_column.status, db_column.board_id
        db.delete(db_column)
        db.commit()
        logger.info("Deleted column %s (%s) from board %s", column_id, status, board_id)
    return db_column
