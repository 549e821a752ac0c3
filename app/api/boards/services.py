import logging

from sqlalchemy.orm import Session, selectinload
from app.db.models.kanban import Board
from app.core import statuses
from . import schemas

logger = logging.getLogger(__name__)


def _board_query(db: Session):
    return db.query(Board).options(selectinload(Board.tasks), selectinload(Board.columns))


def create_board(db: Session, board: schemas.BoardCreate):
    db_board = Board(**board.model_dump())
    db.add(db_board)
    db.commit()
    db.refresh(db_board)
    logger.info("Created board %s", db_board.id)
    return db_board


def get_boards(db: Session):
    return _board_query(db).order_by(Board.created_at.desc()).all()


def get_board(db: Session, board_id: str):
    return _board_query(db).filter(Board.id == board_id).first()


def board_exists(db: Session, board_id: str) -> bool:
    return db.query(Board.id).filter(Board.id == board_id).first() is not None


def update_board(db: Session, board_id: str, board: schemas.BoardUpdate):
    db_board = get_board(db, board_id)
    if db_board:
        for key, value in board.model_dump(exclude_unset=True).items():
            setattr(db_board, key, value)
        db.commit()
        db.refresh(db_board)
    return db_board


def delete_board(db: Session, board_id: str):
    """Delete a board together with its tasks and columns in one commit."""
    db_board = get_board(db, board_id)
    if db_board:
        task_count, column_count = len(db_board.tasks), len(db_board.columns)
        db.delete(db_board)
        db.commit()
        logger.info("Deleted board %s with %d tasks and %d columns", board_id, task_count, column_count)
    return db_board


def build_board_view(db_board: Board) -> schemas.BoardViewOut:
    groups, unassigned = statuses.group_tasks(db_board)
    columns = [
        schemas.EffectiveColumnOut(
            status=column.status,
            title=column.title,
            is_static=column.is_static,
            column_id=column.column_id,
            order=column.order,
            tasks=[schemas.TaskOut.model_validate(task) for task in tasks],
        )
        for column, tasks in groups
    ]
    return schemas.BoardViewOut(
        id=db_board.id,
        title=db_board.title,
        description=db_board.description,
        columns=columns,
        unassigned_tasks=[schemas.TaskOut.model_validate(task) for task in unassigned],
    )
