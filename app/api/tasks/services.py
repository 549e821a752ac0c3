import logging
from typing import Optional

from sqlalchemy.orm import Session, joinedload
from app.db.models.kanban import Task, Priority
from app.core.statuses import DEFAULT_TASK_STATUS, assign_task_status
from . import schemas

logger = logging.getLogger(__name__)


def _task_query(db: Session):
    return db.query(Task).options(joinedload(Task.board))


def create_task(db: Session, task: schemas.TaskCreate):
    """Insert a task. The caller has already checked that the board exists."""
    db_task = Task(
        title=task.title,
        description=task.description,
        status=task.status or DEFAULT_TASK_STATUS,
        priority=task.priority or Priority.MEDIUM,
        board_id=task.board_id,
    )
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("Created task %s on board %s", db_task.id, db_task.board_id)
    return db_task


def get_tasks(db: Session, board_id: Optional[str] = None, status: Optional[str] = None):
    query = _task_query(db)
    if board_id:
        query = query.filter(Task.board_id == board_id)
    if status:
        query = query.filter(Task.status == status)
    return query.order_by(Task.created_at.asc()).all()


def get_task(db: Session, task_id: str):
    return _task_query(db).filter(Task.id == task_id).first()


def update_task(db: Session, task_id: str, task: schemas.TaskUpdate):
    db_task = get_task(db, task_id)
    if db_task:
        changes = task.model_dump(exclude_unset=True)
        if "status" in changes:
            assign_task_status(db_task, changes.pop("status"))
        for key, value in changes.items():
            setattr(db_task, key, value)
        db.commit()
        db.refresh(db_task)
    return db_task


def delete_task(db: Session, task_id: str):
    db_task = db.query(Task).filter(Task.id == task_id).first()
    if db_task:
        db.delete(db_task)
        db.commit()
        logger.info("Deleted task %s", task_id)
    return db_task
