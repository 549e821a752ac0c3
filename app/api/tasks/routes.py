from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.errors import NotFoundError, store_operation
from app.api.schemas import ApiResponse, MessageResponse, ok
from app.api.boards.services import board_exists
from . import schemas, services

router = APIRouter()


@router.get("", response_model=ApiResponse[list[schemas.TaskDetailOut]])
def read_tasks(
    board_id: Optional[str] = Query(None, alias="boardId"),
    task_status: Optional[str] = Query(None, alias="status"),
    db: Session = Depends(get_db),
):
    with store_operation("fetch tasks"):
        return ok(services.get_tasks(db, board_id=board_id, status=task_status))


@router.get("/{task_id}", response_model=ApiResponse[schemas.TaskDetailOut])
def read_task(task_id: str, db: Session = Depends(get_db)):
    with store_operation("fetch task"):
        task = services.get_task(db, task_id)
    if not task:
        raise NotFoundError("Task not found")
    return ok(task)


@router.post("", response_model=ApiResponse[schemas.TaskDetailOut], status_code=status.HTTP_201_CREATED)
def create_task(task: schemas.TaskCreate, db: Session = Depends(get_db)):
    with store_operation("create task"):
        if not board_exists(db, task.board_id):
            raise NotFoundError("Board not found")
        return ok(services.create_task(db, task))


@router.put("/{task_id}", response_model=ApiResponse[schemas.TaskDetailOut])
def update_task(task_id: str, task: schemas.TaskUpdate, db: Session = Depends(get_db)):
    with store_operation("update task"):
        updated = services.update_task(db, task_id, task)
    if not updated:
        raise NotFoundError("Task not found")
    return ok(updated)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: str, db: Session = Depends(get_db)):
    with store_operation("delete task"):
        deleted = services.delete_task(db, task_id)
    if not deleted:
        raise NotFoundError("Task not found")
    return {"success": True, "message": "Task deleted successfully"}
