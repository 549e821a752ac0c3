from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.errors import NotFoundError, store_operation
from app.core.statuses import derive_status_key
from app.api.schemas import ApiResponse, MessageResponse, ok
from app.api.boards.services import board_exists
from . import schemas, services

router = APIRouter()


@router.get("", response_model=ApiResponse[list[schemas.ColumnOut]])
def read_columns(
    board_id: Optional[str] = Query(None, alias="boardId"),
    db: Session = Depends(get_db),
):
    with store_operation("fetch columns"):
        return ok(services.get_columns(db, board_id=board_id))


@router.get("/status-key", response_model=ApiResponse[schemas.StatusKeyOut])
def read_status_key(title: Annotated[str, Query(min_length=1, max_length=100)]):
    """Status key a column titled ``title`` would get."""
    return ok(schemas.StatusKeyOut(title=title, status=derive_status_key(title)))


@router.get("/boards/{board_id}", response_model=ApiResponse[list[schemas.ColumnOut]])
def read_board_columns(board_id: str, db: Session = Depends(get_db)):
    with store_operation("fetch board columns"):
        return ok(services.get_columns(db, board_id=board_id))


@router.get("/{column_id}", response_model=ApiResponse[schemas.ColumnOut])
def read_column(column_id: str, db: Session = Depends(get_db)):
    with store_operation("fetch column"):
        column = services.get_column(db, column_id)
    if not column:
        raise NotFoundError("Column not found")
    return ok(column)


@router.post("", response_model=ApiResponse[schemas.ColumnOut], status_code=status.HTTP_201_CREATED)
def create_column(column: schemas.ColumnCreate, db: Session = Depends(get_db)):
    with store_operation("create column"):
        if not board_exists(db, column.board_id):
            raise NotFoundError("Board not found")
        return ok(services.create_column(db, column))


@router.put("/{column_id}", response_model=ApiResponse[schemas.ColumnOut])
def update_column(column_id: str, column: schemas.ColumnUpdate, db: Session = Depends(get_db)):
    with store_operation("update column"):
        updated = services.update_column(db, column_id, column)
    if not updated:
        raise NotFoundError("Column not found")
    return ok(updated)


@router.delete("/{column_id}", response_model=MessageResponse)
def delete_column(column_id: str, db: Session = Depends(get_db)):
    with store_operation("delete column"):
        deleted = services.delete_column(db, column_id)
    if not deleted:
        raise NotFoundError("Column not found")
    return {"success": True, "message": "Column deleted successfully"}
