from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.errors import NotFoundError, store_operation
from app.api.schemas import ApiResponse, MessageResponse, ok
from . import schemas, services

router = APIRouter()


@router.get("", response_model=ApiResponse[list[schemas.BoardOut]])
def read_boards(db: Session = Depends(get_db)):
    with store_operation("fetch boards"):
        return ok(services.get_boards(db))


@router.get("/{board_id}", response_model=ApiResponse[schemas.BoardOut])
def read_board(board_id: str, db: Session = Depends(get_db)):
    with store_operation("fetch board"):
        board = services.get_board(db, board_id)
    if not board:
        raise NotFoundError("Board not found")
    return ok(board)


@router.get("/{board_id}/view", response_model=ApiResponse[schemas.BoardViewOut])
def read_board_view(board_id: str, db: Session = Depends(get_db)):
    """
    Board laid out as displayed: built-in columns, then custom columns,
    each with its tasks. Tasks whose status matches no column are listed
    separately.
    """
    with store_operation("fetch board"):
        board = services.get_board(db, board_id)
        if not board:
            raise NotFoundError("Board not found")
        return ok(services.build_board_view(board))


@router.post("", response_model=ApiResponse[schemas.BoardOut], status_code=status.HTTP_201_CREATED)
def create_board(board: schemas.BoardCreate, db: Session = Depends(get_db)):
    with store_operation("create board"):
        return ok(services.create_board(db, board))


@router.put("/{board_id}", response_model=ApiResponse[schemas.BoardOut])
def update_board(board_id: str, board: schemas.BoardUpdate, db: Session = Depends(get_db)):
    with store_operation("update board"):
        updated = services.update_board(db, board_id, board)
    if not updated:
        raise NotFoundError("Board not found")
    return ok(updated)


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(board_id: str, db: Session = Depends(get_db)):
    with store_operation("delete board"):
        deleted = services.delete_board(db, board_id)
    if not deleted:
        raise NotFoundError("Board not found")
    return {"success": True, "message": "Board deleted successfully"}
