from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import StringConstraints, field_validator

from app.api.schemas import CamelModel, reject_null
from app.api.tasks.schemas import TaskOut
from app.api.columns.schemas import ColumnOut

BoardTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
BoardDescription = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]


class BoardCreate(CamelModel):
    title: BoardTitle
    description: Optional[BoardDescription] = None


class BoardUpdate(CamelModel):
    title: Optional[BoardTitle] = None
    description: Optional[BoardDescription] = None

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        return reject_null(value, "title")


class BoardOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    tasks: List[TaskOut] = []
    columns: List[ColumnOut] = []


class EffectiveColumnOut(CamelModel):
    status: str
    title: str
    is_static: bool
    column_id: Optional[str] = None
    order: Optional[int] = None
    tasks: List[TaskOut] = []


class BoardViewOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    columns: List[EffectiveColumnOut]
    unassigned_tasks: List[TaskOut]
