from datetime import datetime
from typing import Annotated, Optional

from pydantic import StringConstraints, field_validator

from app.api.schemas import CamelModel, reject_null
from app.db.models.kanban.task import Priority

TaskTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
TaskDescription = Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]


class BoardSummary(CamelModel):
    id: str
    title: str


class TaskCreate(CamelModel):
    title: TaskTitle
    description: Optional[TaskDescription] = None
    status: Optional[str] = None        # falls back to the default status
    priority: Optional[Priority] = None
    board_id: str


class TaskUpdate(CamelModel):
    title: Optional[TaskTitle] = None
    description: Optional[TaskDescription] = None
    status: Optional[str] = None
    priority: Optional[Priority] = None

    @field_validator("title", "status", "priority")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)


class TaskOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    status: str
    priority: Priority
    board_id: str
    created_at: datetime
    updated_at: datetime


class TaskDetailOut(TaskOut):
    board: Optional[BoardSummary] = None
