from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator

from app.api.schemas import CamelModel, reject_null

ColumnTitle = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
ColumnStatus = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]

# columns.order is a 32-bit INTEGER
MAX_COLUMN_ORDER = 2**31 - 1


class ColumnCreate(CamelModel):
    title: ColumnTitle
    status: ColumnStatus
    board_id: str


class ColumnUpdate(CamelModel):
    title: Optional[ColumnTitle] = None
    status: Optional[ColumnStatus] = None
    order: Optional[int] = Field(default=None, ge=0, le=MAX_COLUMN_ORDER)

    @field_validator("title", "status", "order")
    @classmethod
    def not_null(cls, value, info):
        return reject_null(value, info.field_name)


class ColumnOut(CamelModel):
    id: str
    title: str
    status: str
    order: int
    board_id: str
    created_at: datetime
    updated_at: datetime


class StatusKeyOut(CamelModel):
    title: str
    status: str
