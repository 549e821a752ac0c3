from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire. Accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FieldError(BaseModel):
    field: str
    message: str


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    details: Optional[List[FieldError]] = None
    message: Optional[str] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str


def ok(data) -> dict:
    return {"success": True, "data": data}


def reject_null(value, field_name: str):
    """Used by update schemas: omitted is fine, explicit null is not."""
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value
