from datetime import datetime, timezone
import uuid

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from app.db.session import Base


def utcnow():
    return datetime.now(timezone.utc)


def new_id():
    return str(uuid.uuid4())


class Board(Base):
    __tablename__ = "boards"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    tasks = relationship(
        "Task", back_populates="board", cascade="all, delete-orphan",
        order_by="Task.created_at")
    columns = relationship(
        "BoardColumn", back_populates="board", cascade="all, delete-orphan",
        order_by="[BoardColumn.order, BoardColumn.created_at]")
