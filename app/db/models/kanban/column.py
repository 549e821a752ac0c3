from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base
from .board import utcnow, new_id


class BoardColumn(Base):
    """A custom column on a board.

    ``status`` is matched against ``Task.status`` by value only; there is no
    foreign key between the two.
    """
    __tablename__ = "columns"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(100), nullable=False)
    status = Column(String(50), nullable=False)
    order = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Foreign Key
    board_id = Column(String(36), ForeignKey("boards.id", ondelete="CASCADE"), nullable=False, index=True)

    # Relationships
    board = relationship("Board", back_populates="columns")
