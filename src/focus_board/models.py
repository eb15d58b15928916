from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, TypedDict

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, false, func
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands back CURRENT_TIMESTAMP (UTC) without an offset
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A plain-dict view of a Todo item shared by all storage backends.

    Fields:
    - id: Unique integer identifier, assigned on insert and increasing
    - title: Short non-empty title (trimmed on input via schemas)
    - done: Boolean completion flag
    - created_at: Insert timestamp assigned by the storage backend
    """

    id: int
    title: str
    done: bool
    created_at: Optional[datetime]


class TodoRow(Base):
    """ORM mapping for the ``todos`` table."""

    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    done = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def to_entity(self) -> TodoEntity:
        return {
            "id": int(self.id),
            "title": str(self.title),
            "done": bool(self.done),
            "created_at": _as_utc(self.created_at),
        }

    def __repr__(self) -> str:
        return f"<TodoRow(id={self.id}, title={self.title!r}, done={self.done})>"
