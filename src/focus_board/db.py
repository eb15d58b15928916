from __future__ import annotations

import os
from typing import List, Optional

from sqlalchemy import create_engine, delete, select, update
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base, TodoEntity, TodoRow
from .repositories import Repository


def create_db_engine(database_url: str) -> Engine:
    """
    Build an engine for the given connection string.

    SQLite file databases get their parent directory created. In-memory SQLite
    shares one connection so that every thread sees the same table.
    """
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        return create_engine(url, connect_args=connect_args, poolclass=StaticPool)

    os.makedirs(os.path.dirname(url.database) or ".", exist_ok=True)
    return create_engine(url, connect_args=connect_args)


class SqlAlchemyRepository(Repository):
    """
    Repository storing todos in a relational table through SQLAlchemy.

    Each operation runs in its own session and commits as a single unit.
    """

    def __init__(self, database_url: str) -> None:
        self._engine = create_db_engine(database_url)
        self._sessions = sessionmaker(bind=self._engine, autoflush=False, expire_on_commit=False)
        Base.metadata.create_all(bind=self._engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create(self, title: str) -> TodoEntity:
        with self._sessions.begin() as session:
            row = TodoRow(title=title, done=False)
            session.add(row)
            session.flush()
            # Load server-assigned columns (id, created_at)
            session.refresh(row)
            return row.to_entity()

    def get(self, todo_id: int) -> Optional[TodoEntity]:
        with self._sessions() as session:
            row = session.get(TodoRow, todo_id)
            return row.to_entity() if row is not None else None

    def set_done(self, todo_id: int, done: bool) -> bool:
        with self._sessions.begin() as session:
            result = session.execute(
                update(TodoRow).where(TodoRow.id == todo_id).values(done=done)
            )
            return result.rowcount > 0

    def delete(self, todo_id: int) -> bool:
        with self._sessions.begin() as session:
            result = session.execute(delete(TodoRow).where(TodoRow.id == todo_id))
            return result.rowcount > 0

    def list(self) -> List[TodoEntity]:
        with self._sessions() as session:
            rows = session.scalars(select(TodoRow).order_by(TodoRow.id.desc())).all()
            return [r.to_entity() for r in rows]

    def dispose(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
