from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from threading import Lock, RLock
from typing import List, Optional

from .models import TodoEntity
from .settings import get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def create(self, title: str) -> TodoEntity:
        """Insert a todo with the given (already validated) title and return it."""

    @abstractmethod
    def get(self, todo_id: int) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def set_done(self, todo_id: int, done: bool) -> bool:
        """Set the done flag of one todo. Return False if no row matched."""

    @abstractmethod
    def delete(self, todo_id: int) -> bool:
        """Delete a TodoEntity by id. Return True if deleted, False if not found."""

    @abstractmethod
    def list(self) -> List[TodoEntity]:
        """Return every todo, newest id first."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository suitable for testing and throwaway runs.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, TodoEntity] = {}
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def create(self, title: str) -> TodoEntity:
        entity: TodoEntity = {
            "id": self._allocate_id(),
            "title": title,
            "done": False,
            "created_at": self._now(),
        }
        with self._lock:
            self._items[entity["id"]] = entity
        return entity.copy()  # type: ignore[return-value]

    def get(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            item = self._items.get(todo_id)
            return None if item is None else item.copy()  # type: ignore[return-value]

    def set_done(self, todo_id: int, done: bool) -> bool:
        with self._lock:
            existing = self._items.get(todo_id)
            if existing is None:
                return False
            existing["done"] = done
            return True

    def delete(self, todo_id: int) -> bool:
        with self._lock:
            return self._items.pop(todo_id, None) is not None

    def list(self) -> List[TodoEntity]:
        with self._lock:
            items = sorted(self._items.values(), key=lambda t: t["id"], reverse=True)
            # Return copies to avoid external mutation
            return [t.copy() for t in items]  # type: ignore[misc]


def _build_repository() -> Repository:
    settings = get_settings()
    if settings.persistence_backend == "memory":
        logger.info("Using in-memory todo repository")
        return InMemoryRepository()

    from .db import SqlAlchemyRepository

    logger.info("Using SQL todo repository (%s)", settings.database_url.split("://", 1)[0])
    return SqlAlchemyRepository(settings.database_url)


_repository: Optional[Repository] = None
_repository_lock = Lock()


# PUBLIC_INTERFACE
def get_repository() -> Repository:
    """
    Return the process-wide repository configured by settings.
    - sql: SqlAlchemyRepository bound to DATABASE_URL
    - memory: InMemoryRepository

    Built once, on first use; concurrent first calls share one instance.
    """
    global _repository
    if _repository is None:
        with _repository_lock:
            if _repository is None:
                _repository = _build_repository()
    return _repository


def reset_repository() -> None:
    """Forget the process-wide repository so the next call rebuilds it from settings."""
    global _repository
    with _repository_lock:
        _repository = None
