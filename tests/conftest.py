import os

import pytest
from fastapi.testclient import TestClient

# Keep the import-time settings away from the default on-disk database
os.environ.setdefault("PERSISTENCE_BACKEND", "memory")

from focus_board.db import SqlAlchemyRepository  # noqa: E402
from focus_board.main import app  # noqa: E402
from focus_board.repositories import InMemoryRepository, get_repository  # noqa: E402
from focus_board.settings import get_settings  # noqa: E402


@pytest.fixture
def sql_repo(tmp_path):
    repo = SqlAlchemyRepository(f"sqlite:///{tmp_path / 'todos.db'}")
    yield repo
    repo.dispose()


@pytest.fixture(params=["sql", "memory"])
def repo(request, tmp_path):
    """Each repository backend, fresh for every test."""
    if request.param == "memory":
        yield InMemoryRepository()
        return
    sql = SqlAlchemyRepository(f"sqlite:///{tmp_path / 'todos.db'}")
    yield sql
    sql.dispose()


@pytest.fixture
def client(sql_repo):
    app.dependency_overrides[get_repository] = lambda: sql_repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def override_settings():
    """Install a Settings override built from the current environment plus the given fields."""
    from dataclasses import replace

    def _apply(**changes):
        settings = replace(get_settings(), **changes)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    yield _apply
    app.dependency_overrides.pop(get_settings, None)
