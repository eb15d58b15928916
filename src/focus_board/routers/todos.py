from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from ..errors import ApiError
from ..repositories import Repository, get_repository
from ..schemas import ErrorOut, SuccessOut, TodoCreate, TodoOut
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/todos",
    tags=["todos"],
)


def _get_repo(repo: Repository = Depends(get_repository)) -> Repository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


def _set_done(repo: Repository, todo_id: int, done: bool) -> SuccessOut:
    if repo.set_done(todo_id, done):
        logger.info("Marked todo %s as %s", todo_id, "done" if done else "undone")
    else:
        logger.debug("No todo with id %s to mark %s", todo_id, "done" if done else "undone")
    return SuccessOut(success=True)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="Return every todo, newest id first.",
)
def list_todos(repo: Repository = Depends(_get_repo)) -> List[TodoOut]:
    """
    List all todos ordered by descending id.
    """
    return [TodoOut(**it) for it in repo.list()]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    summary="Create Todo",
    description="Create a new Todo item and return the stored record.",
    responses={400: {"model": ErrorOut, "description": "Title is missing or blank"}},
)
def create_todo(payload: TodoCreate, repo: Repository = Depends(_get_repo)) -> TodoOut:
    """
    Create a new Todo. Blank titles are rejected before anything is written.
    """
    if not payload.title:
        logger.info("Rejected todo with blank title")
        raise ApiError("Title is required.")
    created = repo.create(payload.title)
    logger.info("Created todo %s", created["id"])
    return TodoOut(**created)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}/done",
    response_model=SuccessOut,
    summary="Mark Todo done",
    description="Set done=true on a todo. Unknown ids are a no-op.",
)
def mark_done(todo_id: int, repo: Repository = Depends(_get_repo)) -> SuccessOut:
    return _set_done(repo, todo_id, True)


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}/undone",
    response_model=SuccessOut,
    summary="Mark Todo not done",
    description="Set done=false on a todo. Unknown ids are a no-op.",
)
def mark_undone(todo_id: int, repo: Repository = Depends(_get_repo)) -> SuccessOut:
    return _set_done(repo, todo_id, False)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=SuccessOut,
    summary="Delete Todo",
    description=(
        "Delete a Todo item by ID. Deleting an unknown id succeeds without effect. "
        "When REQUIRE_DONE_FOR_DELETE is enabled, todos that are not done are refused."
    ),
    responses={400: {"model": ErrorOut, "description": "Todo is not done yet"}},
)
def delete_todo(
    todo_id: int,
    repo: Repository = Depends(_get_repo),
    settings: Settings = Depends(get_settings),
) -> SuccessOut:
    """
    Delete a Todo. Always answers {"success": true} unless the done guard refuses it.
    """
    if settings.require_done_for_delete:
        existing = repo.get(todo_id)
        if existing is not None and not existing["done"]:
            raise ApiError("Only completed tasks can be deleted.", status.HTTP_400_BAD_REQUEST)

    if repo.delete(todo_id):
        logger.info("Deleted todo %s", todo_id)
    else:
        logger.debug("No todo with id %s to delete", todo_id)
    return SuccessOut(success=True)
