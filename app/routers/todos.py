# =============================================================================
# app/routers/todos.py - Todo CRUD Endpoints
# =============================================================================
# All endpoints require authentication and only ever touch the caller's
# todos. Another user's todo answers 404, exactly like a missing one.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import CurrentUserDep, DbDep
from core.models import DeleteResponse, TodoRequest, TodoResponse
from core.services.resources import todo_service

router = APIRouter()

TodoId = Annotated[int, Path(description="Todo ID")]


@router.get("", response_model=list[TodoResponse])
def list_todos(user: CurrentUserDep, db: DbDep):
    """List the current user's todos, newest first."""
    return todo_service.list(db, owner_id=user.id)


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(todo_id: TodoId, user: CurrentUserDep, db: DbDep):
    """Get one todo."""
    return todo_service.get(db, owner_id=user.id, resource_id=todo_id)


@router.post("", response_model=TodoResponse)
def create_todo(request: TodoRequest, user: CurrentUserDep, db: DbDep):
    """
    Create a todo.

    Defaults: priority 0 (normal), notifyBeforeMinutes 30, completed false.
    """
    return todo_service.create(db, owner_id=user.id, payload=request)


@router.put("/{todo_id}", response_model=TodoResponse)
def update_todo(todo_id: TodoId, request: TodoRequest, user: CurrentUserDep, db: DbDep):
    """
    Replace a todo's fields.

    `completed` is left as is; use PATCH /{id}/toggle to change it.
    """
    return todo_service.update(db, owner_id=user.id, resource_id=todo_id, payload=request)


@router.delete("/{todo_id}", response_model=DeleteResponse)
def delete_todo(todo_id: TodoId, user: CurrentUserDep, db: DbDep):
    """Delete a todo."""
    return todo_service.delete(db, owner_id=user.id, resource_id=todo_id)


@router.patch("/{todo_id}/toggle", response_model=TodoResponse)
def toggle_todo(todo_id: TodoId, user: CurrentUserDep, db: DbDep):
    """Flip a todo between done and not done."""
    return todo_service.toggle(db, owner_id=user.id, resource_id=todo_id)
