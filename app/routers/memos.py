# =============================================================================
# app/routers/memos.py - Memo CRUD Endpoints
# =============================================================================
# Memos have no completed flag, so there is no toggle endpoint.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import CurrentUserDep, DbDep
from core.models import DeleteResponse, MemoRequest, MemoResponse
from core.services.resources import memo_service

router = APIRouter()

MemoId = Annotated[int, Path(description="Memo ID")]


@router.get("", response_model=list[MemoResponse])
def list_memos(user: CurrentUserDep, db: DbDep):
    """List the current user's memos, newest first."""
    return memo_service.list(db, owner_id=user.id)


@router.get("/{memo_id}", response_model=MemoResponse)
def get_memo(memo_id: MemoId, user: CurrentUserDep, db: DbDep):
    return memo_service.get(db, owner_id=user.id, resource_id=memo_id)


@router.post("", response_model=MemoResponse)
def create_memo(request: MemoRequest, user: CurrentUserDep, db: DbDep):
    return memo_service.create(db, owner_id=user.id, payload=request)


@router.put("/{memo_id}", response_model=MemoResponse)
def update_memo(memo_id: MemoId, request: MemoRequest, user: CurrentUserDep, db: DbDep):
    return memo_service.update(db, owner_id=user.id, resource_id=memo_id, payload=request)


@router.delete("/{memo_id}", response_model=DeleteResponse)
def delete_memo(memo_id: MemoId, user: CurrentUserDep, db: DbDep):
    return memo_service.delete(db, owner_id=user.id, resource_id=memo_id)
