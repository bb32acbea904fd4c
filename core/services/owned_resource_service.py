# =============================================================================
# core/services/owned_resource_service.py - Ownership-Scoped CRUD
# =============================================================================
# One implementation of list/get/create/update/delete shared by every
# user-owned table (todos, items, memos).
#
# Every query is filtered by the caller's user id. A row owned by someone
# else is indistinguishable from a missing row: both raise
# ResourceNotFoundError (404), never a "forbidden" error.
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

# Columns a payload can never write
IMMUTABLE_FIELDS = frozenset({"id", "user_id", "created_at", "completed"})


class OwnedResourceService(Generic[ModelT]):
    """
    CRUD service for a table whose rows belong to one user.

    Args:
        model: ORM class with `id`, `user_id` and `created_at` columns
        resource_name: Name used in logs and error messages (e.g. "Todo")
        filterable_fields: Columns `list` may filter on by equality

    Example:
        todo_service = OwnedResourceService(Todo, "Todo")
        todos = todo_service.list(db, owner_id=user.id)
    """

    def __init__(
        self,
        model: type[ModelT],
        resource_name: str,
        filterable_fields: tuple[str, ...] = (),
    ):
        self.model = model
        self.resource_name = resource_name
        self.filterable_fields = frozenset(filterable_fields)

    def list(self, db: Session, owner_id: int, **filters: Any) -> list[ModelT]:
        """
        List the owner's rows, newest first.

        Args:
            db: Database session
            owner_id: Authenticated user's id
            **filters: Equality filters on filterable_fields; None values are ignored

        Returns:
            Matching rows ordered by created_at descending
        """
        unknown = set(filters) - self.filterable_fields
        if unknown:
            raise ValueError(f"{self.resource_name} can't be filtered by: {', '.join(sorted(unknown))}")

        query = select(self.model).where(self.model.user_id == owner_id)
        for field, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, field) == value)

        query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        rows = list(db.scalars(query).all())

        logger.debug(f"Listed {len(rows)} {self.resource_name} rows for user {owner_id}")
        return rows

    def get(self, db: Session, owner_id: int, resource_id: int) -> ModelT:
        """
        Fetch one of the owner's rows.

        Raises:
            ResourceNotFoundError: If the row doesn't exist or isn't the owner's
        """
        row = db.scalar(
            select(self.model).where(
                self.model.id == resource_id,
                self.model.user_id == owner_id,
            )
        )
        if row is None:
            raise ResourceNotFoundError(self.resource_name, resource_id)
        return row

    def create(self, db: Session, owner_id: int, payload: BaseModel) -> ModelT:
        """
        Insert a row owned by owner_id.

        Ownership always comes from the authenticated user, never the payload.
        """
        row = self.model(**self._writable_fields(payload), user_id=owner_id)
        db.add(row)
        db.commit()
        db.refresh(row)

        logger.info(f"Created {self.resource_name}: {row.id} for user: {owner_id}")
        return row

    def update(self, db: Session, owner_id: int, resource_id: int, payload: BaseModel) -> ModelT:
        """
        Replace the mutable fields of one of the owner's rows.

        Every field in the payload schema is written, so optional fields the
        client left out are cleared.

        Raises:
            ResourceNotFoundError: If the row doesn't exist or isn't the owner's
        """
        row = self.get(db, owner_id, resource_id)

        for field, value in self._writable_fields(payload).items():
            setattr(row, field, value)

        db.commit()
        db.refresh(row)

        logger.info(f"Updated {self.resource_name}: {resource_id}")
        return row

    def delete(self, db: Session, owner_id: int, resource_id: int) -> dict[str, Any]:
        """
        Delete one of the owner's rows.

        Returns:
            Confirmation dict with message and id

        Raises:
            ResourceNotFoundError: If the row doesn't exist or isn't the owner's
        """
        row = self.get(db, owner_id, resource_id)
        db.delete(row)
        db.commit()

        logger.info(f"Deleted {self.resource_name}: {resource_id}")
        return {"message": f"{self.resource_name} deleted", "id": resource_id}

    @staticmethod
    def _writable_fields(payload: BaseModel) -> dict[str, Any]:
        data = payload.model_dump()
        return {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}


class CompletableResourceService(OwnedResourceService[ModelT]):
    """Owned resource with a boolean `completed` column that can be toggled."""

    def toggle(self, db: Session, owner_id: int, resource_id: int) -> ModelT:
        """
        Flip `completed` on one of the owner's rows.

        Toggling twice restores the original value.

        Raises:
            ResourceNotFoundError: If the row doesn't exist or isn't the owner's
        """
        row = self.get(db, owner_id, resource_id)
        row.completed = not row.completed
        db.commit()
        db.refresh(row)

        logger.info(f"Toggled {self.resource_name}: {resource_id}, completed={row.completed}")
        return row
