# =============================================================================
# core/models/common.py - Shared Schema Building Blocks
# =============================================================================
# - ApiModel: base class giving every schema camelCase JSON keys
#   (userId, notifyBeforeMinutes, createdAt, ...) while still accepting
#   snake_case input and reading straight from ORM objects.
# - UtcDatetime: timestamps normalized to UTC on the way in and out, so
#   every backend sends the same instant with an explicit offset.
# - DeleteResponse: confirmation returned by DELETE endpoints.
# =============================================================================

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base schema: camelCase aliases, ORM attribute access, plain enum values."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


def require_non_blank(value: str) -> str:
    """Reject strings that are empty once whitespace is stripped."""
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def as_utc(value: datetime) -> datetime:
    """
    Convert a datetime to timezone-aware UTC.

    Naive values are taken to already be UTC: that is how SQLite hands back
    stored timestamps, and how clients without an offset are read.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class DeleteResponse(ApiModel):
    """Confirmation that a record was deleted."""

    message: str = Field(..., examples=["Todo deleted"])
    id: int = Field(..., description="ID of the deleted record")
