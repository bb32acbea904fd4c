# =============================================================================
# core/models/memo.py - Memo Schemas
# =============================================================================

from pydantic import Field, field_validator

from .common import ApiModel, UtcDatetime, require_non_blank


class MemoRequest(ApiModel):
    """Schema for creating (POST) or replacing (PUT) a memo."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Memo title"
    )

    content: str | None = Field(
        default=None,
        description="Memo body"
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return require_non_blank(value)


class MemoResponse(ApiModel):
    """Schema for returning memo data to clients."""

    id: int
    user_id: int
    title: str
    content: str | None = None
    created_at: UtcDatetime
