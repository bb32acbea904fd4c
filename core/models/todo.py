# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================
# These models define the API contract for todo operations:
# - TodoPriority: Enum for priority levels
# - TodoRequest: Input for creating or replacing a todo
# - TodoResponse: Output when returning todo data to clients
#
# Deadlines are not checked against the current time: a todo may be
# created with a deadline in the past. Deadlines with an offset are
# converted to UTC; all timestamps go out as UTC.
# =============================================================================

from enum import IntEnum

from pydantic import Field, field_validator

from .common import ApiModel, UtcDatetime, require_non_blank


class TodoPriority(IntEnum):
    """
    Priority levels for a todo.

    - 0 normal
    - 1 important
    - 2 urgent
    """
    NORMAL = 0
    IMPORTANT = 1
    URGENT = 2


class TodoRequest(ApiModel):
    """
    Schema for creating (POST) or replacing (PUT) a todo.

    PUT replaces every field listed here; omitted optional fields are
    cleared and omitted defaults are reset.

    Example:
        {
            "title": "Renew passport",
            "deadline": "2024-03-01T09:00:00",
            "notifyBeforeMinutes": 60,
            "priority": 1
        }
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="What needs to be done"
    )

    description: str | None = Field(
        default=None,
        description="Optional details"
    )

    deadline: UtcDatetime | None = Field(
        default=None,
        description="When the todo is due"
    )

    # Stored for clients; the server never sends notifications
    notify_before_minutes: int = Field(
        default=30,
        ge=0,
        le=1440,
        description="Minutes before the deadline to remind (0-1440)"
    )

    priority: TodoPriority = Field(
        default=TodoPriority.NORMAL,
        description="0 = normal, 1 = important, 2 = urgent"
    )

    image_url: str | None = Field(
        default=None,
        max_length=500,
        description="URL of an attached image (see POST /api/upload)"
    )

    link_url: str | None = Field(
        default=None,
        max_length=500,
        description="Related web link"
    )

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        return require_non_blank(value)


class TodoResponse(ApiModel):
    """Schema for returning todo data to clients."""

    id: int
    user_id: int
    title: str
    description: str | None = None
    deadline: UtcDatetime | None = None
    notify_before_minutes: int
    priority: int
    completed: bool
    image_url: str | None = None
    link_url: str | None = None
    created_at: UtcDatetime
