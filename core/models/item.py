# =============================================================================
# core/models/item.py - Item Schemas
# =============================================================================
# An item is an entry on one of the user's lists: things to buy, watch,
# read, visit or achieve. The list is picked by `category`.
# =============================================================================

from enum import Enum

from pydantic import Field, field_validator

from .common import ApiModel, UtcDatetime, require_non_blank


class ItemCategory(str, Enum):
    """Lists an item can belong to."""
    SHOPPING = "shopping"
    MOVIE = "movie"
    DRAMA = "drama"
    MANGA = "manga"
    PLACE = "place"
    GOAL = "goal"


class ItemRequest(ApiModel):
    """
    Schema for creating (POST) or replacing (PUT) an item.

    Example:
        {
            "title": "Running shoes",
            "category": "shopping",
            "linkUrl": "https://example.com/shoes"
        }
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Item name"
    )

    category: ItemCategory = Field(
        ...,
        description="One of: shopping, movie, drama, manga, place, goal"
    )

    description: str | None = Field(
        default=None,
        description="Optional notes"
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


class ItemResponse(ApiModel):
    """Schema for returning item data to clients."""

    id: int
    user_id: int
    title: str
    category: ItemCategory
    description: str | None = None
    completed: bool
    image_url: str | None = None
    link_url: str | None = None
    created_at: UtcDatetime
