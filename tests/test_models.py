# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the request/response schemas to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize to camelCase JSON
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from core.models import (
    AuthUser,
    DeleteResponse,
    ItemCategory,
    ItemRequest,
    MemoRequest,
    RegisterRequest,
    TodoPriority,
    TodoRequest,
    TodoResponse,
    as_utc,
)


# =============================================================================
# Todo Model Tests
# =============================================================================

class TestTodoRequest:
    """Tests for TodoRequest model."""

    def test_defaults(self):
        """Only title is required."""
        todo = TodoRequest(title="Buy milk")

        assert todo.priority == TodoPriority.NORMAL
        assert todo.notify_before_minutes == 30
        assert todo.description is None
        assert todo.deadline is None

    def test_accepts_camel_case_and_snake_case(self):
        camel = TodoRequest.model_validate({"title": "x", "notifyBeforeMinutes": 5, "imageUrl": "a"})
        snake = TodoRequest.model_validate({"title": "x", "notify_before_minutes": 5, "image_url": "a"})

        assert camel == snake

    def test_priority_range(self):
        assert TodoRequest(title="x", priority=2).priority == 2

        with pytest.raises(ValidationError):
            TodoRequest(title="x", priority=-1)

    def test_whitespace_title_rejected(self):
        with pytest.raises(ValidationError):
            TodoRequest(title="   ")

    def test_url_length_limit(self):
        with pytest.raises(ValidationError):
            TodoRequest(title="x", link_url="h" * 501)


class TestTodoResponse:
    """Tests for TodoResponse serialization."""

    def test_serializes_with_camel_case_keys(self):
        todo = TodoResponse(
            id=1,
            user_id=2,
            title="x",
            notify_before_minutes=30,
            priority=0,
            completed=False,
            created_at=datetime(2024, 1, 15, 10, 30),
        )

        data = todo.model_dump(by_alias=True)

        assert data["userId"] == 2
        assert data["notifyBeforeMinutes"] == 30
        assert data["createdAt"] == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert "user_id" not in data


# =============================================================================
# Item / Memo Model Tests
# =============================================================================

class TestItemRequest:
    """Tests for ItemRequest model."""

    def test_category_stored_as_plain_value(self):
        item = ItemRequest(title="Alien", category="movie")

        assert item.category == "movie"
        assert item.model_dump()["category"] == ItemCategory.MOVIE.value

    def test_unknown_category(self):
        with pytest.raises(ValidationError):
            ItemRequest(title="x", category="podcast")


class TestMemoRequest:
    """Tests for MemoRequest model."""

    def test_title_limit(self):
        MemoRequest(title="m" * 100)

        with pytest.raises(ValidationError):
            MemoRequest(title="m" * 101)


# =============================================================================
# Auth Model Tests
# =============================================================================

class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_valid(self):
        request = RegisterRequest(email="kim@example.com", password="secret1", username="Kim")

        assert request.email == "kim@example.com"

    def test_password_min_length(self):
        with pytest.raises(ValidationError):
            RegisterRequest(email="kim@example.com", password="12345", username="Kim")

    def test_username_max_length(self):
        with pytest.raises(ValidationError):
            RegisterRequest(email="kim@example.com", password="secret1", username="k" * 101)


class TestMisc:
    """Tests for small shared models."""

    def test_auth_user_is_immutable(self):
        user = AuthUser(id=1, email="kim@example.com")

        with pytest.raises(ValidationError):
            user.id = 2

    def test_delete_response(self):
        assert DeleteResponse(message="Todo deleted", id=3).model_dump() == {"message": "Todo deleted", "id": 3}


class TestUtcDatetime:
    """Timestamps are always handled as aware UTC."""

    def test_offset_is_converted_to_utc(self):
        seoul = timezone(timedelta(hours=9))

        converted = as_utc(datetime(2030, 1, 1, 9, 0, tzinfo=seoul))

        assert converted == datetime(2030, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert converted.utcoffset() == timedelta(0)

    def test_naive_value_is_read_as_utc(self):
        assert as_utc(datetime(2024, 1, 15, 10, 30)) == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_todo_deadline_keeps_the_instant(self):
        todo = TodoRequest.model_validate({"title": "x", "deadline": "2030-01-01T09:00:00+09:00"})

        assert todo.deadline == datetime(2030, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert todo.deadline.tzinfo == timezone.utc
