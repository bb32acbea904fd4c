# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for request validation and
# response serialization:
# - common.py: ApiModel base (camelCase JSON) and shared responses
# - auth.py: Principal, token claims, register/login schemas
# - todo.py: Todo schemas
# - item.py: Item schemas
# - memo.py: Memo schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .auth import (
    AuthResponse,
    AuthUser,
    LoginRequest,
    RegisterRequest,
    TokenPayload,
    UserProfileResponse,
    UserResponse,
)
from .common import ApiModel, DeleteResponse, UtcDatetime, as_utc
from .item import ItemCategory, ItemRequest, ItemResponse
from .memo import MemoRequest, MemoResponse
from .todo import TodoPriority, TodoRequest, TodoResponse

__all__ = [
    "ApiModel",
    "DeleteResponse",
    "UtcDatetime",
    "as_utc",
    # Auth
    "AuthUser",
    "TokenPayload",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "UserProfileResponse",
    "AuthResponse",
    # Todo
    "TodoPriority",
    "TodoRequest",
    "TodoResponse",
    # Item
    "ItemCategory",
    "ItemRequest",
    "ItemResponse",
    # Memo
    "MemoRequest",
    "MemoResponse",
]
