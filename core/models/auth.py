# =============================================================================
# core/models/auth.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from .common import ApiModel, UtcDatetime, require_non_blank


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a verified JWT.

    This is the identity available from the token itself, without querying
    the database. Route handlers receive it from get_current_user and pass
    `user.id` into every service call as the ownership key.
    """
    model_config = ConfigDict(frozen=True)  # Make immutable

    id: int
    email: str | None = None
    username: str | None = None


class TokenPayload(BaseModel):
    """
    Decoded JWT token payload.

    Standard claims plus the user's email and display name.
    """
    sub: str  # User ID
    email: str | None = None
    name: str | None = None  # Display name
    iss: str  # Issuer
    aud: str  # Audience
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp


class RegisterRequest(ApiModel):
    """
    Schema for creating an account.

    Example:
        {"email": "kim@example.com", "password": "s3cret!", "username": "Kim"}
    """

    email: EmailStr = Field(..., max_length=255, description="Login email (must be unique)")
    password: str = Field(..., min_length=6, description="At least 6 characters")
    username: str = Field(..., min_length=1, max_length=100, description="Display name")

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        return require_non_blank(value)


class LoginRequest(ApiModel):
    """Schema for logging in."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(ApiModel):
    """
    Public projection of a user.

    The password hash is never part of any response.
    """

    id: int
    email: str
    username: str


class UserProfileResponse(UserResponse):
    """User projection with account creation time (GET /auth/me)."""

    created_at: UtcDatetime


class AuthResponse(ApiModel):
    """Token plus public user data, returned by register and login."""

    token: str = Field(..., description="Bearer token for the Authorization header")
    user: UserResponse
