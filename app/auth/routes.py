# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for account registration, login and the current user.
#
# Register and login are the only API endpoints that don't require a
# bearer token.
# =============================================================================

import logging

from fastapi import APIRouter

from app.dependencies import CurrentUserDep, DbDep
from core.models.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserProfileResponse,
)
from core.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
def register(request: RegisterRequest, db: DbDep) -> AuthResponse:
    """
    Create an account and return a token for it.

    Raises:
        400: If the input is invalid or the email is already registered
    """
    return AuthService.register(db, request)


@router.post("/login", response_model=AuthResponse)
def login(request: LoginRequest, db: DbDep) -> AuthResponse:
    """
    Log in with email and password.

    Raises:
        401: If the email is unknown or the password is wrong
    """
    return AuthService.login(db, request)


@router.get("/me", response_model=UserProfileResponse)
def get_current_user_info(user: CurrentUserDep, db: DbDep):
    """
    Get the current authenticated user's profile.

    Raises:
        401: If not authenticated, or the account has been deleted
    """
    return AuthService.get_user(db, user.id)


@router.get("/verify")
async def verify_token(user: CurrentUserDep) -> dict:
    """
    Verify that the current token is valid.

    Useful for checking if a stored token is still valid.
    """
    return {
        "valid": True,
        "userId": user.id,
        "email": user.email,
    }


@router.delete("/me")
def delete_account(user: CurrentUserDep, db: DbDep) -> dict:
    """
    Delete the current account and all of its todos, items and memos.

    Uploaded images are kept; they are not tied to an account.
    """
    AuthService.delete_account(db, user.id)
    return {"message": "Account deleted", "id": user.id}
