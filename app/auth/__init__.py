# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides JWT-based authentication: register/login routes and the
# get_current_user dependency that guards every other endpoint.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import get_current_user
from core.models.auth import AuthUser, UserResponse

__all__ = [
    "get_current_user",
    "AuthUser",
    "UserResponse",
]
