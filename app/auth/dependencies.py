# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# The bearer token is verified once here (signature, issuer, audience,
# expiry) and its subject must still be a registered account. Handlers receive the resulting AuthUser as a parameter and never
# parse the token themselves.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.exceptions import InvalidTokenError
from core.models.auth import AuthUser
from core.services.auth_service import AuthService
from lib.database import get_db

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor. auto_error is off so a missing header is
# reported as our own 401 instead of the framework default.
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> AuthUser:
    """
    Extract and validate user from the JWT bearer token.

    This dependency:
    1. Extracts the Bearer token from the Authorization header
    2. Verifies the JWT signature, issuer and audience
    3. Validates the token hasn't expired
    4. Checks the account still exists (deleted accounts keep valid-looking tokens)
    5. Returns an AuthUser with the user's ID, email and display name

    Args:
        credentials: Bearer token from Authorization header
        db: Database session (shared with the handler)

    Returns:
        AuthUser: The authenticated user

    Raises:
        InvalidTokenError: 401 if the token is missing, invalid, expired, or
            its account has been deleted
    """
    if credentials is None or not credentials.credentials:
        logger.debug("Request without bearer token")
        raise InvalidTokenError("Not authenticated")

    user = AuthService.decode_access_token(credentials.credentials)
    AuthService.get_user(db, user.id)
    logger.debug(f"Authenticated user: {user.id}")
    return user
