# =============================================================================
# core/services/auth_service.py - Accounts, Passwords and Tokens
# =============================================================================
# Handles registration, login and JWT issuance/verification.
#
# Tokens are stateless: nothing is stored server side, and a token stays
# valid until it expires (JWT_EXPIRATION_DAYS). There is no refresh; the
# client logs in again.
# =============================================================================

import logging
from datetime import timedelta
from functools import lru_cache

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import (
    AuthenticationFailedError,
    EmailAlreadyRegisteredError,
    InvalidTokenError,
)
from core.models.auth import (
    AuthResponse,
    AuthUser,
    LoginRequest,
    RegisterRequest,
    TokenPayload,
    UserResponse,
)
from core.tables import User
from lib.utils import utcnow

logger = logging.getLogger(__name__)

# bcrypt with a configurable cost factor
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password with a per-password random salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Verified against when the email is unknown, so a failed login costs
    # the same whether or not the account exists
    return hash_password("lifelog-dummy-password")


class AuthService:
    """
    Service for account and token operations.

    Provides a clean interface between API routes and the credential store.
    """

    @staticmethod
    def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
        """
        Issue a signed access token for a user.

        Args:
            user: The user the token identifies
            expires_delta: Token lifetime (defaults to JWT_EXPIRATION_DAYS)

        Returns:
            Encoded JWT string
        """
        issued_at = utcnow()
        if expires_delta is None:
            expires_delta = timedelta(days=settings.JWT_EXPIRATION_DAYS)

        claims = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.username,
            "iss": settings.JWT_ISSUER,
            "aud": settings.JWT_AUDIENCE,
            "iat": issued_at,
            "exp": issued_at + expires_delta,
        }
        return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    @staticmethod
    def decode_access_token(token: str) -> AuthUser:
        """
        Verify a token and extract the user it identifies.

        Checks signature, issuer, audience and expiry.

        Args:
            token: Encoded JWT

        Returns:
            AuthUser built from the token claims

        Raises:
            InvalidTokenError: If any check fails
        """
        try:
            payload = jwt.decode(
                token,
                settings.JWT_SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM],
                audience=settings.JWT_AUDIENCE,
                issuer=settings.JWT_ISSUER,
            )
        except ExpiredSignatureError:
            logger.warning("JWT token has expired")
            raise InvalidTokenError("Token has expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise InvalidTokenError()

        try:
            claims = TokenPayload(**payload)
            user_id = int(claims.sub)
        except (ValidationError, ValueError):
            logger.warning(f"JWT token has malformed claims: sub={payload.get('sub')!r}")
            raise InvalidTokenError()

        return AuthUser(id=user_id, email=claims.email, username=claims.name)

    @staticmethod
    def _auth_response(user: User) -> AuthResponse:
        return AuthResponse(
            token=AuthService.create_access_token(user),
            user=UserResponse.model_validate(user),
        )

    @staticmethod
    def register(db: Session, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and log it in.

        Args:
            db: Database session
            request: Validated registration data

        Returns:
            AuthResponse with a token for the new user

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        existing = db.scalar(select(User).where(User.email == request.email))
        if existing:
            raise EmailAlreadyRegisteredError(request.email)

        user = User(
            email=request.email,
            password_hash=hash_password(request.password),
            username=request.username,
        )
        db.add(user)

        try:
            db.commit()
        except IntegrityError:
            # Another request registered the same email in the meantime
            db.rollback()
            raise EmailAlreadyRegisteredError(request.email)

        db.refresh(user)
        logger.info(f"Registered user: {user.id}")
        return AuthService._auth_response(user)

    @staticmethod
    def login(db: Session, request: LoginRequest) -> AuthResponse:
        """
        Check credentials and issue a token.

        Raises:
            AuthenticationFailedError: If the email is unknown or the password
                is wrong (the caller can't tell which)
        """
        user = db.scalar(select(User).where(User.email == request.email))

        if user is None:
            verify_password(request.password, _dummy_hash())
            logger.warning("Login failed: unknown email")
            raise AuthenticationFailedError()

        if not verify_password(request.password, user.password_hash):
            logger.warning(f"Login failed: wrong password for user {user.id}")
            raise AuthenticationFailedError()

        logger.info(f"User logged in: {user.id}")
        return AuthService._auth_response(user)

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        """
        Load the account behind a verified token.

        Raises:
            InvalidTokenError: If the account no longer exists
        """
        user = db.get(User, user_id)
        if user is None:
            logger.warning(f"Rejected token for deleted user {user_id}")
            raise InvalidTokenError("User no longer exists")
        return user

    @staticmethod
    def delete_account(db: Session, user_id: int) -> None:
        """
        Delete an account together with all of its todos, items and memos.

        Raises:
            InvalidTokenError: If the account no longer exists
        """
        user = AuthService.get_user(db, user_id)
        db.delete(user)
        db.commit()
        logger.info(f"Deleted user {user_id} and all owned records")
