# File: blog_api/services/auth_service.py

"""
Authentication service.

  - Signup: create the user (hashed password) and hand back a token
  - Signin: look the user up by email and verify the password
  - Current user lookup for routes that need the full user record
"""

import logging
import secrets
from functools import lru_cache
from typing import Optional

from sqlalchemy.orm import Session

from blog_api.core.errors import InvalidCredentialsError, InvalidTokenError
from blog_api.core.security import (
    DEFAULT_ITERATIONS,
    TokenService,
    hash_password,
    verify_password,
)
from blog_api.db.repositories import UserRepository
from blog_api.models.user import User
from blog_api.schemas.user import AuthResponse, SigninInput, SignupInput, UserRead

logger = logging.getLogger(__name__)


def _auth_response(user: User, tokens: TokenService) -> AuthResponse:
    return AuthResponse(token=tokens.issue(user.id), user=UserRead.model_validate(user))


def signup(
    db: Session,
    tokens: TokenService,
    payload: SignupInput,
    *,
    iterations: int,
) -> AuthResponse:
    """
    Register a new user. A taken email surfaces as DuplicateRecordError
    from the repository.
    """
    user = User(
        email=payload.email,
        name=payload.name,
        password_hash=hash_password(payload.password, iterations=iterations),
    )
    user = UserRepository(db).add(user)
    logger.info("User %s signed up", user.id)
    return _auth_response(user, tokens)


@lru_cache
def _dummy_password_hash(iterations: int) -> str:
    return hash_password(secrets.token_hex(16), iterations=iterations)


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
    iterations: int = DEFAULT_ITERATIONS,
) -> Optional[User]:
    user = UserRepository(db).get_by_email(email)
    if user is None:
        # unknown emails still cost one PBKDF2 run
        verify_password(password, _dummy_password_hash(iterations))
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def signin(
    db: Session,
    tokens: TokenService,
    payload: SigninInput,
    *,
    iterations: int = DEFAULT_ITERATIONS,
) -> AuthResponse:
    user = authenticate_user(
        db,
        email=payload.email,
        password=payload.password,
        iterations=iterations,
    )
    if user is None:
        logger.info("Failed signin attempt")
        raise InvalidCredentialsError()
    return _auth_response(user, tokens)


def get_current_user(db: Session, user_id: str) -> User:
    """
    Resolve the user behind a verified token. A token for a user that no
    longer exists is treated like any other invalid token.
    """
    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise InvalidTokenError("unknown user")
    return user
