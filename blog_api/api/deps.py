# File: blog_api/api/deps.py

"""
Request dependencies shared by the v1 routes.

Auth gate usage in route functions:
    caller_id: str = Depends(require_user)            # 401 when not signed in
    caller_id: str | None = Depends(optional_user)    # None when anonymous

Both store the verified user id on ``request.state.user_id`` before the route
body runs. ``request.state`` is per request, so nothing leaks between calls.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from blog_api.core.errors import InvalidTokenError, MissingCredentialError
from blog_api.core.security import TokenService
from blog_api.db.session import get_db
from blog_api.models.user import User
from blog_api.services import auth_service

logger = logging.getLogger(__name__)

# auto_error=False: a missing/non-Bearer header comes through as None and the
# gate decides what to do with it.
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def _verify_credentials(
    credentials: Optional[HTTPAuthorizationCredentials],
    tokens: TokenService,
) -> str:
    if credentials is None or not credentials.credentials:
        raise MissingCredentialError()
    return tokens.verify(credentials.credentials)


def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    try:
        user_id = _verify_credentials(credentials, tokens)
    except (MissingCredentialError, InvalidTokenError) as exc:
        logger.info(
            "Rejected request to %s: %s",
            request.url.path,
            getattr(exc, "reason", exc.code),
        )
        raise
    request.state.user_id = user_id
    return user_id


def optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Optional[str]:
    request.state.user_id = None
    if credentials is None:
        return None
    try:
        user_id = _verify_credentials(credentials, tokens)
    except (MissingCredentialError, InvalidTokenError) as exc:
        logger.debug("Optional auth failed on %s, continuing anonymously: %s", request.url.path, exc)
        return None
    request.state.user_id = user_id
    return user_id


def current_user(
    user_id: str = Depends(require_user),
    db: Session = Depends(get_db),
) -> User:
    """The signed-in user's record; 401 if the token outlived the user."""
    return auth_service.get_current_user(db, user_id)
