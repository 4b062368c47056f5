# File: blog_api/core/security.py

"""
Security helpers for the blog API.

Two concerns live here:
  - TokenService: signs and verifies the bearer tokens handed out on
    signup/signin. A token carries a single claim, ``userId``.
  - Password hashing: salted PBKDF2-SHA256, stored as
    ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``.

Nothing in this module touches the database or the network.
"""

import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from blog_api.core.errors import InvalidTokenError


USER_ID_CLAIM = "userId"
PASSWORD_SCHEME = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 100_000


class TokenService:
    """
    Issues and verifies signed session tokens.

    The signing secret is handed in by whoever builds the service (the
    application factory), so the service itself holds no global state.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: Optional[int] = None,
    ):
        if not secret_key:
            raise ValueError("A signing secret is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def issue(self, user_id: str) -> str:
        if not user_id:
            raise ValueError("Cannot issue a token without a user id")

        payload: dict[str, Any] = {USER_ID_CLAIM: user_id}
        if self._expire_minutes:
            now = datetime.now(timezone.utc)
            payload["iat"] = now
            payload["exp"] = now + timedelta(minutes=self._expire_minutes)

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Return the user id carried by ``token``.

        Raises InvalidTokenError when the token is malformed, signed with a
        different key, expired, or has no usable ``userId`` claim. Whether
        that user still exists is not checked here.
        """
        if not token:
            raise InvalidTokenError("empty token")

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise InvalidTokenError("token expired")
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc))

        user_id = payload.get(USER_ID_CLAIM) if isinstance(payload, dict) else None
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError(f"missing {USER_ID_CLAIM} claim")
        return user_id


# ---------------------------------------------------------------------------
# Password hashing
# ---------------------------------------------------------------------------

def _pbkdf2(password: str, salt: str, iterations: int) -> str:
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
    )
    return digest.hex()


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    salt = secrets.token_hex(16)
    return f"{PASSWORD_SCHEME}${iterations}${salt}${_pbkdf2(password, salt, iterations)}"


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a stored hash. Unknown formats never match."""
    try:
        scheme, iterations, salt, stored = password_hash.split("$")
        if scheme != PASSWORD_SCHEME:
            return False
        computed = _pbkdf2(password, salt, int(iterations))
    except (ValueError, AttributeError):
        return False
    return secrets.compare_digest(computed, stored)
