"""Security helpers (password hashing and signed tokens)."""

from __future__ import annotations

import time
from typing import Any, Optional

import jwt
from argon2 import PasswordHasher, exceptions as argon_exc

from .config import get_settings

_ph = PasswordHasher()
_PREFIX = "argon2$"

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if not stored.startswith(_PREFIX):
        return False
    try:
        return _ph.verify(stored[len(_PREFIX) :], password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


def create_token(claims: dict[str, Any], ttl_seconds: int) -> str:
    """Sign ``claims`` with ``iat``/``exp`` set ``ttl_seconds`` into the future."""
    settings = get_settings()
    now = int(time.time())
    payload = {**claims, "iat": now, "exp": now + ttl_seconds}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str | None) -> Optional[dict[str, Any]]:
    """Return the claims of a valid token, or None when it is malformed, forged or expired."""
    if not token:
        return None
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError:
        return None
