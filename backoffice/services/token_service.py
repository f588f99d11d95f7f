"""Token helpers (issue JWTs, set/clear cookies, resolve the current user)."""
from __future__ import annotations

from fastapi import Request, Response

from backoffice.core.config import get_settings
from backoffice.core.errors import (
    ACCESS_DENIED,
    AUTHENTICATION_REQUIRED,
    ApplicationError,
    ApplicationException,
)
from backoffice.core.security import ACCESS_TOKEN_TYPE, REFRESH_TOKEN_TYPE, create_token, decode_token
from backoffice.db.models import User
from backoffice.repositories.sql_repository import SQLRepository

ACCESS_COOKIE_NAME = "accessToken"
REFRESH_COOKIE_NAME = "refreshToken"

_repo = SQLRepository()


def issue_access_token(user: User) -> str:
    settings = get_settings()
    claims = {"sub": user.id, "email": user.email, "name": user.name, "type": ACCESS_TOKEN_TYPE}
    return create_token(claims, settings.access_token_ttl_seconds)


def issue_refresh_token(user: User) -> str:
    settings = get_settings()
    return create_token({"sub": user.id, "type": REFRESH_TOKEN_TYPE}, settings.refresh_token_ttl_seconds)


def _set_cookie(response: Response, name: str, token: str, max_age: int) -> None:
    settings = get_settings()
    response.set_cookie(
        name,
        token,
        max_age=max_age,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
    )


def set_access_cookie(response: Response, user: User) -> None:
    _set_cookie(response, ACCESS_COOKIE_NAME, issue_access_token(user), get_settings().access_token_ttl_seconds)


def set_auth_cookies(response: Response, user: User) -> None:
    """Deliver a fresh access/refresh pair as http-only cookies."""
    set_access_cookie(response, user)
    _set_cookie(response, REFRESH_COOKIE_NAME, issue_refresh_token(user), get_settings().refresh_token_ttl_seconds)


def clear_auth_cookies(response: Response) -> None:
    response.delete_cookie(ACCESS_COOKIE_NAME, path="/")
    response.delete_cookie(REFRESH_COOKIE_NAME, path="/")


def require_user(request: Request) -> User:
    """FastAPI dependency guarding the catalog routes."""
    claims = decode_token(request.cookies.get(ACCESS_COOKIE_NAME))
    if not claims:
        raise ApplicationException(
            ApplicationError.unauthorized("Autenticação necessária", AUTHENTICATION_REQUIRED)
        )
    if claims.get("type") != ACCESS_TOKEN_TYPE:
        raise ApplicationException(ApplicationError.forbidden("Acesso negado", ACCESS_DENIED))
    user = _repo.get_user(str(claims.get("sub") or ""))
    if not user:
        raise ApplicationException(ApplicationError.forbidden("Acesso negado", ACCESS_DENIED))
    return user
