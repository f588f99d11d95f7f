from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from backoffice.core.config import get_settings
from backoffice.core.errors import (
    INVALID_PARAMETERS,
    ApplicationError,
    ApplicationException,
    error_response,
)
from backoffice.core.logging_config import setup_logging
from backoffice.db.create_tables import create_all
from backoffice.routers import authentication as authentication_router
from backoffice.routers import categories as categories_router
from backoffice.routers import products as products_router
from backoffice.routers import welcome as welcome_router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, nosniff, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ()))
        msg = str(err.get("msg", "")).removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Parâmetros inválidos"


async def _application_exception_handler(request: Request, exc: ApplicationException):
    return error_response(exc.error)


async def _validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_response(ApplicationError.bad_request(_validation_message(exc), INVALID_PARAMETERS))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    error = ApplicationError(str(exc.detail), exc.status_code, f"HTTP_{exc.status_code}")
    response = error_response(error)
    for key, value in (exc.headers or {}).items():
        response.headers[key] = value
    return response


async def _database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Unhandled database error on %s %s", request.method, request.url.path)
    return error_response(ApplicationError.internal("SERVER_ERROR"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_all()
    yield


def create_app() -> FastAPI:
    """Factory compatível com uvicorn/gunicorn (``uvicorn backoffice.app:create_app --factory``)."""
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Back-office API", version="1.0.0", lifespan=lifespan)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(settings.cors_origins),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["Set-Cookie"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.add_exception_handler(ApplicationException, _application_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _database_exception_handler)

    app.include_router(welcome_router.router)
    app.include_router(authentication_router.router)
    app.include_router(categories_router.router)
    app.include_router(products_router.router)

    logger.info("Back-office API configured (env=%s)", settings.app_env)
    return app
