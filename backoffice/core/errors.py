"""
Error taxonomy shared by services and routers.

Services return ApplicationError values for expected failures (not found,
conflict, invalid credentials). ApplicationException only exists to carry one
of those values out of a FastAPI dependency, where returning is not possible.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi.responses import JSONResponse

INVALID_PARAMETERS = "INVALID_PARAMETERS"
INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
ACCESS_DENIED = "ACCESS_DENIED"
INTERNAL_SERVER_ERROR = "Internal server error"


@dataclass(frozen=True)
class ApplicationError:
    message: str
    code: int
    cause: str

    @classmethod
    def bad_request(cls, message: str, cause: str = INVALID_PARAMETERS) -> "ApplicationError":
        return cls(message, 400, cause)

    @classmethod
    def unauthorized(cls, message: str, cause: str) -> "ApplicationError":
        return cls(message, 401, cause)

    @classmethod
    def forbidden(cls, message: str, cause: str = ACCESS_DENIED) -> "ApplicationError":
        return cls(message, 403, cause)

    @classmethod
    def not_found(cls, message: str, cause: str) -> "ApplicationError":
        return cls(message, 404, cause)

    @classmethod
    def conflict(cls, message: str, cause: str) -> "ApplicationError":
        return cls(message, 409, cause)

    @classmethod
    def internal(cls, cause: str) -> "ApplicationError":
        return cls(INTERNAL_SERVER_ERROR, 500, cause)

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code, "cause": self.cause}


class ApplicationException(Exception):
    """Raised from dependencies; rendered by the app-level exception handler."""

    def __init__(self, error: ApplicationError):
        super().__init__(error.message)
        self.error = error


def error_response(error: ApplicationError) -> JSONResponse:
    return JSONResponse(error.to_dict(), status_code=error.code)
