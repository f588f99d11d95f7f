"""
Configuration helpers for the back-office API.

Routers and services read settings through get_settings() so that nothing
fetches os.environ directly. Tests clear the cache after changing the env.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    jwt_secret: str
    jwt_algorithm: str
    access_token_ttl_seconds: int
    refresh_token_ttl_seconds: int
    cors_origins: tuple[str, ...]
    log_level: str

    @property
    def secure_cookies(self) -> bool:
        return self.app_env == "prod"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip().rstrip("/") for item in (value or "").split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./backoffice.db").strip(),
        jwt_secret=os.getenv("JWT_SECRET", "change-me"),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        access_token_ttl_seconds=_int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "86400"), 86400),
        refresh_token_ttl_seconds=_int(os.getenv("REFRESH_TOKEN_TTL_SECONDS", "604800"), 604800),
        cors_origins=_list(os.getenv("CORS_ORIGINS", "http://localhost:5173")),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
