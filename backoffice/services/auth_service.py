"""
Authentication use cases (sign-up, sign-in, refresh).

Every method returns either a User or an ApplicationError. Unknown e-mail and
wrong password produce the very same error value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from backoffice.core.errors import AUTHENTICATION_REQUIRED, INVALID_CREDENTIALS, ApplicationError
from backoffice.core.security import REFRESH_TOKEN_TYPE, decode_token, hash_password, verify_password
from backoffice.db.models import User
from backoffice.repositories.sql_repository import SQLRepository
from backoffice.schemas.authentication import SignInBody, SignUpBody

logger = logging.getLogger(__name__)

EMAIL_IN_USE = ApplicationError.conflict("Este email já está em uso.", "EMAIL_IN_USE")
BAD_CREDENTIALS = ApplicationError.unauthorized("Credenciais inválidas", INVALID_CREDENTIALS)
REFRESH_REJECTED = ApplicationError.unauthorized("Sessão expirada. Faça login novamente.", AUTHENTICATION_REQUIRED)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("placeholder-for-unknown-accounts")


@dataclass
class AuthService:
    """Handles registration, login and token refresh."""

    def __post_init__(self):
        self.repository = SQLRepository()

    def sign_up(self, payload: SignUpBody) -> User | ApplicationError:
        try:
            if self.repository.get_user_by_email(payload.email):
                return EMAIL_IN_USE
            user = self.repository.create_user(payload.name, payload.email, hash_password(payload.password))
        except IntegrityError:
            return EMAIL_IN_USE
        except SQLAlchemyError:
            logger.exception("Sign-up failed for %s", payload.email)
            return ApplicationError.internal("SIGN_UP_ERROR")
        logger.info("User %s registered", user.id)
        return user

    def sign_in(self, payload: SignInBody) -> User | ApplicationError:
        try:
            user = self.repository.get_user_by_email(payload.email)
        except SQLAlchemyError:
            logger.exception("Sign-in lookup failed")
            return ApplicationError.internal("SIGN_IN_ERROR")
        # unknown accounts still pay for one argon2 verification
        stored_hash = user.password if user else _dummy_hash()
        if not verify_password(payload.password, stored_hash) or not user:
            logger.warning("Rejected sign-in attempt")
            return BAD_CREDENTIALS
        return user

    def refresh(self, refresh_token: str | None) -> User | ApplicationError:
        claims = decode_token(refresh_token)
        if not claims or claims.get("type") != REFRESH_TOKEN_TYPE:
            return REFRESH_REJECTED
        try:
            user = self.repository.get_user(str(claims.get("sub") or ""))
        except SQLAlchemyError:
            logger.exception("Token refresh lookup failed")
            return ApplicationError.internal("REFRESH_ERROR")
        return user or REFRESH_REJECTED
