"""
Request/response schemas for the authentication endpoints.

Sign-up enforces the password policy; sign-in only trims, so a weak
password never reveals more than "invalid credentials".
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

SPECIAL_CHARACTERS = re.compile(r'[!@#$%^&*(),.?":{}|<>]')


class SignUpBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("password")
    @classmethod
    def check_password_policy(cls, value: str) -> str:
        if len(value) < 8:
            raise ValueError("A senha deve conter ao menos 8 caracteres")
        if not re.search(r"[A-Z]", value):
            raise ValueError("A senha deve conter ao menos 1 letra maiúscula")
        if not SPECIAL_CHARACTERS.search(value):
            raise ValueError("A senha deve conter ao menos 1 caractere especial")
        if not re.search(r"[0-9]", value):
            raise ValueError("A senha deve conter ao menos 1 número")
        return value


class SignInBody(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return value.lower()


class CurrentUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
