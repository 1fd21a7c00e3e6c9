# app/schemas/auth.py
from pydantic import ConfigDict, EmailStr, field_validator
from sqlmodel import SQLModel, Field

from app.core.security import BCRYPT_MAX_BYTES
from app.schemas.user import UserRead, _normalize_name

MIN_PASSWORD_LENGTH = 8


def _normalize_email(v: str) -> str:
    return v.strip().lower()


class RegisterRequest(SQLModel):
    """
    Payload for POST /auth/register.

    Validation rules:
      - email must be a valid address (stored lower-cased)
      - password: at least 8 characters, at most 72 bytes (bcrypt limit)
      - first_name / last_name: required, not blank
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v) if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return v

    @field_validator("first_name", "last_name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return _normalize_name(v)


class LoginRequest(SQLModel):
    """Payload for POST /auth/login."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v) if isinstance(v, str) else v


class RefreshRequest(SQLModel):
    """Payload for POST /auth/refresh."""

    refresh_token: str = Field(min_length=1)


class AuthResponse(SQLModel):
    """Returned by register, login and refresh."""

    user: UserRead
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
