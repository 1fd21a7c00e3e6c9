# app/core/config.py
import re
from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h|d)")

_UNIT_SECONDS = {
    "ms": 0.001,
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": 86400,
}


def parse_duration(value: str | int | float | timedelta) -> timedelta:
    """
    Parse a duration like "15m", "1h30m", "7d" or a plain number of seconds.

    Raises:
        ValueError: if the string is empty or contains unknown units.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)

    raw = value.strip().lower()
    if not raw:
        raise ValueError("duration cannot be empty")
    if re.fullmatch(r"\d+(?:\.\d+)?", raw):
        return timedelta(seconds=float(raw))

    pos = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(raw):
        if match.start() != pos:
            break
        seconds += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()

    if pos != len(raw):
        raise ValueError(f"invalid duration: {value!r}")
    return timedelta(seconds=seconds)


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (SQLAlchemy URL, e.g. postgresql+psycopg2://...)
      - JWT_SECRET (signs access tokens)
      - JWT_REFRESH_SECRET (signs refresh tokens)

    Everything else has a development default.
    """

    PROJECT_NAME: str = "Gophiway"
    APP_ENV: str = "development"
    API_VERSION: str = "v1"
    API_V1_STR: str = "/api/v1"

    # Database
    DATABASE_URL: str
    DB_SSL_MODE: str | None = None
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600

    # JWT: access and refresh tokens use independent secrets and lifetimes
    JWT_SECRET: str
    JWT_REFRESH_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION: timedelta = timedelta(minutes=15)
    JWT_REFRESH_EXPIRATION: timedelta = timedelta(days=7)

    # Password hashing
    BCRYPT_COST: int = Field(default=12, ge=4, le=31)

    # CORS (comma-separated list)
    CORS_ALLOWED_ORIGINS: str = "http://localhost:5173"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("JWT_EXPIRATION", "JWT_REFRESH_EXPIRATION", mode="before")
    @classmethod
    def parse_jwt_durations(cls, v):
        return parse_duration(v)

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOWED_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
