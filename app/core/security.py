# app/core/security.py
"""
Password hashing and JWT issuance/verification.

Two token classes share one format:
  - access  (JWT_SECRET / JWT_EXPIRATION): sent as Bearer on API calls
  - refresh (JWT_REFRESH_SECRET / JWT_REFRESH_EXPIRATION): only used
    to mint a new pair via /auth/refresh

Tokens are stateless; nothing is persisted and there is no revocation list.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal

import bcrypt
from jose import JWTError, jwt

from app.core.config import Settings
from app.core.errors import InvalidTokenError

TokenType = Literal["access", "refresh"]

DEFAULT_ALGORITHM = "HS256"

# bcrypt ignores (or, in recent releases, rejects) input past this length
BCRYPT_MAX_BYTES = 72


# ---------------------------------------------------------
# Passwords
# ---------------------------------------------------------


def hash_password(password: str, cost: int) -> str:
    """
    Hash a password with a fresh random salt.

    Args:
        password: plain-text password
        cost: bcrypt work factor (log2 rounds), 4..31

    Returns:
        The bcrypt hash string ("$2b$<cost>$...").
    """
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=cost))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Comparison is constant-time (done inside bcrypt). Returns False on
    mismatch and on malformed hashes; never raises for a wrong password.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


# ---------------------------------------------------------
# Tokens
# ---------------------------------------------------------


@dataclass(frozen=True)
class TokenClaims:
    """Identity fields carried inside a signed token."""

    user_id: uuid.UUID
    email: str
    role: str
    token_type: TokenType
    expires_at: datetime


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


def create_token(
    user_id: uuid.UUID,
    email: str,
    role: str,
    secret: str,
    ttl: timedelta,
    token_type: TokenType = "access",
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Sign a token for the given identity.

    Claims: sub, email, role, type, iat, exp.
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "type": token_type,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(claims, secret, algorithm=algorithm)


def decode_token(
    token: str,
    secret: str,
    token_type: TokenType = "access",
    algorithm: str = DEFAULT_ALGORITHM,
) -> TokenClaims:
    """
    Verify signature and expiry, then extract the claims.

    Any failure (bad signature, malformed token, expired, wrong token
    type, missing claims) raises the same InvalidTokenError so callers
    cannot tell the causes apart.

    Raises:
        InvalidTokenError
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"verify_aud": False, "require_exp": True, "require_sub": True},
        )
    except JWTError:
        raise InvalidTokenError()

    if payload.get("type") != token_type:
        raise InvalidTokenError()

    email = payload.get("email")
    role = payload.get("role")
    if not email or not role:
        raise InvalidTokenError()

    try:
        user_id = uuid.UUID(payload["sub"])
    except (ValueError, TypeError):
        raise InvalidTokenError()

    return TokenClaims(
        user_id=user_id,
        email=email,
        role=role,
        token_type=token_type,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
    )


def issue_token_pair(
    user_id: uuid.UUID, email: str, role: str, settings: Settings
) -> TokenPair:
    """Mint an access token and a refresh token for one identity."""
    access = create_token(
        user_id,
        email,
        role,
        settings.JWT_SECRET,
        settings.JWT_EXPIRATION,
        token_type="access",
        algorithm=settings.JWT_ALGORITHM,
    )
    refresh = create_token(
        user_id,
        email,
        role,
        settings.JWT_REFRESH_SECRET,
        settings.JWT_REFRESH_EXPIRATION,
        token_type="refresh",
        algorithm=settings.JWT_ALGORITHM,
    )
    return TokenPair(access_token=access, refresh_token=refresh)
