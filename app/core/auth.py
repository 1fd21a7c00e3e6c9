# app/core/auth.py
import uuid
from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer
from sqlmodel import Session

from app.core.config import Settings, get_settings
from app.core.errors import (
    ForbiddenError,
    InvalidTokenError,
    UnauthorizedError,
    UserNotFoundError,
)
from app.core.security import decode_token
from app.database import get_session
from app.models.user import ROLE_ADMIN, User
from app.repositories.user_repo import UserRepository

# HTTP Bearer scheme, registered for the OpenAPI "Authorize" button only.
# auto_error=False: header parsing happens in get_auth_context so missing
# and malformed headers get distinct messages in our error envelope.
bearer_scheme = HTTPBearer(auto_error=False)

_repo = UserRepository()


@dataclass(frozen=True)
class AuthContext:
    """
    Identity of the caller, taken from a verified access token.

    Passed to handlers through FastAPI dependencies; nothing is stored
    on request.state.
    """

    user_id: uuid.UUID
    email: str
    role: str


def _extract_bearer_token(header: str | None) -> str:
    if not header:
        raise UnauthorizedError("Missing authorization header")

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedError("Invalid authorization header format")
    return parts[1]


def get_auth_context(
    request: Request,
    _credentials=Security(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> AuthContext:
    """
    Resolve the caller's identity from `Authorization: Bearer <token>`.

    Flow:
      1. No header             => 401 "Missing authorization header"
      2. Not "Bearer <token>"  => 401 "Invalid authorization header format"
      3. Bad/expired token     => 401 "Invalid or expired token"
      4. Valid                 => AuthContext

    Raises:
        UnauthorizedError(401)
    """
    token = _extract_bearer_token(request.headers.get("Authorization"))

    try:
        claims = decode_token(
            token,
            settings.JWT_SECRET,
            token_type="access",
            algorithm=settings.JWT_ALGORITHM,
        )
    except InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")

    return AuthContext(user_id=claims.user_id, email=claims.email, role=claims.role)


def require_role(*roles: str) -> Callable[..., AuthContext]:
    """
    Build a dependency that only lets the given roles through.

    Usage:

        @router.get("/admin-only", dependencies=[Depends(require_role("admin"))])

    Raises:
        UnauthorizedError(401): no/invalid token (from get_auth_context)
        ForbiddenError(403): role not in the allow-list
    """
    allowed = frozenset(roles)

    def _require_role(ctx: AuthContext = Depends(get_auth_context)) -> AuthContext:
        if ctx.role not in allowed:
            raise ForbiddenError()
        return ctx

    return _require_role


require_admin = require_role(ROLE_ADMIN)


def get_current_user(
    ctx: AuthContext = Depends(get_auth_context),
    session: Session = Depends(get_session),
) -> User:
    """
    Load the live User row behind the token.

    Raises:
        UserNotFoundError(404): account removed after the token was issued.
    """
    user = _repo.get_by_id(session, ctx.user_id)
    if user is None:
        raise UserNotFoundError()
    return user
