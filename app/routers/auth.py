# app/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import AuthContext, get_auth_context
from app.core.config import get_settings
from app.database import get_session
from app.repositories.user_repo import UserRepository
from app.schemas.auth import AuthResponse, LoginRequest, RefreshRequest, RegisterRequest
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.user import UserRead
from app.services.auth_service import AuthService

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)

repo = UserRepository()
service = AuthService(repo, get_settings())


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
def register(payload: RegisterRequest, session: Session = Depends(get_session)):
    """
    Create a customer account.

    Returns the new user plus an access/refresh token pair.
    409 if the email is already registered.
    """
    return ApiResponse(
        data=service.register(session, payload),
        message="User registered successfully",
    )


@router.post("/login", response_model=ApiResponse[AuthResponse])
def login(payload: LoginRequest, session: Session = Depends(get_session)):
    """
    Exchange email + password for a token pair.

    Unknown email and wrong password both yield 401 INVALID_CREDENTIALS.
    """
    return ApiResponse(data=service.login(session, payload), message="Login successful")


@router.post("/refresh", response_model=ApiResponse[AuthResponse])
def refresh(payload: RefreshRequest, session: Session = Depends(get_session)):
    """Mint a new token pair from a refresh token."""
    return ApiResponse(
        data=service.refresh(session, payload.refresh_token),
        message="Token refreshed successfully",
    )


@router.post("/logout", response_model=ApiResponse[None])
def logout():
    """
    Stateless logout: tokens are not tracked server-side, the client
    simply discards them.
    """
    return ApiResponse(message="Logout successful")


@router.get(
    "/me",
    response_model=ApiResponse[UserRead],
    responses={404: {"model": ErrorResponse}},
)
def read_me(
    ctx: AuthContext = Depends(get_auth_context),
    session: Session = Depends(get_session),
):
    """
    Return the authenticated user's profile.

    Auth:
      - Requires a valid access token.
    """
    user = service.get_current_user(session, ctx.user_id)
    return ApiResponse(data=UserRead.model_validate(user))
