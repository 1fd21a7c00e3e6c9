# app/routers/users.py
import uuid

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.core.auth import get_current_user, require_admin
from app.database import get_session
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.user import UserRead, UserUpdate, UserRoleUpdate
from app.services.user_service import UserService

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)

repo = UserRepository()
service = UserService(repo)


# -------- Self profile --------


@router.patch("/me", response_model=ApiResponse[UserRead])
def update_me(
    payload: UserUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    """
    Update the authenticated user's profile (partial update).

    Editable: first_name, last_name, phone.
    """
    user = service.update_me(session, current_user, payload)
    return ApiResponse(data=UserRead.model_validate(user))


# -------- Admin endpoints --------


@router.get(
    "",
    response_model=ApiResponse[list[UserRead]],
    dependencies=[Depends(require_admin)],
    responses={403: {"model": ErrorResponse}},
)
def list_users(
    session: Session = Depends(get_session),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1, le=200),
):
    """
    List all users (admin only).

    Pagination via skip/limit.
    """
    users = service.list_users(session, skip, limit)
    return ApiResponse(data=[UserRead.model_validate(u) for u in users])


@router.get(
    "/{user_id}",
    response_model=ApiResponse[UserRead],
    dependencies=[Depends(require_admin)],
    responses={403: {"model": ErrorResponse}},
)
def get_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a specific user by id (admin only).
    """
    return ApiResponse(data=UserRead.model_validate(service.get_user(session, user_id)))


@router.patch(
    "/{user_id}/role",
    response_model=ApiResponse[UserRead],
    dependencies=[Depends(require_admin)],
    responses={403: {"model": ErrorResponse}},
)
def change_role(
    user_id: uuid.UUID,
    payload: UserRoleUpdate,
    session: Session = Depends(get_session),
):
    """
    Update a user's role (admin only).

    Allowed roles: customer, admin.
    """
    user = service.update_role(session, user_id, payload)
    return ApiResponse(data=UserRead.model_validate(user))


@router.delete(
    "/{user_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
    responses={403: {"model": ErrorResponse}},
)
def delete_user(
    user_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """Soft-delete a user (admin only). The row is kept with deleted_at set."""
    service.delete_user(session, user_id)
    return ApiResponse(message="User deleted")
