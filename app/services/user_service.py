# app/services/user_service.py
import logging
import uuid

from sqlmodel import Session

from app.core.errors import UserNotFoundError
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserUpdate, UserRoleUpdate

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for User profiles and admin user management.

    Responsibilities:
      - enforce app rules (email/role not self-editable)
      - orchestrate repository operations
      - map missing rows to UserNotFoundError
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ----- Self profile -----

    def update_me(
        self,
        session: Session,
        current_user: User,
        payload: UserUpdate,
    ) -> User:
        """
        Partial update for profile edits.
        Only non-null fields present in the payload are written.
        """
        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(current_user, field, value)

        return self.repo.update(session, current_user)

    # ----- Admin operations -----

    def list_users(self, session: Session, skip: int, limit: int) -> list[User]:
        """List users with pagination (admin only)."""
        return self.repo.list(session, skip=skip, limit=limit)

    def get_user(self, session: Session, user_id: uuid.UUID) -> User:
        """
        Get a user by id (admin only).

        Raises:
            UserNotFoundError(404): if not found or soft-deleted.
        """
        user = self.repo.get_by_id(session, user_id)
        if not user:
            raise UserNotFoundError()
        return user

    def update_role(
        self,
        session: Session,
        user_id: uuid.UUID,
        payload: UserRoleUpdate,
    ) -> User:
        """
        Change user's role (admin only).

        Role validation is enforced by the schema (Literal). Tokens already
        issued keep the old role until they expire.
        """
        user = self.get_user(session, user_id)
        user.role = payload.role
        logger.info("Role of user %s changed to %s", user.id, payload.role)
        return self.repo.update(session, user)

    def delete_user(self, session: Session, user_id: uuid.UUID) -> None:
        """Soft-delete a user (admin only)."""
        user = self.get_user(session, user_id)
        self.repo.soft_delete(session, user)
        logger.info("Soft-deleted user %s", user.id)
