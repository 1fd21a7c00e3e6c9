# app/repositories/user_repo.py
import uuid

from sqlmodel import Session, select

from app.models.base import utcnow
from app.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic

    Soft-deleted rows (deleted_at set) are invisible to every query here.
    """

    # ----- Queries -----

    def get_by_id(self, session: Session, user_id: uuid.UUID) -> User | None:
        """Return a live User by primary key, or None."""
        stmt = select(User).where(User.id == user_id, User.deleted_at.is_(None))
        return session.exec(stmt).first()

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a live User by email, or None."""
        stmt = select(User).where(User.email == email, User.deleted_at.is_(None))
        return session.exec(stmt).first()

    def email_exists(self, session: Session, email: str) -> bool:
        return self.get_by_email(session, email) is not None

    def list(self, session: Session, skip: int = 0, limit: int = 50) -> list[User]:
        """
        Paginated listing of live users, oldest first.

        Args:
            skip: offset rows (for paging)
            limit: max number of rows returned
        """
        stmt = (
            select(User)
            .where(User.deleted_at.is_(None))
            .order_by(User.created_at)
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    # ----- Writes -----

    def create(self, session: Session, user: User) -> User:
        """
        Insert a new User and return the persisted row.

        Raises:
            sqlalchemy.exc.IntegrityError: if a live user already has this email.
            The session is rolled back before re-raising.
        """
        session.add(user)
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise
        session.refresh(user)
        return user

    def update(self, session: Session, user: User) -> User:
        """
        Persist changes to an existing User.

        Raises:
            sqlalchemy.exc.IntegrityError: on a constraint violation.
            The session is rolled back before re-raising.
        """
        user.touch()
        session.add(user)
        try:
            session.commit()
        except Exception:
            session.rollback()
            raise
        session.refresh(user)
        return user

    def soft_delete(self, session: Session, user: User) -> None:
        """Mark a User deleted; the row stays in the table."""
        user.deleted_at = utcnow()
        self.update(session, user)
