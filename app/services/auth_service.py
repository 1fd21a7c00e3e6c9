# app/services/auth_service.py
import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.config import Settings
from app.core.errors import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)
from app.core.security import (
    decode_token,
    hash_password,
    issue_token_pair,
    verify_password,
)
from app.models.user import ROLE_CUSTOMER, User
from app.repositories.user_repo import UserRepository
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.schemas.user import UserRead

logger = logging.getLogger(__name__)


class AuthService:
    """
    Registration, login and token refresh.

    Responsibilities:
      - hash and verify passwords
      - issue access/refresh token pairs
      - map lookup/verification failures to domain errors

    Login never reveals whether an email is registered: unknown email
    and wrong password raise the same InvalidCredentialsError.
    """

    def __init__(self, repo: UserRepository, settings: Settings):
        self.repo = repo
        self.settings = settings
        # Compared against on unknown emails so both failure paths pay the
        # same bcrypt cost.
        self._dummy_hash = hash_password(uuid.uuid4().hex, settings.BCRYPT_COST)

    def _auth_response(self, user: User) -> AuthResponse:
        pair = issue_token_pair(user.id, user.email, user.role, self.settings)
        return AuthResponse(
            user=UserRead.model_validate(user),
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
        )

    # ----- Public operations -----

    def register(self, session: Session, payload: RegisterRequest) -> AuthResponse:
        """
        Create a customer account and sign it in.

        Raises:
            EmailAlreadyExistsError(409): a live user already owns the email.
        """
        if self.repo.email_exists(session, payload.email):
            raise EmailAlreadyExistsError()

        user = User(
            email=payload.email,
            password_hash=hash_password(payload.password, self.settings.BCRYPT_COST),
            first_name=payload.first_name,
            last_name=payload.last_name,
            role=ROLE_CUSTOMER,
        )

        try:
            user = self.repo.create(session, user)
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            raise EmailAlreadyExistsError()

        logger.info("Registered user %s", user.id)
        return self._auth_response(user)

    def login(self, session: Session, payload: LoginRequest) -> AuthResponse:
        """
        Verify credentials and issue a fresh token pair.

        Raises:
            InvalidCredentialsError(401): unknown email or wrong password.
        """
        user = self.repo.get_by_email(session, payload.email)
        if user is None:
            verify_password(payload.password, self._dummy_hash)
            logger.warning("Failed login: unknown email")
            raise InvalidCredentialsError()

        if not verify_password(payload.password, user.password_hash):
            logger.warning("Failed login for user %s", user.id)
            raise InvalidCredentialsError()

        return self._auth_response(user)

    def refresh(self, session: Session, refresh_token: str) -> AuthResponse:
        """
        Exchange a valid refresh token for a new pair.

        Raises:
            InvalidTokenError(401): bad/expired token or the user no longer exists.
        """
        try:
            claims = decode_token(
                refresh_token,
                self.settings.JWT_REFRESH_SECRET,
                token_type="refresh",
                algorithm=self.settings.JWT_ALGORITHM,
            )
        except InvalidTokenError:
            logger.info("Rejected refresh token")
            raise InvalidTokenError("Invalid or expired refresh token")

        user = self.repo.get_by_id(session, claims.user_id)
        if user is None:
            logger.info("Refresh for missing user %s", claims.user_id)
            raise InvalidTokenError("Invalid or expired refresh token")

        return self._auth_response(user)

    def get_current_user(self, session: Session, user_id: uuid.UUID) -> User:
        """
        Raises:
            UserNotFoundError(404)
        """
        user = self.repo.get_by_id(session, user_id)
        if user is None:
            raise UserNotFoundError()
        return user
