# app/models/user.py
import uuid

from sqlalchemy import Index, text
from sqlmodel import Field

from app.models.base import TimestampedModel

ROLE_CUSTOMER = "customer"
ROLE_ADMIN = "admin"
ROLES = (ROLE_CUSTOMER, ROLE_ADMIN)


class User(TimestampedModel, table=True):
    """
    Registered account.

    Role:
      - "customer" | "admin" (customers by default; admins are promoted)

    Email is unique among live (non-deleted) users. The partial unique
    index lets a soft-deleted account's email be registered again.
    """

    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    email: str = Field(
        max_length=255,
        description="Login email, stored lower-cased",
    )

    password_hash: str = Field(
        description="bcrypt hash; never returned to clients",
    )

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    phone: str | None = Field(default=None, max_length=50)

    role: str = Field(
        default=ROLE_CUSTOMER,
        index=True,
        description="Application role: customer | admin",
    )

    email_verified: bool = Field(default=False)


class Address(TimestampedModel, table=True):
    """Shipping or billing address owned by a user."""

    __tablename__ = "addresses"

    user_id: uuid.UUID = Field(foreign_key="users.id", index=True)

    # shipping | billing
    type: str = Field(default="shipping")

    street_address: str
    city: str
    state: str | None = None
    postal_code: str | None = None
    country: str
    is_default: bool = Field(default=False)
