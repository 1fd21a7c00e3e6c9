# app/models/base.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedModel(SQLModel):
    """
    Common columns for every table.

    - id: UUID4 primary key
    - created_at / updated_at: UTC timestamps
    - deleted_at: soft-delete marker; rows are never physically removed
    """

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        description="Last modification timestamp (UTC)",
    )

    deleted_at: datetime | None = Field(
        default=None,
        index=True,
        description="Soft-delete timestamp; NULL for live rows",
    )

    def touch(self) -> None:
        self.updated_at = utcnow()
