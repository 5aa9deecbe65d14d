"""
PasswordResetToken Entity

Single-use, time-limited password reset tokens.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity.

    Business Rules:
    - token is 32 random bytes, hex encoded (64 chars), unique
    - Expires 30 minutes after issuance by default
    - At most one row per user (unique user_id): issuing deletes the previous one
    - Single-use: the row is deleted once the password is reset
    - Valid while expires_at >= now; an expired row is never honoured
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)
    token: str = Field(unique=True, max_length=64)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_password_reset_expires_at", "expires_at"),)

    def is_expired(self, now: datetime) -> bool:
        # A token expiring exactly at `now` is still valid
        return self.expires_at < now
