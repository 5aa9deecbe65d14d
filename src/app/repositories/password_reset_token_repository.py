from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        """Get password reset token by its exact token string"""
        pass

    @abstractmethod
    async def delete(self, token: PasswordResetToken) -> None:
        """Delete a single token"""
        pass

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete every token issued to a user. Returns count deleted."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every token with expires_at < now. Returns count deleted."""
        pass
