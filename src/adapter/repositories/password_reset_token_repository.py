from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateRecordError
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.domain.entities import PasswordResetToken


class PasswordResetTokenRepository(IPasswordResetTokenRepository):
    """PasswordResetToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token; raises DuplicateRecordError if the user already has one"""
        self.session.add(token)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise DuplicateRecordError(str(exc.orig)) from exc
        await self.session.refresh(token)
        return token

    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        """Get password reset token by its exact token string"""
        stmt = select(PasswordResetToken).where(PasswordResetToken.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, token: PasswordResetToken) -> None:
        """Delete a single token; a row already removed elsewhere is not an error"""
        stmt = delete(PasswordResetToken).where(PasswordResetToken.id == token.id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Delete every token issued to a user"""
        stmt = delete(PasswordResetToken).where(PasswordResetToken.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete every token with expires_at < now"""
        stmt = delete(PasswordResetToken).where(PasswordResetToken.expires_at < now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
