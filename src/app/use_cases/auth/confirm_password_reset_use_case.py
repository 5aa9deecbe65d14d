"""
Confirm Password Reset Use Case

Consumes a reset token and replaces the user's password.
"""

import logging
from datetime import datetime
from typing import Callable

from src.libs.result import Error, Result, Return
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is looked up by its exact string
    - Missing and expired tokens get the same INVALID_TOKEN error
    - expires_at == now is still valid
    - An expired token found on lookup is deleted
    - Password is hashed with bcrypt (cost factor 10)
    - Every token of the user is deleted in the same transaction
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utc_now):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from the email link)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - VALIDATION_ERROR: token or password missing
            - INVALID_TOKEN: token not found or expired
            - USER_NOT_FOUND: token points at a user that no longer exists
        """
        if not token or not new_password:
            return Return.err(
                Error("VALIDATION_ERROR", "Token and new password are required")
            )

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token(token)

            if reset_token is None:
                return Return.err(Error("INVALID_TOKEN", "Reset token is invalid or expired"))

            if reset_token.is_expired(self.clock()):
                await self.uow.password_reset_tokens.delete(reset_token)
                await self.uow.commit()
                return Return.err(Error("INVALID_TOKEN", "Reset token is invalid or expired"))

            user = await self.uow.users.get_by_id(reset_token.user_id)
            if user is None:
                logger.warning("Reset token %s references a missing user", reset_token.id)
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.password_hash = hash_password(new_password)
            user.updated_at = self.clock()
            await self.uow.users.update(user)

            await self.uow.password_reset_tokens.delete_all_by_user_id(user.id)

            await self.uow.commit()

            logger.info("Password reset completed for user %s", user.id)
            return Return.ok(
                ConfirmPasswordResetResponse(message="Password updated successfully")
            )
