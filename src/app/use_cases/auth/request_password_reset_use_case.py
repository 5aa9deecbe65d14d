"""
Request Password Reset Use Case

Issues a single-use reset token and delivers the reset link by email.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from src.libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateRecordError
from src.app.services.notification_gateway import NotificationDeliveryError, NotificationGateway
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.entities import PasswordResetToken
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "If the email exists, a reset link was sent."


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - 32 random bytes, hex encoded (64 chars)
    - Any earlier token of the user is deleted first: one live token per user
    - Token expires ttl_minutes after issuance (30 by default)
    - No email enumeration: unknown emails get a generic success
    - Delete and insert commit before delivery so no write lock is held
      while the provider is called; a failed delivery deletes the new token
    - A concurrent issuance for the same user that loses the race on the
      unique user_id gets the generic success; the winner sends the email
    - The raw token is returned only when expose_token is set (development)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notifier: NotificationGateway,
        frontend_url: str,
        ttl_minutes: int = 30,
        expose_token: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.notifier = notifier
        self.frontend_url = frontend_url.rstrip("/")
        self.ttl_minutes = ttl_minutes
        self.expose_token = expose_token
        self.clock = clock

    def build_reset_url(self, token: str) -> str:
        return f"{self.frontend_url}/reset-password.html?token={token}"

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with reset status, or Error

        Errors:
            - VALIDATION_ERROR: email missing
            - DELIVERY_ERROR: user exists but the email could not be sent
        """
        if not email or not email.strip():
            return Return.err(Error("VALIDATION_ERROR", "Email is required"))

        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                return Return.ok(RequestPasswordResetResponse(message=GENERIC_MESSAGE))

            # Collapse any earlier issuance back to "no token"
            await self.uow.password_reset_tokens.delete_all_by_user_id(user.id)

            token = secrets.token_hex(32)
            reset_token = PasswordResetToken(
                user_id=user.id,
                token=token,
                expires_at=self.clock() + timedelta(minutes=self.ttl_minutes),
            )
            try:
                reset_token = await self.uow.password_reset_tokens.create(reset_token)
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                logger.info("Concurrent reset request for user %s; keeping the other token", user.id)
                return Return.ok(RequestPasswordResetResponse(message=GENERIC_MESSAGE))

            try:
                await self.notifier.send_password_reset(user.email, self.build_reset_url(token))
            except NotificationDeliveryError as exc:
                logger.error("Reset email delivery failed for user %s: %s", user.id, exc)
                # The link never reached the user; withdraw the token
                await self.uow.password_reset_tokens.delete(reset_token)
                await self.uow.commit()
                return Return.err(Error("DELIVERY_ERROR", "Unable to send reset email"))

            logger.info("Password reset token issued for user %s", user.id)
            return Return.ok(
                RequestPasswordResetResponse(
                    message=(
                        "Reset link sent to your email. "
                        f"Use it within {self.ttl_minutes} minutes."
                    ),
                    reset_token=token if self.expose_token else None,
                )
            )
