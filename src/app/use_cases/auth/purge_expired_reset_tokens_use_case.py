"""
Use Case: Purge Expired Reset Tokens

Background sweep that deletes reset tokens past their expiry.
"""

import logging
from datetime import datetime
from typing import Optional

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import PurgeExpiredResetTokensResponse

logger = logging.getLogger(__name__)


class PurgeExpiredResetTokensUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, now: Optional[datetime] = None) -> Result[PurgeExpiredResetTokensResponse]:
        now = now or utc_now()
        async with self.uow:
            deleted = await self.uow.password_reset_tokens.delete_expired(now)
            await self.uow.commit()

        if deleted:
            logger.info("Purged %d expired reset tokens", deleted)
        return Return.ok(PurgeExpiredResetTokensResponse(deleted=deleted))
