"""
Periodic sweep of expired password reset tokens.

Expired tokens are already rejected at lookup time; the sweep keeps the
table from accumulating rows nobody will ever present again.
"""

import asyncio
import logging

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.auth import PurgeExpiredResetTokensUseCase

logger = logging.getLogger(__name__)


async def sweep_expired_reset_tokens(session_factory) -> int:
    """Run one sweep in its own session; returns the number of deleted tokens"""
    async with session_factory() as session:
        use_case = PurgeExpiredResetTokensUseCase(SqlAlchemyUnitOfWork(session))
        result = await use_case.execute()
    return result.value.deleted


async def run_reset_token_sweeper(session_factory, interval_seconds: float) -> None:
    """Sweep forever, every interval_seconds. Stopped by task cancellation."""
    logger.info("Reset token sweeper started (every %ss)", interval_seconds)
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await sweep_expired_reset_tokens(session_factory)
        except Exception:
            logger.exception("Reset token sweep failed; retrying next interval")
