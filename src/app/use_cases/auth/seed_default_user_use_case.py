"""
Use Case: Seed Default User

Creates a known demo account when explicitly enabled in config.
"""

import logging

from pydantic import BaseModel

from src.libs.result import Result, Return
from src.app.services.passwords import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.domain.entities import User

logger = logging.getLogger(__name__)


class SeedDefaultUserResponse(BaseModel):
    created: bool


class SeedDefaultUserUseCase:
    """Idempotent: does nothing if the seed email is already registered"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, name: str, email: str, password: str) -> Result[SeedDefaultUserResponse]:
        email = normalize_email(email)
        async with self.uow:
            if await self.uow.users.get_by_email(email):
                return Return.ok(SeedDefaultUserResponse(created=False))

            user = User(name=name.strip(), email=email, password_hash=hash_password(password))
            await self.uow.users.create(user)
            await self.uow.commit()

        logger.warning("Seeded default user %s; do not enable seeding in production", email)
        return Return.ok(SeedDefaultUserResponse(created=True))
