from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.salon_repository import ISalonRepository
from src.domain.entities import Salon


class SalonRepository(ISalonRepository):
    """Salon repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_newest_first(self) -> List[Salon]:
        """Get all salons, most recently created first"""
        stmt = select(Salon).order_by(Salon.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, salon: Salon) -> Salon:
        """Create a new salon"""
        self.session.add(salon)
        await self.session.flush()
        await self.session.refresh(salon)
        return salon
