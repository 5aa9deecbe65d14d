from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import Salon


class ISalonRepository(ABC):
    """Salon repository interface - application layer"""

    @abstractmethod
    async def list_newest_first(self) -> List[Salon]:
        """Get all salons, most recently created first"""
        pass

    @abstractmethod
    async def create(self, salon: Salon) -> Salon:
        """Create a new salon"""
        pass
