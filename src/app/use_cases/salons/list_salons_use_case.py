from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import ListSalonsResponse
from .mappers import to_salon_info


class ListSalonsUseCase:
    """Return every salon, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListSalonsResponse]:
        async with self.uow:
            salons = await self.uow.salons.list_newest_first()

        return Return.ok(ListSalonsResponse(salons=[to_salon_info(s) for s in salons]))
