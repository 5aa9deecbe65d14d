"""
Create Salon Use Case

Validates and stores a new directory record.
"""

import logging

from src.libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import MAX_RATING, MIN_RATING, Salon
from .dtos import CreateSalonCommand, CreateSalonResponse
from .mappers import clean_text, normalize_services, to_salon_info

logger = logging.getLogger(__name__)


class CreateSalonUseCase:
    """
    Business Rules:
    - name, area and rating are required
    - rating must lie within [0, 5]
    - services are normalized to unique trimmed tags
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateSalonCommand) -> Result[CreateSalonResponse]:
        name = clean_text(command.name)
        area = clean_text(command.area)

        if not name or not area or command.rating is None:
            return Return.err(
                Error("VALIDATION_ERROR", "Name, area and rating are required")
            )

        if not MIN_RATING <= command.rating <= MAX_RATING:
            return Return.err(
                Error("VALIDATION_ERROR", "Rating must be between 0 and 5")
            )

        salon = Salon(
            name=name,
            area=area,
            rating=command.rating,
            services=normalize_services(command.services),
            price_range=clean_text(command.price_range),
            phone=clean_text(command.phone),
            address=clean_text(command.address),
            hours=clean_text(command.hours),
            notes=clean_text(command.notes),
        )

        async with self.uow:
            salon = await self.uow.salons.create(salon)
            await self.uow.commit()

        logger.info("Salon created: %s", salon.id)
        return Return.ok(CreateSalonResponse(salon=to_salon_info(salon)))
