from typing import List, Optional, Union

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.salons import (
    CreateSalonCommand,
    CreateSalonResponse,
    CreateSalonUseCase,
    ListSalonsResponse,
    ListSalonsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/salons", tags=["Salons"])


class CreateSalonRequest(BaseModel):
    """
    Create salon HTTP request payload

    services may be sent as a list or as a comma-separated string.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    area: str = ""
    rating: Optional[float] = None
    services: Union[List[str], str, None] = None
    price_range: str = Field(default="", alias="priceRange")
    phone: str = ""
    address: str = ""
    hours: str = ""
    notes: str = ""


@router.get("", status_code=status.HTTP_200_OK, response_model=ListSalonsResponse)
async def list_salons(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List all salons, newest first"""
    result = await ListSalonsUseCase(uow).execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateSalonResponse)
async def create_salon(
    request: CreateSalonRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create a salon

    Raises:
        - 400 Bad Request: Missing required fields or rating outside [0, 5]
        - 500 Internal Server Error: Server error
    """
    command = CreateSalonCommand(**request.model_dump())

    result = await CreateSalonUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
