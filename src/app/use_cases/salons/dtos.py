"""
Salon Directory DTOs
"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CreateSalonCommand(BaseModel):
    """Salon creation intent; services may be a list or a comma-separated string"""

    name: str = ""
    area: str = ""
    rating: Optional[float] = None
    services: Union[List[str], str, None] = None
    price_range: str = ""
    phone: str = ""
    address: str = ""
    hours: str = ""
    notes: str = ""


class SalonInfo(BaseModel):
    """Salon record as returned to clients"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    area: str
    rating: float
    services: List[str]
    price_range: str = Field(serialization_alias="priceRange")
    phone: str
    address: str
    hours: str
    notes: str
    created_at: datetime = Field(serialization_alias="createdAt")


class ListSalonsResponse(BaseModel):
    success: bool = True
    salons: List[SalonInfo]


class CreateSalonResponse(BaseModel):
    success: bool = True
    salon: SalonInfo
