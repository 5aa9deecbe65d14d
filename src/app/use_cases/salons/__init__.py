"""
Salon Directory Use Cases
"""

from .list_salons_use_case import ListSalonsUseCase
from .create_salon_use_case import CreateSalonUseCase
from .mappers import normalize_services
from .dtos import (
    CreateSalonCommand,
    CreateSalonResponse,
    ListSalonsResponse,
    SalonInfo,
)

__all__ = [
    "ListSalonsUseCase",
    "CreateSalonUseCase",
    "normalize_services",
    "CreateSalonCommand",
    "CreateSalonResponse",
    "ListSalonsResponse",
    "SalonInfo",
]
