from typing import List, Optional, Union

from src.domain.entities import Salon
from .dtos import SalonInfo


def normalize_services(services: Union[List[str], str, None]) -> List[str]:
    """
    Turn a list or a comma-separated string into trimmed, unique tags.

    Order of first appearance is kept; blank items are dropped.
    """
    if services is None:
        return []
    items = services.split(",") if isinstance(services, str) else services

    tags: List[str] = []
    for item in items:
        tag = str(item).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags


def clean_text(value: Optional[str]) -> str:
    return (value or "").strip()


def to_salon_info(salon: Salon) -> SalonInfo:
    return SalonInfo(
        id=str(salon.id),
        name=salon.name,
        area=salon.area,
        rating=salon.rating,
        services=list(salon.services or []),
        price_range=salon.price_range,
        phone=salon.phone,
        address=salon.address,
        hours=salon.hours,
        notes=salon.notes,
        created_at=salon.created_at,
    )
