"""
Salon Entity

A directory listing for a salon.
"""

from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now

MIN_RATING = 0.0
MAX_RATING = 5.0


class Salon(SQLModel, table=True):
    """
    Salon entity - one directory record.

    Business Rules:
    - name and area are required
    - rating is within [0, 5]
    - services is an ordered list of unique, trimmed tags
    """

    __tablename__ = "salons"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    area: str = Field(max_length=255)
    rating: float
    services: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    price_range: str = Field(default="", max_length=64)
    phone: str = Field(default="", max_length=64)
    address: str = Field(default="", max_length=512)
    hours: str = Field(default="", max_length=255)
    notes: str = Field(default="")

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_salon_created_at", "created_at"),)
