"""
Truck Pydantic schemas.

Defines request and response models for truck management.
``numberOfRepairs`` is read-only: it is maintained by the repair endpoints.
"""

from typing import Optional, List
from backend.app.schemas.base import (
    CamelModel,
    BrandResponse,
    RepairResponse,
    TripResponse,
    TruckResponse,
)


class TruckCreate(CamelModel):
    """Schema for registering a new truck."""
    brand_id: Optional[int] = None
    load: Optional[int] = None
    capacity: Optional[int] = None
    year: Optional[int] = None


class TruckUpdate(TruckCreate):
    """Schema for updating an existing truck."""


class TruckDetailResponse(TruckResponse):
    """Schema for a truck with brand, repairs and trips."""
    brand: BrandResponse
    repairs: List[RepairResponse] = []
    trips: List[TripResponse] = []
