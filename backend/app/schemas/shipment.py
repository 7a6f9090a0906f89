"""
Shipment Pydantic schemas.
"""

from decimal import Decimal
from typing import Optional
from backend.app.schemas.base import (
    CamelModel,
    CustomerResponse,
    ShipmentResponse,
    TripResponse,
)


class ShipmentCreate(CamelModel):
    """Schema for creating a new shipment. Weight and value may be zero."""
    trip_id: Optional[int] = None
    customer_id: Optional[int] = None
    weight: Optional[Decimal] = None
    value: Optional[Decimal] = None
    origin: Optional[str] = None
    destination: Optional[str] = None


class ShipmentUpdate(ShipmentCreate):
    """Schema for updating an existing shipment."""


class ShipmentDetailResponse(ShipmentResponse):
    """Schema for a shipment with its trip and customer."""
    trip: TripResponse
    customer: CustomerResponse
