"""
Trip Pydantic schemas.
"""

from datetime import datetime
from typing import Optional, List
from backend.app.schemas.base import (
    CamelModel,
    EmployeeResponse,
    RouteResponse,
    ShipmentResponse,
    TripResponse,
    TruckResponse,
)


class TripCreate(CamelModel):
    """Schema for creating a new trip. driver2 and end are optional."""
    truck_id: Optional[int] = None
    driver1_id: Optional[int] = None
    driver2_id: Optional[int] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class TripUpdate(TripCreate):
    """Schema for updating an existing trip."""


class TripDetailResponse(TripResponse):
    """Schema for a trip with truck, drivers, shipments and routes."""
    truck: TruckResponse
    driver1: EmployeeResponse
    driver2: Optional[EmployeeResponse] = None
    shipments: List[ShipmentResponse] = []
    routes: List[RouteResponse] = []
