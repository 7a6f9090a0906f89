"""
Route Pydantic schemas.
"""

from pydantic import Field
from typing import Optional
from backend.app.schemas.base import CamelModel, RouteResponse, TripResponse


class RouteCreate(CamelModel):
    """Schema for adding a leg to a trip."""
    trip_id: Optional[int] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None


class RouteUpdate(RouteCreate):
    """Schema for updating a route."""


class RouteDetailResponse(RouteResponse):
    """Schema for a route with its trip."""
    trip: TripResponse
