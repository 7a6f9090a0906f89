"""
Route API Endpoints.

Routes are the legs of a trip.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, get_or_404
from backend.app.models.route import Route
from backend.app.models.trip import Trip
from backend.app.schemas.route import RouteCreate, RouteUpdate, RouteDetailResponse
from backend.app.core.dependencies import parse_id, provided_fields
from backend.app.core.exceptions import MissingFieldsError, handle_store_errors

router = APIRouter(prefix="/route", tags=["Route"])


@router.get("", response_model=List[RouteDetailResponse])
@handle_store_errors("Error fetching routes")
async def list_routes(db: AsyncSession = Depends(get_db)):
    routes = await fetch_all(db, Route, selectinload(Route.trip))
    return [RouteDetailResponse.model_validate(route) for route in routes]


@router.get("/{route_id}", response_model=RouteDetailResponse)
@handle_store_errors("Error fetching route by ID")
async def get_route(route_id: str, db: AsyncSession = Depends(get_db)):
    pk = parse_id(route_id, "route")
    route = await get_or_404(db, Route, pk, "Route", selectinload(Route.trip))
    return RouteDetailResponse.model_validate(route)


@router.post("", response_model=RouteDetailResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating route")
async def create_route(route_data: RouteCreate, db: AsyncSession = Depends(get_db)):
    """Add a leg (from -> to) to an existing trip."""
    if not route_data.trip_id or not route_data.from_ or not route_data.to:
        raise MissingFieldsError("tripId, from, and to are required")
    
    trip = await get_or_404(db, Trip, route_data.trip_id, "Trip")
    
    new_route = Route(trip_id=trip.id, from_=route_data.from_, to=route_data.to)
    db.add(new_route)
    await db.commit()
    
    route = await get_or_404(db, Route, new_route.id, "Route", selectinload(Route.trip))
    return RouteDetailResponse.model_validate(route)


@router.put("/{route_id}", response_model=RouteDetailResponse)
@handle_store_errors("Error updating route")
async def update_route(route_id: str, route_data: RouteUpdate, db: AsyncSession = Depends(get_db)):
    """Update a route. Omitted, null or blank fields keep their value."""
    pk = parse_id(route_id, "route")
    route = await get_or_404(db, Route, pk, "Route")
    
    update_data = provided_fields(route_data)
    
    if "trip_id" in update_data:
        trip = await get_or_404(db, Trip, update_data.pop("trip_id"), "Trip")
        route.trip_id = trip.id
    
    for field, value in update_data.items():
        setattr(route, field, value)
    
    await db.commit()
    
    route = await get_or_404(db, Route, pk, "Route", selectinload(Route.trip))
    return RouteDetailResponse.model_validate(route)


@router.delete("/{route_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting route")
async def delete_route(route_id: str, db: AsyncSession = Depends(get_db)):
    pk = parse_id(route_id, "route")
    route = await get_or_404(db, Route, pk, "Route")
    
    await db.delete(route)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
