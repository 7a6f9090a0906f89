"""
Trip API Endpoints.

A trip needs a truck and a first driver; the second driver and the end
timestamp are optional. Referenced drivers must have role Driver.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, fetch_by_id, get_or_404
from backend.app.models.employee import Employee
from backend.app.models.enums import EmployeeRole
from backend.app.models.trip import Trip
from backend.app.models.truck import Truck
from backend.app.schemas.trip import TripCreate, TripUpdate, TripDetailResponse
from backend.app.core.dependencies import parse_id
from backend.app.core.exceptions import (
    MissingFieldsError,
    ResourceNotFoundError,
    handle_store_errors,
)

router = APIRouter(prefix="/trip", tags=["Trip"])

TRIP_RELATIONS = (
    selectinload(Trip.truck),
    selectinload(Trip.driver1),
    selectinload(Trip.driver2),
    selectinload(Trip.shipments),
    selectinload(Trip.routes),
)
is_driver = Employee.role == EmployeeRole.DRIVER.value


async def find_driver(db: AsyncSession, driver_id: int):
    return await fetch_by_id(db, Employee, driver_id, where=(is_driver,))


@router.get("", response_model=List[TripDetailResponse])
@handle_store_errors("Error fetching trips")
async def list_trips(db: AsyncSession = Depends(get_db)):
    """List all trips with truck, drivers, shipments and routes."""
    trips = await fetch_all(db, Trip, *TRIP_RELATIONS)
    return [TripDetailResponse.model_validate(trip) for trip in trips]


@router.get("/{trip_id}", response_model=TripDetailResponse)
@handle_store_errors("Error fetching trip by ID")
async def get_trip(trip_id: str, db: AsyncSession = Depends(get_db)):
    """Get a trip with truck, drivers, shipments and routes."""
    pk = parse_id(trip_id, "trip")
    trip = await get_or_404(db, Trip, pk, "Trip", *TRIP_RELATIONS)
    return TripDetailResponse.model_validate(trip)


@router.post("", response_model=TripDetailResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating trip")
async def create_trip(trip_data: TripCreate, db: AsyncSession = Depends(get_db)):
    """Create a new trip."""
    if not trip_data.truck_id or not trip_data.driver1_id or not trip_data.start:
        raise MissingFieldsError("Truck ID, Driver 1 ID, and start date are required")
    
    truck = await fetch_by_id(db, Truck, trip_data.truck_id)
    driver1 = await find_driver(db, trip_data.driver1_id)
    driver2 = await find_driver(db, trip_data.driver2_id) if trip_data.driver2_id else None
    
    if not truck or not driver1:
        raise ResourceNotFoundError("Truck or Driver1")
    
    if trip_data.driver2_id and not driver2:
        raise ResourceNotFoundError("Driver2")
    
    new_trip = Trip(
        truck_id=truck.id,
        driver1_id=driver1.id,
        driver2_id=driver2.id if driver2 else None,
        start=trip_data.start,
        end=trip_data.end,
    )
    db.add(new_trip)
    await db.commit()
    
    trip = await get_or_404(db, Trip, new_trip.id, "Trip", *TRIP_RELATIONS)
    return TripDetailResponse.model_validate(trip)


@router.put("/{trip_id}", response_model=TripDetailResponse)
@handle_store_errors("Error updating trip")
async def update_trip(trip_id: str, trip_data: TripUpdate, db: AsyncSession = Depends(get_db)):
    """Update a trip. Omitted, null or blank fields keep their value."""
    pk = parse_id(trip_id, "trip")
    trip = await get_or_404(db, Trip, pk, "Trip")
    
    # Update related entities if provided
    if trip_data.truck_id:
        truck = await get_or_404(db, Truck, trip_data.truck_id, "Truck")
        trip.truck_id = truck.id
    
    if trip_data.driver1_id:
        driver1 = await find_driver(db, trip_data.driver1_id)
        if not driver1:
            raise ResourceNotFoundError("Driver 1")
        trip.driver1_id = driver1.id
    
    if trip_data.driver2_id:
        driver2 = await find_driver(db, trip_data.driver2_id)
        if not driver2:
            raise ResourceNotFoundError("Driver 2")
        trip.driver2_id = driver2.id
    
    if trip_data.start:
        trip.start = trip_data.start
    if trip_data.end:
        trip.end = trip_data.end
    
    await db.commit()
    
    trip = await get_or_404(db, Trip, pk, "Trip", *TRIP_RELATIONS)
    return TripDetailResponse.model_validate(trip)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting trip")
async def delete_trip(trip_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a trip. Trips with routes or shipments are rejected by the store (500)."""
    pk = parse_id(trip_id, "trip")
    trip = await get_or_404(db, Trip, pk, "Trip")
    
    await db.delete(trip)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
