"""
Truck API Endpoints.

CRUD over trucks. The repair counter is read-only here.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, get_or_404
from backend.app.models.brand import Brand
from backend.app.models.truck import Truck
from backend.app.schemas.truck import TruckCreate, TruckUpdate, TruckDetailResponse
from backend.app.core.dependencies import parse_id, provided_fields
from backend.app.core.exceptions import MissingFieldsError, handle_store_errors

router = APIRouter(prefix="/truck", tags=["Truck"])

TRUCK_RELATIONS = (
    selectinload(Truck.brand),
    selectinload(Truck.repairs),
    selectinload(Truck.trips),
)


@router.get("", response_model=List[TruckDetailResponse])
@handle_store_errors("Error fetching trucks")
async def list_trucks(db: AsyncSession = Depends(get_db)):
    """List all trucks with brand, repairs and trips."""
    trucks = await fetch_all(db, Truck, *TRUCK_RELATIONS)
    return [TruckDetailResponse.model_validate(truck) for truck in trucks]


@router.get("/{truck_id}", response_model=TruckDetailResponse)
@handle_store_errors("Error fetching truck by ID")
async def get_truck(truck_id: str, db: AsyncSession = Depends(get_db)):
    """Get a truck with brand, repairs and trips."""
    pk = parse_id(truck_id, "truck")
    truck = await get_or_404(db, Truck, pk, "Truck", *TRUCK_RELATIONS)
    return TruckDetailResponse.model_validate(truck)


@router.post("", response_model=TruckDetailResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating truck")
async def create_truck(truck_data: TruckCreate, db: AsyncSession = Depends(get_db)):
    """
    Register a new truck.
    
    ``load`` and ``capacity`` may be zero; the repair counter starts at zero.
    """
    if (
        not truck_data.brand_id
        or truck_data.load is None
        or truck_data.capacity is None
        or not truck_data.year
    ):
        raise MissingFieldsError("Brand ID, load, capacity, year, and number of repairs are required")
    
    brand = await get_or_404(db, Brand, truck_data.brand_id, "Brand")
    
    new_truck = Truck(
        brand_id=brand.id,
        load=truck_data.load,
        capacity=truck_data.capacity,
        year=truck_data.year,
        number_of_repairs=0,
    )
    db.add(new_truck)
    await db.commit()
    
    truck = await get_or_404(db, Truck, new_truck.id, "Truck", *TRUCK_RELATIONS)
    return TruckDetailResponse.model_validate(truck)


@router.put("/{truck_id}", response_model=TruckDetailResponse)
@handle_store_errors("Error updating truck")
async def update_truck(truck_id: str, truck_data: TruckUpdate, db: AsyncSession = Depends(get_db)):
    """Update truck details. Omitted, null or blank fields keep their value."""
    pk = parse_id(truck_id, "truck")
    truck = await get_or_404(db, Truck, pk, "Truck")
    
    update_data = provided_fields(truck_data, zero_allowed=("load", "capacity"))
    
    # Update related brand if provided
    if "brand_id" in update_data:
        brand = await get_or_404(db, Brand, update_data.pop("brand_id"), "Brand")
        truck.brand_id = brand.id
    
    for field, value in update_data.items():
        setattr(truck, field, value)
    
    await db.commit()
    
    truck = await get_or_404(db, Truck, pk, "Truck", *TRUCK_RELATIONS)
    return TruckDetailResponse.model_validate(truck)


@router.delete("/{truck_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting truck")
async def delete_truck(truck_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a truck.
    
    Trucks that still have repairs or trips are rejected by the store's
    foreign keys (500).
    """
    pk = parse_id(truck_id, "truck")
    truck = await get_or_404(db, Truck, pk, "Truck")
    
    await db.delete(truck)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
