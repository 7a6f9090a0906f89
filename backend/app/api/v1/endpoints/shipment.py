"""
Shipment API Endpoints.

A shipment carries goods of one customer on one trip.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, fetch_by_id, get_or_404
from backend.app.models.customer import Customer
from backend.app.models.shipment import Shipment
from backend.app.models.trip import Trip
from backend.app.schemas.shipment import ShipmentCreate, ShipmentUpdate, ShipmentDetailResponse
from backend.app.core.dependencies import parse_id, provided_fields
from backend.app.core.exceptions import (
    MissingFieldsError,
    ResourceNotFoundError,
    handle_store_errors,
)

router = APIRouter(prefix="/shipment", tags=["Shipment"])

SHIPMENT_RELATIONS = (selectinload(Shipment.trip), selectinload(Shipment.customer))


@router.get("", response_model=List[ShipmentDetailResponse])
@handle_store_errors("Error fetching shipments")
async def list_shipments(db: AsyncSession = Depends(get_db)):
    """List all shipments with trip and customer."""
    shipments = await fetch_all(db, Shipment, *SHIPMENT_RELATIONS)
    return [ShipmentDetailResponse.model_validate(shipment) for shipment in shipments]


@router.get("/{shipment_id}", response_model=ShipmentDetailResponse)
@handle_store_errors("Error fetching shipment by ID")
async def get_shipment(shipment_id: str, db: AsyncSession = Depends(get_db)):
    pk = parse_id(shipment_id, "shipment")
    shipment = await get_or_404(db, Shipment, pk, "Shipment", *SHIPMENT_RELATIONS)
    return ShipmentDetailResponse.model_validate(shipment)


@router.post("", response_model=ShipmentDetailResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating shipment")
async def create_shipment(shipment_data: ShipmentCreate, db: AsyncSession = Depends(get_db)):
    """Create a shipment. Weight and value may be zero, nothing else may be empty."""
    if (
        not shipment_data.trip_id
        or not shipment_data.customer_id
        or shipment_data.weight is None
        or shipment_data.value is None
        or not shipment_data.origin
        or not shipment_data.destination
    ):
        raise MissingFieldsError("All fields are required")
    
    trip = await fetch_by_id(db, Trip, shipment_data.trip_id)
    customer = await fetch_by_id(db, Customer, shipment_data.customer_id)
    
    if not trip or not customer:
        raise ResourceNotFoundError("Trip or Customer")
    
    new_shipment = Shipment(
        trip_id=trip.id,
        customer_id=customer.id,
        weight=shipment_data.weight,
        value=shipment_data.value,
        origin=shipment_data.origin,
        destination=shipment_data.destination,
    )
    db.add(new_shipment)
    await db.commit()
    
    shipment = await get_or_404(db, Shipment, new_shipment.id, "Shipment", *SHIPMENT_RELATIONS)
    return ShipmentDetailResponse.model_validate(shipment)


@router.put("/{shipment_id}", response_model=ShipmentDetailResponse)
@handle_store_errors("Error updating shipment")
async def update_shipment(
    shipment_id: str,
    shipment_data: ShipmentUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a shipment. Omitted, null or blank fields keep their value."""
    pk = parse_id(shipment_id, "shipment")
    shipment = await get_or_404(db, Shipment, pk, "Shipment")
    
    update_data = provided_fields(shipment_data, zero_allowed=("weight", "value"))
    
    # Update related entities if provided
    if "trip_id" in update_data:
        trip = await get_or_404(db, Trip, update_data.pop("trip_id"), "Trip")
        shipment.trip_id = trip.id
    
    if "customer_id" in update_data:
        customer = await get_or_404(db, Customer, update_data.pop("customer_id"), "Customer")
        shipment.customer_id = customer.id
    
    for field, value in update_data.items():
        setattr(shipment, field, value)
    
    await db.commit()
    
    shipment = await get_or_404(db, Shipment, pk, "Shipment", *SHIPMENT_RELATIONS)
    return ShipmentDetailResponse.model_validate(shipment)


@router.delete("/{shipment_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting shipment")
async def delete_shipment(shipment_id: str, db: AsyncSession = Depends(get_db)):
    pk = parse_id(shipment_id, "shipment")
    shipment = await get_or_404(db, Shipment, pk, "Shipment")
    
    await db.delete(shipment)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
