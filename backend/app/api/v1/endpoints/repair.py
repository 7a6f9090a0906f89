"""
Repair API Endpoints.

Creating or deleting a repair keeps ``Truck.number_of_repairs`` in step:
the truck counter is persisted first, then the repair row is written.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, fetch_by_id, get_or_404
from backend.app.models.employee import Employee
from backend.app.models.enums import EmployeeRole
from backend.app.models.repair import Repair
from backend.app.models.truck import Truck
from backend.app.schemas.repair import RepairCreate, RepairUpdate, RepairDetailResponse
from backend.app.core.dependencies import parse_id
from backend.app.core.exceptions import (
    MissingFieldsError,
    ResourceNotFoundError,
    handle_store_errors,
)
from backend.app.services.repair_counter import record_repair_added, record_repair_removed

router = APIRouter(prefix="/repair", tags=["Repair"])

REPAIR_RELATIONS = (selectinload(Repair.truck), selectinload(Repair.mechanic))
is_mechanic = Employee.role == EmployeeRole.MECHANIC.value


@router.get("", response_model=List[RepairDetailResponse])
@handle_store_errors("Error fetching repairs")
async def list_repairs(db: AsyncSession = Depends(get_db)):
    """List all repairs with their truck and mechanic."""
    repairs = await fetch_all(db, Repair, *REPAIR_RELATIONS)
    return [RepairDetailResponse.model_validate(repair) for repair in repairs]


@router.get("/{repair_id}", response_model=RepairDetailResponse)
@handle_store_errors("Error fetching repair by ID")
async def get_repair(repair_id: str, db: AsyncSession = Depends(get_db)):
    """Get a repair with its truck and mechanic."""
    pk = parse_id(repair_id, "repair")
    repair = await get_or_404(db, Repair, pk, "Repair", *REPAIR_RELATIONS)
    return RepairDetailResponse.model_validate(repair)


@router.post("", response_model=RepairDetailResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating repair")
async def create_repair(repair_data: RepairCreate, db: AsyncSession = Depends(get_db)):
    """
    Register a repair.
    
    Round-trips, in order: find truck, find mechanic, persist the truck's
    incremented counter, insert the repair.
    """
    if (
        not repair_data.truck_id
        or not repair_data.mechanic_id
        or not repair_data.order_date
        or not repair_data.days_to_repair
    ):
        raise MissingFieldsError("truckId, mechanicId, orderDate, and daysToRepair are required")
    
    truck = await fetch_by_id(db, Truck, repair_data.truck_id)
    mechanic = await fetch_by_id(db, Employee, repair_data.mechanic_id, where=(is_mechanic,))
    
    if not truck or not mechanic:
        raise ResourceNotFoundError("Truck or Mechanic")
    
    await record_repair_added(db, truck)
    
    new_repair = Repair(
        truck_id=truck.id,
        mechanic_id=mechanic.id,
        order_date=repair_data.order_date,
        days_to_repair=repair_data.days_to_repair,
    )
    db.add(new_repair)
    await db.commit()
    
    repair = await get_or_404(db, Repair, new_repair.id, "Repair", *REPAIR_RELATIONS)
    return RepairDetailResponse.model_validate(repair)


@router.put("/{repair_id}", response_model=RepairDetailResponse)
@handle_store_errors("Error updating repair")
async def update_repair(
    repair_id: str,
    repair_data: RepairUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update mechanic, order date or duration of a repair.
    
    Omitted, null or blank fields keep their value. The truck is fixed.
    """
    pk = parse_id(repair_id, "repair")
    repair = await get_or_404(db, Repair, pk, "Repair")
    
    if repair_data.mechanic_id:
        mechanic = await get_or_404(
            db, Employee, repair_data.mechanic_id, "Mechanic", where=(is_mechanic,)
        )
        repair.mechanic_id = mechanic.id
    if repair_data.order_date:
        repair.order_date = repair_data.order_date
    if repair_data.days_to_repair:
        repair.days_to_repair = repair_data.days_to_repair
    
    await db.commit()
    
    repair = await get_or_404(db, Repair, pk, "Repair", *REPAIR_RELATIONS)
    return RepairDetailResponse.model_validate(repair)


@router.delete("/{repair_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting repair")
async def delete_repair(repair_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a repair.
    
    The truck's decremented counter is persisted before the row is removed.
    """
    pk = parse_id(repair_id, "repair")
    repair = await get_or_404(db, Repair, pk, "Repair", selectinload(Repair.truck))
    
    await record_repair_removed(db, repair.truck)
    
    await db.delete(repair)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
