"""
Mechanic-Brand API Endpoints.

Manages which brands a mechanic is certified for. Nested under the
employee resource: ``/employee/{id}/mechanic-brand``.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import get_or_404
from backend.app.models.brand import Brand
from backend.app.models.employee import Employee
from backend.app.models.enums import EmployeeRole
from backend.app.models.mechanic_brand import MechanicBrand
from backend.app.schemas.base import BrandResponse
from backend.app.schemas.mechanic_brand import MechanicBrandCreate, MechanicBrandResponse
from backend.app.core.dependencies import parse_id
from backend.app.core.exceptions import (
    InvalidIdError,
    MissingFieldsError,
    ResourceNotFoundError,
    handle_store_errors,
)

router = APIRouter(prefix="/employee", tags=["Mechanic Brand"])

is_mechanic = Employee.role == EmployeeRole.MECHANIC.value


@router.get("/{employee_id}/mechanic-brand", response_model=List[MechanicBrandResponse])
@handle_store_errors("Error fetching mechanic brands")
async def list_mechanic_brands(employee_id: str, db: AsyncSession = Depends(get_db)):
    """List the brand associations of a mechanic."""
    pk = parse_id(employee_id, "employee")
    mechanic = await get_or_404(
        db, Employee, pk, "Mechanic",
        selectinload(Employee.brands).selectinload(MechanicBrand.brand),
        where=(is_mechanic,),
    )
    return [MechanicBrandResponse.model_validate(link) for link in mechanic.brands]


@router.post(
    "/{employee_id}/mechanic-brand",
    response_model=MechanicBrandResponse,
    status_code=status.HTTP_201_CREATED
)
@handle_store_errors("Error creating mechanic-brand")
async def create_mechanic_brand(
    employee_id: str,
    link_data: MechanicBrandCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Associate a mechanic with a brand.
    
    Duplicates are rejected by the composite primary key and surface as a
    store failure.
    """
    pk = parse_id(employee_id, "employee")
    if not link_data.brand_id:
        raise MissingFieldsError("Brand ID is required")
    
    mechanic = await get_or_404(db, Employee, pk, "Mechanic", where=(is_mechanic,))
    brand = await get_or_404(db, Brand, link_data.brand_id, "Brand")
    
    link = MechanicBrand(employee_id=mechanic.id, brand_id=brand.id)
    db.add(link)
    await db.commit()
    
    return MechanicBrandResponse(
        employee_id=mechanic.id,
        brand_id=brand.id,
        brand=BrandResponse.model_validate(brand),
    )


@router.delete("/{employee_id}/mechanic-brand/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting mechanic-brand")
async def delete_mechanic_brand(employee_id: str, brand_id: str, db: AsyncSession = Depends(get_db)):
    """Remove a mechanic-brand association."""
    try:
        employee_pk = parse_id(employee_id, "employee")
        brand_pk = parse_id(brand_id, "brand")
    except InvalidIdError:
        raise InvalidIdError("Invalid employee or brand ID")
    
    result = await db.execute(
        select(MechanicBrand).where(
            MechanicBrand.employee_id == employee_pk,
            MechanicBrand.brand_id == brand_pk,
        )
    )
    link = result.scalar_one_or_none()
    
    if not link:
        raise ResourceNotFoundError("Mechanic-Brand association")
    
    await db.delete(link)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
