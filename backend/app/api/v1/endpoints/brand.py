"""
Brand API Endpoints.

CRUD over brands. A brand cannot be deleted while trucks reference it.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, get_or_404
from backend.app.models.brand import Brand
from backend.app.models.truck import Truck
from backend.app.schemas.base import BrandResponse
from backend.app.schemas.brand import BrandCreate, BrandUpdate, BrandDetailResponse
from backend.app.core.dependencies import parse_id, provided_fields
from backend.app.core.exceptions import MissingFieldsError, handle_store_errors
from backend.app.core.guards import DependentRowGuard

router = APIRouter(prefix="/brand", tags=["Brand"])
truck_guard = DependentRowGuard(Truck.brand_id, "brand", "trucks")


@router.get("", response_model=List[BrandResponse])
@handle_store_errors("Error fetching brands")
async def list_brands(db: AsyncSession = Depends(get_db)):
    """List all brands."""
    brands = await fetch_all(db, Brand)
    return [BrandResponse.model_validate(brand) for brand in brands]


@router.get("/{brand_id}", response_model=BrandDetailResponse)
@handle_store_errors("Error fetching brand by ID")
async def get_brand(brand_id: str, db: AsyncSession = Depends(get_db)):
    """Get a brand together with its trucks."""
    pk = parse_id(brand_id, "brand")
    brand = await get_or_404(db, Brand, pk, "Brand", selectinload(Brand.trucks))
    return BrandDetailResponse.model_validate(brand)


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating brand")
async def create_brand(brand_data: BrandCreate, db: AsyncSession = Depends(get_db)):
    """Create a new brand."""
    if not brand_data.name:
        raise MissingFieldsError("Brand name is required")
    
    new_brand = Brand(name=brand_data.name)
    db.add(new_brand)
    await db.commit()
    await db.refresh(new_brand)
    
    return BrandResponse.model_validate(new_brand)


@router.put("/{brand_id}", response_model=BrandResponse)
@handle_store_errors("Error updating brand")
async def update_brand(brand_id: str, brand_data: BrandUpdate, db: AsyncSession = Depends(get_db)):
    """Rename a brand. Omitted, null or blank fields keep their value."""
    pk = parse_id(brand_id, "brand")
    brand = await get_or_404(db, Brand, pk, "Brand")
    
    for field, value in provided_fields(brand_data).items():
        setattr(brand, field, value)
    
    await db.commit()
    await db.refresh(brand)
    
    return BrandResponse.model_validate(brand)


@router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting brand")
async def delete_brand(brand_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a brand that no truck references."""
    pk = parse_id(brand_id, "brand")
    brand = await get_or_404(db, Brand, pk, "Brand")
    
    await truck_guard.enforce(db, brand.id)
    
    await db.delete(brand)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
