"""
Brand Pydantic schemas.

Defines request and response models for brand management.
"""

from typing import Optional, List
from backend.app.schemas.base import CamelModel, BrandResponse, TruckResponse


class BrandCreate(CamelModel):
    """Schema for creating a new brand."""
    name: Optional[str] = None


class BrandUpdate(CamelModel):
    """Schema for updating an existing brand."""
    name: Optional[str] = None


class BrandDetailResponse(BrandResponse):
    """Schema for a brand with its trucks."""
    trucks: List[TruckResponse] = []
