"""
Mechanic-Brand association schemas.
"""

from typing import Optional
from backend.app.schemas.base import CamelModel, BrandResponse


class MechanicBrandCreate(CamelModel):
    """Schema for linking a mechanic (from the path) to a brand."""
    brand_id: Optional[int] = None


class MechanicBrandResponse(CamelModel):
    """Schema for a mechanic-brand association."""
    employee_id: int
    brand_id: int
    brand: BrandResponse
