"""
Customer Pydantic schemas.
"""

from typing import Optional, List
from backend.app.schemas.base import CamelModel, CustomerResponse, ShipmentResponse


class CustomerCreate(CamelModel):
    """Schema for creating a new customer. phone2 is optional."""
    name: Optional[str] = None
    address: Optional[str] = None
    phone1: Optional[str] = None
    phone2: Optional[str] = None


class CustomerUpdate(CustomerCreate):
    """Schema for updating an existing customer."""


class CustomerDetailResponse(CustomerResponse):
    """Schema for a customer with its shipments."""
    shipments: List[ShipmentResponse] = []
