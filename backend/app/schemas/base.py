"""
Shared Pydantic schemas.

Holds the camelCase base model and the flat (relation-free) row schemas that
the detail schemas of every entity nest inside each other.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union, Literal
from typing_extensions import Annotated


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase JSON keys."""
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class BrandResponse(CamelModel):
    """Schema for brand response."""
    id: int
    name: str


class CustomerResponse(CamelModel):
    """Schema for customer response."""
    id: int
    name: str
    address: str
    phone1: str
    phone2: Optional[str] = None


class DriverResponse(CamelModel):
    """Schema for an employee with role Driver."""
    id: int
    role: Literal["Driver"]
    name: str
    surname: str
    seniority_level: str
    driver_category: Optional[str] = None


class MechanicResponse(CamelModel):
    """Schema for an employee with role Mechanic."""
    id: int
    role: Literal["Mechanic"]
    name: str
    surname: str
    seniority_level: str


EmployeeResponse = Annotated[
    Union[DriverResponse, MechanicResponse],
    Field(discriminator="role"),
]


class TruckResponse(CamelModel):
    """Schema for truck response (no relations)."""
    id: int
    brand_id: int
    load: int
    capacity: int
    year: int
    number_of_repairs: int


class RepairResponse(CamelModel):
    """Schema for repair response (no relations)."""
    id: int
    truck_id: int
    mechanic_id: int
    order_date: datetime
    days_to_repair: int


class TripResponse(CamelModel):
    """Schema for trip response (no relations)."""
    id: int
    truck_id: int
    driver1_id: int
    driver2_id: Optional[int] = None
    start: datetime
    end: Optional[datetime] = None


class RouteResponse(CamelModel):
    """Schema for route response (no relations)."""
    id: int
    trip_id: int
    from_: str = Field(alias="from")
    to: str


class ShipmentResponse(CamelModel):
    """Schema for shipment response (no relations)."""
    id: int
    trip_id: int
    customer_id: int
    weight: Decimal
    value: Decimal
    origin: str
    destination: str
