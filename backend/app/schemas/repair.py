"""
Repair Pydantic schemas.
"""

from datetime import datetime
from typing import Optional
from backend.app.schemas.base import CamelModel, EmployeeResponse, RepairResponse, TruckResponse


class RepairCreate(CamelModel):
    """Schema for registering a repair."""
    truck_id: Optional[int] = None
    mechanic_id: Optional[int] = None
    order_date: Optional[datetime] = None
    days_to_repair: Optional[int] = None


class RepairUpdate(CamelModel):
    """
    Schema for updating a repair.
    
    The truck cannot be changed; moving a repair would desynchronize the
    repair counters.
    """
    mechanic_id: Optional[int] = None
    order_date: Optional[datetime] = None
    days_to_repair: Optional[int] = None


class RepairDetailResponse(RepairResponse):
    """Schema for a repair with its truck and mechanic."""
    truck: TruckResponse
    mechanic: EmployeeResponse
