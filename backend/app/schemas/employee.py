"""
Employee Pydantic schemas.

Employees are a tagged variant on ``role``: drivers carry a
``driverCategory``, mechanics carry their repairs on the detail view.
"""

from pydantic import Field
from typing import Optional, List, Union
from typing_extensions import Annotated
from backend.app.schemas.base import (
    CamelModel,
    DriverResponse,
    MechanicResponse,
    RepairResponse,
)


class EmployeeCreate(CamelModel):
    """
    Schema for creating a new employee.
    
    ``role`` and ``seniorityLevel`` are checked against their enumerations
    by the endpoint so that the error message names the accepted values.
    """
    role: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None
    seniority_level: Optional[str] = None
    driver_category: Optional[str] = None


class EmployeeUpdate(EmployeeCreate):
    """Schema for updating an existing employee."""


class MechanicDetailResponse(MechanicResponse):
    """Mechanic with the repairs performed."""
    repairs: List[RepairResponse] = []


EmployeeDetailResponse = Annotated[
    Union[DriverResponse, MechanicDetailResponse],
    Field(discriminator="role"),
]
