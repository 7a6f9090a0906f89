"""
Employee API Endpoints.

Drivers and mechanics are created through the same resource; ``role`` picks
the variant. An employee cannot be deleted while repairs reference it as
mechanic.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from pydantic import TypeAdapter
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, get_or_404
from backend.app.models.employee import Employee
from backend.app.models.enums import EmployeeRole, SeniorityLevel
from backend.app.models.repair import Repair
from backend.app.schemas.base import EmployeeResponse
from backend.app.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeDetailResponse
from backend.app.core.dependencies import parse_id
from backend.app.core.exceptions import InvalidEnumError, MissingFieldsError, handle_store_errors
from backend.app.core.guards import DependentRowGuard

router = APIRouter(prefix="/employee", tags=["Employee"])
repair_guard = DependentRowGuard(Repair.mechanic_id, "employee", "repairs")

employee_adapter = TypeAdapter(EmployeeResponse)
employee_detail_adapter = TypeAdapter(EmployeeDetailResponse)


def parse_role(value: str) -> EmployeeRole:
    """Roles are case-sensitive: exactly 'Driver' or 'Mechanic'."""
    try:
        return EmployeeRole(value)
    except ValueError:
        raise InvalidEnumError("Role must be 'Driver' or 'Mechanic'")


def parse_seniority(value: str) -> SeniorityLevel:
    """Seniority levels are matched case-insensitively and stored lowercase."""
    try:
        return SeniorityLevel(value.lower())
    except ValueError:
        raise InvalidEnumError("seniorityLevel must be 'entry', 'mid', or 'senior'")


@router.get("", response_model=List[EmployeeResponse])
@handle_store_errors("Error fetching employees")
async def list_employees(db: AsyncSession = Depends(get_db)):
    """List all employees (drivers and mechanics)."""
    employees = await fetch_all(db, Employee)
    return [employee_adapter.validate_python(employee, from_attributes=True) for employee in employees]


@router.get("/{employee_id}", response_model=EmployeeDetailResponse)
@handle_store_errors("Error fetching employee by ID")
async def get_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    """Get an employee; mechanics include the repairs they performed."""
    pk = parse_id(employee_id, "employee")
    employee = await get_or_404(db, Employee, pk, "Employee", selectinload(Employee.repairs))
    return employee_detail_adapter.validate_python(employee, from_attributes=True)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating employee")
async def create_employee(employee_data: EmployeeCreate, db: AsyncSession = Depends(get_db)):
    """
    Create a driver or a mechanic.
    
    ``driverCategory`` is only kept for drivers.
    """
    if (
        not employee_data.role
        or not employee_data.name
        or not employee_data.surname
        or not employee_data.seniority_level
    ):
        raise MissingFieldsError("Role, name, surname, and seniorityLevel are required")
    
    role = parse_role(employee_data.role)
    seniority = parse_seniority(employee_data.seniority_level)
    
    new_employee = Employee(
        role=role.value,
        name=employee_data.name,
        surname=employee_data.surname,
        seniority_level=seniority.value,
        driver_category=(employee_data.driver_category or None) if role == EmployeeRole.DRIVER else None,
    )
    db.add(new_employee)
    await db.commit()
    await db.refresh(new_employee)
    
    return employee_adapter.validate_python(new_employee, from_attributes=True)


@router.put("/{employee_id}", response_model=EmployeeResponse)
@handle_store_errors("Error updating employee")
async def update_employee(
    employee_id: str,
    employee_data: EmployeeUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Update an employee. Omitted, null or blank fields keep their value.
    
    The row is re-saved under the supplied role; turning a driver into a
    mechanic drops the driver category.
    """
    pk = parse_id(employee_id, "employee")
    employee = await get_or_404(db, Employee, pk, "Employee")
    
    if employee_data.role:
        employee.role = parse_role(employee_data.role).value
    if employee_data.seniority_level:
        employee.seniority_level = parse_seniority(employee_data.seniority_level).value
    if employee_data.name:
        employee.name = employee_data.name
    if employee_data.surname:
        employee.surname = employee_data.surname
    
    if not employee.is_driver:
        employee.driver_category = None
    elif employee_data.driver_category:
        employee.driver_category = employee_data.driver_category
    
    await db.commit()
    await db.refresh(employee)
    
    return employee_adapter.validate_python(employee, from_attributes=True)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting employee")
async def delete_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    """Delete an employee that no repair references."""
    pk = parse_id(employee_id, "employee")
    employee = await get_or_404(db, Employee, pk, "Employee")
    
    await repair_guard.enforce(db, employee.id)
    
    await db.delete(employee)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
