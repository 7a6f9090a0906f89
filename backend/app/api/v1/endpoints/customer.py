"""
Customer API Endpoints.

CRUD over customers. A customer cannot be deleted while shipments reference it.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from backend.app.db.session import get_db
from backend.app.db.queries import fetch_all, get_or_404
from backend.app.models.customer import Customer
from backend.app.models.shipment import Shipment
from backend.app.schemas.base import CustomerResponse
from backend.app.schemas.customer import CustomerCreate, CustomerUpdate, CustomerDetailResponse
from backend.app.core.dependencies import parse_id, provided_fields
from backend.app.core.exceptions import MissingFieldsError, handle_store_errors
from backend.app.core.guards import DependentRowGuard

router = APIRouter(prefix="/customer", tags=["Customer"])
shipment_guard = DependentRowGuard(Shipment.customer_id, "customer", "shipments")


@router.get("", response_model=List[CustomerResponse])
@handle_store_errors("Error fetching customers")
async def list_customers(db: AsyncSession = Depends(get_db)):
    """List all customers."""
    customers = await fetch_all(db, Customer)
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.get("/{customer_id}", response_model=CustomerDetailResponse)
@handle_store_errors("Error fetching customer by ID")
async def get_customer(customer_id: str, db: AsyncSession = Depends(get_db)):
    """Get a customer together with its shipments."""
    pk = parse_id(customer_id, "customer")
    customer = await get_or_404(db, Customer, pk, "Customer", selectinload(Customer.shipments))
    return CustomerDetailResponse.model_validate(customer)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
@handle_store_errors("Error creating customer")
async def create_customer(customer_data: CustomerCreate, db: AsyncSession = Depends(get_db)):
    """Create a new customer."""
    if not customer_data.name or not customer_data.address or not customer_data.phone1:
        raise MissingFieldsError("Customer name, address, and phone1 are required")
    
    new_customer = Customer(
        name=customer_data.name,
        address=customer_data.address,
        phone1=customer_data.phone1,
        phone2=customer_data.phone2 or None,
    )
    db.add(new_customer)
    await db.commit()
    await db.refresh(new_customer)
    
    return CustomerResponse.model_validate(new_customer)


@router.put("/{customer_id}", response_model=CustomerResponse)
@handle_store_errors("Error updating customer")
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update customer details. Omitted, null or blank fields keep their value."""
    pk = parse_id(customer_id, "customer")
    customer = await get_or_404(db, Customer, pk, "Customer")
    
    for field, value in provided_fields(customer_data).items():
        setattr(customer, field, value)
    
    await db.commit()
    await db.refresh(customer)
    
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_store_errors("Error deleting customer")
async def delete_customer(customer_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a customer without shipments."""
    pk = parse_id(customer_id, "customer")
    customer = await get_or_404(db, Customer, pk, "Customer")
    
    await shipment_guard.enforce(db, customer.id)
    
    await db.delete(customer)
    await db.commit()
    
    return Response(status_code=status.HTTP_204_NO_CONTENT)
