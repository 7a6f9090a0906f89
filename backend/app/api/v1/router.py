"""
API v1 Router.

Aggregates all v1 API endpoints.
"""

from fastapi import APIRouter

# Relationship targets must be registered before the endpoint modules load
import backend.app.models.registry  # noqa: F401
from backend.app.api.v1.endpoints import (
    brand, customer, employee, mechanic_brand,
    repair, route, shipment, trip, truck
)

router = APIRouter()

router.include_router(brand.router)
router.include_router(customer.router)
router.include_router(employee.router)

# Nested under /employee/{id}
router.include_router(mechanic_brand.router)

router.include_router(repair.router)
router.include_router(route.router)
router.include_router(shipment.router)
router.include_router(trip.router)
router.include_router(truck.router)
