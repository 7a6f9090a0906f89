"""
Model registry.

Importing this module registers every table with ``Base``. Relationship
targets are resolved by class name, so it must be imported before any mapper
is used (loader options, queries, ``create_all``).
"""

from backend.app.models.brand import Brand
from backend.app.models.customer import Customer
from backend.app.models.employee import Employee
from backend.app.models.mechanic_brand import MechanicBrand
from backend.app.models.truck import Truck
from backend.app.models.repair import Repair
from backend.app.models.trip import Trip
from backend.app.models.route import Route
from backend.app.models.shipment import Shipment

__all__ = [
    "Brand",
    "Customer",
    "Employee",
    "MechanicBrand",
    "Truck",
    "Repair",
    "Trip",
    "Route",
    "Shipment",
]
