"""
Database seeding script for reference data.

Creates a few brands, trucks, employees and customers for local development.
Run this script after the database is reachable; tables are created if missing.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select
from backend.app.db.session import AsyncSessionLocal, engine, Base
from backend.app.models.brand import Brand
from backend.app.models.customer import Customer
from backend.app.models.employee import Employee
from backend.app.models.enums import EmployeeRole, SeniorityLevel
from backend.app.models.mechanic_brand import MechanicBrand
from backend.app.models.truck import Truck
# Registered so create_all knows every table
import backend.app.models.registry  # noqa: F401


async def seed_data():
    """
    Seed reference data.
    
    Creates:
    - 2 brands with 2 trucks each
    - 2 drivers and 1 mechanic certified for the first brand
    - 2 customers
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async with AsyncSessionLocal() as db:
        print("🌱 Starting seeding...")
        
        result = await db.execute(select(Brand).limit(1))
        if result.scalar_one_or_none():
            print("ℹ️  Brands already exist, skipping seeding")
            return
        
        volvo = Brand(name="Volvo")
        scania = Brand(name="Scania")
        db.add_all([volvo, scania])
        await db.flush()
        
        db.add_all([
            Truck(brand_id=volvo.id, load=18000, capacity=44000, year=2019, number_of_repairs=0),
            Truck(brand_id=volvo.id, load=12000, capacity=26000, year=2021, number_of_repairs=0),
            Truck(brand_id=scania.id, load=20000, capacity=44000, year=2018, number_of_repairs=0),
            Truck(brand_id=scania.id, load=9000, capacity=18000, year=2022, number_of_repairs=0),
        ])
        print("✅ Created 2 brands and 4 trucks")
        
        mechanic = Employee(
            role=EmployeeRole.MECHANIC.value,
            name="Ana",
            surname="Silva",
            seniority_level=SeniorityLevel.SENIOR.value,
        )
        db.add_all([
            Employee(
                role=EmployeeRole.DRIVER.value,
                name="Bruno",
                surname="Costa",
                seniority_level=SeniorityLevel.MID.value,
                driver_category="C+E",
            ),
            Employee(
                role=EmployeeRole.DRIVER.value,
                name="Carla",
                surname="Neves",
                seniority_level=SeniorityLevel.ENTRY.value,
                driver_category="C",
            ),
            mechanic,
        ])
        await db.flush()
        db.add(MechanicBrand(employee_id=mechanic.id, brand_id=volvo.id))
        print("✅ Created 2 drivers and 1 mechanic (certified for Volvo)")
        
        db.add_all([
            Customer(name="Acme Foods", address="1 Harbour Road", phone1="555-0100"),
            Customer(name="Nordic Timber", address="Sawmill Lane 4", phone1="555-0101", phone2="555-0102"),
        ])
        print("✅ Created 2 customers")
        
        await db.commit()
        print("\n🎉 Seeding completed successfully!")


async def main():
    try:
        await seed_data()
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
