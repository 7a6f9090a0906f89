"""
Repair counter sync.

``Truck.number_of_repairs`` is a denormalized count of the truck's repair
rows. It is adjusted incrementally by the repair endpoints and never
recomputed, so repair rows changed outside those endpoints will drift
from it.

Each adjustment is persisted (committed) on its own, before the repair row
is inserted or removed. There is no transaction spanning both steps.
"""

import logging
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.models.truck import Truck

logger = logging.getLogger(__name__)


async def _set_repair_count(db: AsyncSession, truck: Truck, count: int):
    # Single-column UPDATE; the in-session truck is synchronized in place.
    await db.execute(
        update(Truck)
        .where(Truck.id == truck.id)
        .values(number_of_repairs=count)
    )
    await db.commit()
    logger.info("Truck %s repair count set to %s", truck.id, count)


async def record_repair_added(db: AsyncSession, truck: Truck) -> int:
    """Increment the truck's repair counter and persist it. Returns the new count."""
    count = truck.number_of_repairs + 1
    await _set_repair_count(db, truck, count)
    return count


async def record_repair_removed(db: AsyncSession, truck: Truck) -> int:
    """Decrement the truck's repair counter and persist it. Returns the new count."""
    count = truck.number_of_repairs - 1
    await _set_repair_count(db, truck, count)
    return count
