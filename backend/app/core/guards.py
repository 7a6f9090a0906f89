"""
Referential-integrity guards for delete operations.

A guard blocks the removal of a row while rows in a dependent table still
reference it through a foreign key.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.core.exceptions import HasDependentsError


class DependentRowGuard:
    """
    Class-based guard bound to one dependent relation.
    
    Usage:
        brand_guard = DependentRowGuard(Truck.brand_id, "brand", "trucks")
        
        @router.delete("/brand/{brand_id}")
        async def delete_brand(...):
            brand = ...
            await brand_guard.enforce(db, brand.id)
            await db.delete(brand)
    """
    
    def __init__(self, foreign_key, resource_name: str, dependents_name: str):
        """
        Args:
            foreign_key: Column of the dependent table pointing at the target
            resource_name: Name of the guarded entity for the error message
            dependents_name: Plural name of the dependent relation
        """
        self.foreign_key = foreign_key
        self.resource_name = resource_name
        self.dependents_name = dependents_name
    
    async def has_dependents(self, db: AsyncSession, target_id: int) -> bool:
        """Return True if at least one dependent row references target_id."""
        result = await db.execute(
            select(self.foreign_key).where(self.foreign_key == target_id).limit(1)
        )
        return result.first() is not None
    
    async def enforce(self, db: AsyncSession, target_id: int):
        """
        Raise if the target still has dependents.
        
        Raises:
            HasDependentsError: 400 "Cannot delete <resource> with associated <dependents>"
        """
        if await self.has_dependents(db, target_id):
            raise HasDependentsError(self.resource_name, self.dependents_name)
