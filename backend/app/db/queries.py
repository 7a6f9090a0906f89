"""
Lookup helpers shared by the endpoints.

Every read declares the relations it needs up front; nothing relies on lazy
loading (which is unavailable on an AsyncSession anyway).
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from backend.app.core.exceptions import ResourceNotFoundError


async def fetch_all(db: AsyncSession, model, *options):
    """Return every row of ``model`` ordered by id, with ``options`` applied."""
    result = await db.execute(
        select(model).options(*options).order_by(model.id)
    )
    return result.scalars().all()


async def fetch_by_id(db: AsyncSession, model, entity_id: int, *options, where=()):
    """Return the row with the given id (and extra ``where`` criteria) or None."""
    query = (
        select(model)
        .where(model.id == entity_id, *where)
        .options(*options)
        .execution_options(populate_existing=True)
    )
    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_or_404(db: AsyncSession, model, entity_id: int, resource: str, *options, where=()):
    """
    Like ``fetch_by_id`` but raises when nothing matches.
    
    Raises:
        ResourceNotFoundError: 404 "<resource> not found"
    """
    entity = await fetch_by_id(db, model, entity_id, *options, where=where)
    if entity is None:
        raise ResourceNotFoundError(resource)
    return entity
