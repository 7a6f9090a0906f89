"""
Database engine and session handling.

PostgreSQL (asyncpg) is the production store. SQLite (aiosqlite) URLs are
accepted for local runs and tests; foreign keys are switched on for them so
delete rules behave the same as on PostgreSQL.
"""

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from backend.app.core.config import settings


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.

    In-memory SQLite shares one connection so every session sees the same
    tables.
    """
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_async_engine(
            database_url,
            echo=echo,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_pre_ping=True,
        )

    options = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool

    sqlite_engine = create_async_engine(database_url, echo=echo, **options)
    event.listen(sqlite_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return sqlite_engine


engine = build_engine(settings.database_url, echo=settings.db_echo)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

Base = declarative_base()


async def get_db():
    """
    FastAPI dependency for database sessions.

    One session per request; it is closed (and any open transaction rolled
    back) when the request finishes.
    """
    async with AsyncSessionLocal() as session:
        yield session
