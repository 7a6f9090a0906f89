"""
Centralized Test Configuration.

Each test gets its own in-memory SQLite database with foreign keys enforced.
"""

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from backend.app.main import app
from backend.app.db.session import get_db, build_engine, Base

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine():
    test_engine = build_engine(TEST_DATABASE_URL)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def client(session_factory):
    """Async client for testing, bound to the per-test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session(session_factory):
    """Shared session for fixture data creation and direct assertions."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def sql_log(engine):
    """Records (statement, parameters) for every SQL statement sent to the store."""
    statements = []

    def record(conn, cursor, statement, parameters, context, executemany):
        statements.append((statement, parameters))

    event.listen(engine.sync_engine, "before_cursor_execute", record)
    yield statements
    event.remove(engine.sync_engine, "before_cursor_execute", record)


# Seed data, created through the API

@pytest.fixture
async def brand(client):
    response = await client.post("/brand", json={"name": "Volvo"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def truck(client, brand):
    response = await client.post("/truck", json={
        "brandId": brand["id"],
        "load": 12000,
        "capacity": 40000,
        "year": 2019
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def mechanic(client):
    response = await client.post("/employee", json={
        "role": "Mechanic",
        "name": "Ana",
        "surname": "Silva",
        "seniorityLevel": "senior"
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def driver(client):
    response = await client.post("/employee", json={
        "role": "Driver",
        "name": "Bruno",
        "surname": "Costa",
        "seniorityLevel": "mid",
        "driverCategory": "C+E"
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def customer(client):
    response = await client.post("/customer", json={
        "name": "Acme Foods",
        "address": "1 Harbour Road",
        "phone1": "+351 210 000 000"
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def trip(client, truck, driver):
    response = await client.post("/trip", json={
        "truckId": truck["id"],
        "driver1Id": driver["id"],
        "start": "2024-03-01T08:00:00"
    })
    assert response.status_code == 201
    return response.json()
