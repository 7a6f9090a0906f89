"""
Repair / truck counter sync tests.

Creating a repair persists the truck's incremented counter before the repair
row is inserted; deleting one persists the decrement before the row is
removed.
"""

import pytest
from sqlalchemy import update

from backend.app.models.truck import Truck
from backend.app.services.repair_counter import record_repair_added, record_repair_removed


def statement_index(sql_log, prefix):
    """Position of the first recorded statement starting with prefix."""
    for index, (statement, _) in enumerate(sql_log):
        if statement.lstrip().upper().startswith(prefix):
            return index
    raise AssertionError(f"No statement starting with {prefix!r} was issued")


async def set_counter(db_session, truck_id, count):
    await db_session.execute(
        update(Truck).where(Truck.id == truck_id).values(number_of_repairs=count)
    )
    await db_session.commit()


def repair_payload(truck, mechanic, **overrides):
    payload = {
        "truckId": truck["id"],
        "mechanicId": mechanic["id"],
        "orderDate": "2024-01-01",
        "daysToRepair": 5
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_new_truck_starts_without_repairs(truck):
    assert truck["numberOfRepairs"] == 0
    assert truck["repairs"] == []


@pytest.mark.asyncio
async def test_create_repair_increments_counter(client, truck, mechanic, db_session, sql_log):
    """A truck with two repairs on record reaches three after a new repair."""
    await set_counter(db_session, truck["id"], 2)
    sql_log.clear()

    response = await client.post("/repair", json=repair_payload(truck, mechanic))
    assert response.status_code == 201
    data = response.json()
    assert data["truckId"] == truck["id"]
    assert data["mechanicId"] == mechanic["id"]
    assert data["daysToRepair"] == 5
    assert data["orderDate"].startswith("2024-01-01")
    assert data["truck"]["numberOfRepairs"] == 3
    assert data["mechanic"]["role"] == "Mechanic"

    # Counter is written before the repair row
    update_at = statement_index(sql_log, "UPDATE TRUCKS")
    insert_at = statement_index(sql_log, "INSERT INTO REPAIRS")
    assert update_at < insert_at
    assert 3 in sql_log[update_at][1]

    truck_response = await client.get(f"/truck/{truck['id']}")
    assert truck_response.json()["numberOfRepairs"] == 3
    assert [r["id"] for r in truck_response.json()["repairs"]] == [data["id"]]


@pytest.mark.asyncio
async def test_delete_repair_decrements_counter(client, truck, mechanic, db_session, sql_log):
    await set_counter(db_session, truck["id"], 1)
    created = await client.post("/repair", json=repair_payload(truck, mechanic))
    assert created.json()["truck"]["numberOfRepairs"] == 2
    sql_log.clear()

    response = await client.delete(f"/repair/{created.json()['id']}")
    assert response.status_code == 204
    assert response.content == b""

    update_at = statement_index(sql_log, "UPDATE TRUCKS")
    delete_at = statement_index(sql_log, "DELETE FROM REPAIRS")
    assert update_at < delete_at

    truck_response = await client.get(f"/truck/{truck['id']}")
    assert truck_response.json()["numberOfRepairs"] == 1
    assert truck_response.json()["repairs"] == []

    missing = await client.get(f"/repair/{created.json()['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Repair not found"}


@pytest.mark.asyncio
async def test_counter_tracks_several_repairs(client, truck, mechanic):
    ids = []
    for days in (1, 2, 3):
        response = await client.post("/repair", json=repair_payload(truck, mechanic, daysToRepair=days))
        assert response.status_code == 201
        ids.append(response.json()["id"])

    await client.delete(f"/repair/{ids[0]}")

    truck_response = await client.get(f"/truck/{truck['id']}")
    assert truck_response.json()["numberOfRepairs"] == 2

    repairs = await client.get("/repair")
    assert [r["id"] for r in repairs.json()] == ids[1:]


@pytest.mark.asyncio
async def test_create_repair_unknown_truck(client, truck, mechanic, sql_log):
    response = await client.post("/repair", json=repair_payload({"id": 9999}, mechanic))
    assert response.status_code == 404
    assert response.json() == {"error": "Truck or Mechanic not found"}
    assert not any(s.upper().startswith("UPDATE") for s, _ in sql_log)

    truck_response = await client.get(f"/truck/{truck['id']}")
    assert truck_response.json()["numberOfRepairs"] == 0


@pytest.mark.asyncio
async def test_create_repair_rejects_driver_as_mechanic(client, truck, driver):
    response = await client.post("/repair", json=repair_payload(truck, driver))
    assert response.status_code == 404
    assert response.json() == {"error": "Truck or Mechanic not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["truckId", "mechanicId", "orderDate", "daysToRepair"])
async def test_create_repair_missing_fields(client, truck, mechanic, missing):
    payload = repair_payload(truck, mechanic)
    del payload[missing]

    response = await client.post("/repair", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "truckId, mechanicId, orderDate, and daysToRepair are required"}


@pytest.mark.asyncio
async def test_create_repair_zero_days_is_missing(client, truck, mechanic):
    response = await client.post("/repair", json=repair_payload(truck, mechanic, daysToRepair=0))
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_repair(client, truck, mechanic):
    created = (await client.post("/repair", json=repair_payload(truck, mechanic))).json()
    other = await client.post("/employee", json={
        "role": "Mechanic",
        "name": "Rui",
        "surname": "Lopes",
        "seniorityLevel": "entry"
    })

    response = await client.put(f"/repair/{created['id']}", json={
        "mechanicId": other.json()["id"],
        "daysToRepair": 9
    })
    assert response.status_code == 200
    data = response.json()
    assert data["mechanicId"] == other.json()["id"]
    assert data["mechanic"]["name"] == "Rui"
    assert data["daysToRepair"] == 9
    assert data["orderDate"] == created["orderDate"]
    # Updating never touches the counter
    assert data["truck"]["numberOfRepairs"] == 1


@pytest.mark.asyncio
async def test_update_repair_unknown_mechanic(client, truck, mechanic, driver):
    created = (await client.post("/repair", json=repair_payload(truck, mechanic))).json()

    response = await client.put(f"/repair/{created['id']}", json={"mechanicId": driver["id"]})
    assert response.status_code == 404
    assert response.json() == {"error": "Mechanic not found"}


@pytest.mark.asyncio
async def test_delete_unknown_repair(client):
    response = await client.delete("/repair/42")
    assert response.status_code == 404
    assert response.json() == {"error": "Repair not found"}


@pytest.mark.asyncio
async def test_record_repair_added_persists_new_count(mocker):
    db = mocker.AsyncMock()
    truck = Truck(id=7, brand_id=1, load=1, capacity=1, year=2020, number_of_repairs=2)

    count = await record_repair_added(db, truck)

    assert count == 3
    db.execute.assert_awaited_once()
    db.commit.assert_awaited_once()
    params = db.execute.await_args.args[0].compile().params
    assert params["number_of_repairs"] == 3


@pytest.mark.asyncio
async def test_record_repair_removed_persists_new_count(mocker):
    db = mocker.AsyncMock()
    truck = Truck(id=7, brand_id=1, load=1, capacity=1, year=2020, number_of_repairs=2)

    count = await record_repair_removed(db, truck)

    assert count == 1
    db.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_update_repair_zero_values_keep_values(client, truck, mechanic):
    created = (await client.post("/repair", json=repair_payload(truck, mechanic))).json()

    response = await client.put(f"/repair/{created['id']}", json={"mechanicId": 0, "daysToRepair": 0})
    assert response.status_code == 200
    data = response.json()
    assert data["mechanicId"] == mechanic["id"]
    assert data["daysToRepair"] == 5
