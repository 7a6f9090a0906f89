"""
Employee API tests.

Drivers and mechanics share the /employee resource; role selects the variant.
"""

import pytest


@pytest.mark.asyncio
async def test_create_driver(driver):
    assert driver["role"] == "Driver"
    assert driver["seniorityLevel"] == "mid"
    assert driver["driverCategory"] == "C+E"


@pytest.mark.asyncio
async def test_create_mechanic_drops_driver_category(client):
    response = await client.post("/employee", json={
        "role": "Mechanic",
        "name": "Ana",
        "surname": "Silva",
        "seniorityLevel": "entry",
        "driverCategory": "B"
    })
    assert response.status_code == 201
    data = response.json()
    assert data["role"] == "Mechanic"
    assert "driverCategory" not in data


@pytest.mark.asyncio
async def test_seniority_is_case_insensitive(client):
    response = await client.post("/employee", json={
        "role": "Driver",
        "name": "Joao",
        "surname": "Reis",
        "seniorityLevel": "SENIOR"
    })
    assert response.status_code == 201
    assert response.json()["seniorityLevel"] == "senior"
    assert response.json()["driverCategory"] is None


@pytest.mark.asyncio
async def test_invalid_role_is_rejected(client):
    response = await client.post("/employee", json={
        "role": "Pilot",
        "name": "Joao",
        "surname": "Reis",
        "seniorityLevel": "mid"
    })
    assert response.status_code == 400
    assert response.json() == {"error": "Role must be 'Driver' or 'Mechanic'"}

    # Nothing persisted
    assert (await client.get("/employee")).json() == []


@pytest.mark.asyncio
async def test_role_is_case_sensitive(client):
    response = await client.post("/employee", json={
        "role": "driver",
        "name": "Joao",
        "surname": "Reis",
        "seniorityLevel": "mid"
    })
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_invalid_seniority_is_rejected(client):
    response = await client.post("/employee", json={
        "role": "Mechanic",
        "name": "Joao",
        "surname": "Reis",
        "seniorityLevel": "expert"
    })
    assert response.status_code == 400
    assert response.json() == {"error": "seniorityLevel must be 'entry', 'mid', or 'senior'"}


@pytest.mark.asyncio
async def test_create_employee_missing_fields(client):
    response = await client.post("/employee", json={"role": "Driver", "name": "Joao"})
    assert response.status_code == 400
    assert response.json() == {"error": "Role, name, surname, and seniorityLevel are required"}


@pytest.mark.asyncio
async def test_list_employees_mixes_roles(client, driver, mechanic):
    response = await client.get("/employee")
    assert response.status_code == 200
    roles = {e["id"]: e["role"] for e in response.json()}
    assert roles == {driver["id"]: "Driver", mechanic["id"]: "Mechanic"}


@pytest.mark.asyncio
async def test_get_mechanic_includes_repairs(client, mechanic, truck):
    repair = await client.post("/repair", json={
        "truckId": truck["id"],
        "mechanicId": mechanic["id"],
        "orderDate": "2024-02-10T09:30:00",
        "daysToRepair": 2
    })

    response = await client.get(f"/employee/{mechanic['id']}")
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["repairs"]] == [repair.json()["id"]]


@pytest.mark.asyncio
async def test_get_employee_invalid_id(client):
    response = await client.get("/employee/1.5")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid employee ID"}


@pytest.mark.asyncio
async def test_update_employee(client, driver):
    response = await client.put(f"/employee/{driver['id']}", json={
        "surname": "Costa Lima",
        "seniorityLevel": "Senior",
        "driverCategory": "C"
    })
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Bruno"
    assert data["surname"] == "Costa Lima"
    assert data["seniorityLevel"] == "senior"
    assert data["driverCategory"] == "C"


@pytest.mark.asyncio
async def test_update_driver_to_mechanic(client, driver):
    response = await client.put(f"/employee/{driver['id']}", json={"role": "Mechanic"})
    assert response.status_code == 200
    assert response.json()["role"] == "Mechanic"
    assert "driverCategory" not in response.json()

    response = await client.put(f"/employee/{driver['id']}", json={"role": "Driver"})
    assert response.json()["driverCategory"] is None


@pytest.mark.asyncio
async def test_update_employee_invalid_role(client, driver):
    response = await client.put(f"/employee/{driver['id']}", json={"role": "Boss"})
    assert response.status_code == 400
    assert response.json() == {"error": "Role must be 'Driver' or 'Mechanic'"}


@pytest.mark.asyncio
async def test_delete_mechanic_with_repairs_is_rejected(client, mechanic, truck):
    await client.post("/repair", json={
        "truckId": truck["id"],
        "mechanicId": mechanic["id"],
        "orderDate": "2024-02-10",
        "daysToRepair": 2
    })

    response = await client.delete(f"/employee/{mechanic['id']}")
    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete employee with associated repairs"}
    assert (await client.get(f"/employee/{mechanic['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_delete_employee(client, mechanic):
    response = await client.delete(f"/employee/{mechanic['id']}")
    assert response.status_code == 204

    response = await client.get(f"/employee/{mechanic['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Employee not found"}


@pytest.mark.asyncio
async def test_update_employee_blank_fields_keep_values(client, driver):
    response = await client.put(f"/employee/{driver['id']}", json={
        "role": "",
        "name": "",
        "surname": "",
        "seniorityLevel": "",
        "driverCategory": ""
    })
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "Driver"
    assert data["name"] == "Bruno"
    assert data["surname"] == "Costa"
    assert data["seniorityLevel"] == "mid"
    assert data["driverCategory"] == "C+E"
