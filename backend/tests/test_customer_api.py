"""
Customer API tests.
"""

import pytest


@pytest.mark.asyncio
async def test_create_customer(client):
    response = await client.post("/customer", json={
        "name": "Nordic Timber",
        "address": "Sawmill Lane 4",
        "phone1": "555-0101",
        "phone2": "555-0102"
    })
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Nordic Timber"
    assert data["phone2"] == "555-0102"


@pytest.mark.asyncio
async def test_phone2_is_optional(customer):
    assert customer["phone1"] == "+351 210 000 000"
    assert customer["phone2"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "address", "phone1"])
async def test_create_customer_missing_fields(client, missing):
    payload = {"name": "Acme", "address": "Main St", "phone1": "555"}
    del payload[missing]

    response = await client.post("/customer", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Customer name, address, and phone1 are required"}


@pytest.mark.asyncio
async def test_get_customer_includes_shipments(client, customer, trip):
    shipment = await client.post("/shipment", json={
        "tripId": trip["id"],
        "customerId": customer["id"],
        "weight": 120.5,
        "value": 900,
        "origin": "Porto",
        "destination": "Lisbon"
    })
    assert shipment.status_code == 201

    response = await client.get(f"/customer/{customer['id']}")
    assert response.status_code == 200
    assert [s["id"] for s in response.json()["shipments"]] == [shipment.json()["id"]]


@pytest.mark.asyncio
async def test_list_customers(client, customer):
    response = await client.get("/customer")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [customer["id"]]


@pytest.mark.asyncio
async def test_update_customer(client, customer):
    response = await client.put(f"/customer/{customer['id']}", json={"address": "2 Harbour Road"})
    assert response.status_code == 200
    data = response.json()
    assert data["address"] == "2 Harbour Road"
    assert data["name"] == "Acme Foods"


@pytest.mark.asyncio
async def test_delete_customer_with_shipments_is_rejected(client, customer, trip):
    await client.post("/shipment", json={
        "tripId": trip["id"],
        "customerId": customer["id"],
        "weight": 1,
        "value": 1,
        "origin": "A",
        "destination": "B"
    })

    response = await client.delete(f"/customer/{customer['id']}")
    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete customer with associated shipments"}
    assert (await client.get(f"/customer/{customer['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_delete_customer(client, customer):
    response = await client.delete(f"/customer/{customer['id']}")
    assert response.status_code == 204

    response = await client.delete(f"/customer/{customer['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Customer not found"}


@pytest.mark.asyncio
async def test_update_customer_blank_fields_keep_values(client, customer):
    response = await client.put(f"/customer/{customer['id']}", json={
        "name": "",
        "address": "",
        "phone1": "",
        "phone2": "555-0199"
    })
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Acme Foods"
    assert data["address"] == "1 Harbour Road"
    assert data["phone1"] == "+351 210 000 000"
    assert data["phone2"] == "555-0199"
