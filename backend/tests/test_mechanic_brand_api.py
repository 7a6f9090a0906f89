"""
Mechanic-Brand association tests.
"""

import pytest


@pytest.mark.asyncio
async def test_link_mechanic_to_brand(client, mechanic, brand):
    response = await client.post(f"/employee/{mechanic['id']}/mechanic-brand", json={"brandId": brand["id"]})
    assert response.status_code == 201
    assert response.json() == {
        "employeeId": mechanic["id"],
        "brandId": brand["id"],
        "brand": {"id": brand["id"], "name": "Volvo"}
    }

    response = await client.get(f"/employee/{mechanic['id']}/mechanic-brand")
    assert response.status_code == 200
    assert [link["brand"]["name"] for link in response.json()] == ["Volvo"]


@pytest.mark.asyncio
async def test_duplicate_link_is_a_store_failure(client, mechanic, brand):
    url = f"/employee/{mechanic['id']}/mechanic-brand"
    await client.post(url, json={"brandId": brand["id"]})

    response = await client.post(url, json={"brandId": brand["id"]})
    assert response.status_code == 500
    assert response.json() == {"error": "Error creating mechanic-brand"}


@pytest.mark.asyncio
async def test_drivers_cannot_be_linked(client, driver, brand):
    response = await client.post(f"/employee/{driver['id']}/mechanic-brand", json={"brandId": brand["id"]})
    assert response.status_code == 404
    assert response.json() == {"error": "Mechanic not found"}

    response = await client.get(f"/employee/{driver['id']}/mechanic-brand")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_link_unknown_brand(client, mechanic):
    response = await client.post(f"/employee/{mechanic['id']}/mechanic-brand", json={"brandId": 404})
    assert response.status_code == 404
    assert response.json() == {"error": "Brand not found"}


@pytest.mark.asyncio
async def test_link_requires_brand_id(client, mechanic):
    response = await client.post(f"/employee/{mechanic['id']}/mechanic-brand", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Brand ID is required"}


@pytest.mark.asyncio
async def test_unlink(client, mechanic, brand):
    url = f"/employee/{mechanic['id']}/mechanic-brand"
    await client.post(url, json={"brandId": brand["id"]})

    response = await client.delete(f"{url}/{brand['id']}")
    assert response.status_code == 204
    assert (await client.get(url)).json() == []

    response = await client.delete(f"{url}/{brand['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Mechanic-Brand association not found"}


@pytest.mark.asyncio
async def test_unlink_invalid_ids(client, sql_log):
    response = await client.delete("/employee/x/mechanic-brand/1")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid employee or brand ID"}
    assert sql_log == []


@pytest.mark.asyncio
async def test_deleting_mechanic_drops_links(client, mechanic, brand):
    await client.post(f"/employee/{mechanic['id']}/mechanic-brand", json={"brandId": brand["id"]})

    response = await client.delete(f"/employee/{mechanic['id']}")
    assert response.status_code == 204

    # Brand itself is untouched
    assert (await client.get(f"/brand/{brand['id']}")).status_code == 200
