"""Tests for inventory endpoints."""

from httpx import AsyncClient


async def test_add_and_get_item(api_client: AsyncClient, sample_item_data: dict):
    created = await api_client.post("/api/inventory", json=sample_item_data)

    item = created.json()
    assert created.status_code == 201
    assert item["status"] == "Low Stock"

    fetched = await api_client.get(f"/api/inventory/{item['id']}")
    assert fetched.json()["name"] == "Cement bags"


async def test_missing_item(api_client: AsyncClient):
    response = await api_client.get("/api/inventory/missing")

    assert response.status_code == 404
    assert response.json()["detail"] == "INVENTORY_ITEM_NOT_FOUND"


async def test_short_name_rejected(api_client: AsyncClient, sample_item_data: dict):
    response = await api_client.post("/api/inventory", json={**sample_item_data, "name": "X"})

    assert response.status_code == 422


async def test_update_rederives_status(api_client: AsyncClient, sample_item_data: dict):
    item = (await api_client.post("/api/inventory", json=sample_item_data)).json()

    response = await api_client.put(
        f"/api/inventory/{item['id']}", json={**sample_item_data, "quantity": 0}
    )

    assert response.json()["status"] == "Out of Stock"


async def test_adjust_stock(api_client: AsyncClient, sample_item_data: dict):
    item = (await api_client.post("/api/inventory", json=sample_item_data)).json()

    response = await api_client.post(f"/api/inventory/{item['id']}/adjust", json={"delta": 20})

    assert response.status_code == 200
    assert response.json()["item"]["quantity"] == 25
    assert response.json()["item"]["status"] == "In Stock"


async def test_adjust_below_zero(api_client: AsyncClient, sample_item_data: dict):
    item = (await api_client.post("/api/inventory", json=sample_item_data)).json()

    response = await api_client.post(f"/api/inventory/{item['id']}/adjust", json={"delta": -6})

    assert response.status_code == 422
    assert response.json()["error_code"] == "NegativeStock"


async def test_zero_delta(api_client: AsyncClient, sample_item_data: dict):
    item = (await api_client.post("/api/inventory", json=sample_item_data)).json()

    response = await api_client.post(f"/api/inventory/{item['id']}/adjust", json={"delta": 0})

    assert response.status_code == 400
    assert response.json()["error_code"] == "ValidationError"


async def test_low_stock_listing(api_client: AsyncClient, sample_item_data: dict):
    await api_client.post("/api/inventory", json=sample_item_data)
    await api_client.post("/api/inventory", json={**sample_item_data, "name": "Gravel", "quantity": 80})

    response = await api_client.get("/api/inventory/low-stock")

    assert [i["name"] for i in response.json()["items"]] == ["Cement bags"]


async def test_delete_item(api_client: AsyncClient, sample_item_data: dict):
    item = (await api_client.post("/api/inventory", json=sample_item_data)).json()

    response = await api_client.delete(f"/api/inventory/{item['id']}")

    assert response.json() == {"success": True, "message": "Item deleted successfully."}
