"""Integration tests for /api/v1/products/{productId}/variants."""
import pytest

BASE = "/api/v1/products"

OPTIONS = {"color": "black", "material": "steel", "size": "M"}


async def _create_product(client, sku="LAMP-001"):
    r = await client.post(BASE, json={"name": "Desk Lamp", "sku": sku, "price": 24.5})
    assert r.status_code == 201
    return r.json()["data"]


@pytest.mark.asyncio
async def test_variant_crud_lifecycle(client):
    product = await _create_product(client)
    variants = f"{BASE}/{product['id']}/variants"

    r = await client.post(variants, json={"sku": "LAMP-001-BLK", "options": OPTIONS, "price": 26})
    assert r.status_code == 201
    variant = r.json()["data"]
    assert variant["productId"] == product["id"]
    assert variant["options"] == OPTIONS
    assert variant["price"] == 26

    r = await client.put(f"{variants}/{variant['id']}", json={"price": 22.5})
    assert r.status_code == 200
    assert r.json()["data"]["price"] == 22.5
    assert r.json()["data"]["sku"] == "LAMP-001-BLK"

    r = await client.delete(f"{variants}/{variant['id']}")
    assert r.status_code == 204
    r = await client.delete(f"{variants}/{variant['id']}")
    assert r.status_code == 404

    r = await client.get(variants)
    assert r.json()["meta"]["total"] == 0


@pytest.mark.asyncio
async def test_variants_are_listed_per_product_and_sortable(client):
    lamp = await _create_product(client)
    desk = await _create_product(client, "DESK-001")
    for sku, price in [("LAMP-B", 30), ("LAMP-A", 20), ("LAMP-C", 25)]:
        await client.post(f"{BASE}/{lamp['id']}/variants", json={"sku": sku, "price": price})
    await client.post(f"{BASE}/{desk['id']}/variants", json={"sku": "DESK-A"})

    r = await client.get(
        f"{BASE}/{lamp['id']}/variants", params={"sortBy": "price", "sortOrder": "desc"}
    )

    body = r.json()
    assert body["meta"] == {"total": 3, "page": 1, "pageSize": 10, "totalPages": 1}
    assert [v["sku"] for v in body["data"]] == ["LAMP-B", "LAMP-C", "LAMP-A"]

    r = await client.get(f"{BASE}/{lamp['id']}/variants", params={"sortBy": "options"})
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_SORT_FIELD"


@pytest.mark.asyncio
async def test_duplicate_variant_sku_conflicts(client):
    lamp = await _create_product(client)
    desk = await _create_product(client, "DESK-001")
    await client.post(f"{BASE}/{lamp['id']}/variants", json={"sku": "SHARED-1"})

    # SKUs are unique across every product's variants
    r = await client.post(f"{BASE}/{desk['id']}/variants", json={"sku": "SHARED-1"})
    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"

    other = (await client.post(f"{BASE}/{desk['id']}/variants", json={"sku": "DESK-1"})).json()["data"]
    r = await client.put(f"{BASE}/{desk['id']}/variants/{other['id']}", json={"sku": "SHARED-1"})
    assert r.status_code == 409

    # Keeping its own SKU is not a conflict
    r = await client.put(f"{BASE}/{desk['id']}/variants/{other['id']}", json={"sku": "DESK-1"})
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_variant_of_another_product_is_404(client):
    lamp = await _create_product(client)
    desk = await _create_product(client, "DESK-001")
    variant = (await client.post(f"{BASE}/{lamp['id']}/variants", json={"sku": "LAMP-1"})).json()["data"]

    r = await client.put(f"{BASE}/{desk['id']}/variants/{variant['id']}", json={"price": 1})
    assert r.status_code == 404
    r = await client.delete(f"{BASE}/{desk['id']}/variants/{variant['id']}")
    assert r.status_code == 404

    r = await client.get(f"{BASE}/missing/variants")
    assert r.status_code == 404
    r = await client.post(f"{BASE}/missing/variants", json={"sku": "X-100"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_variant_validation(client):
    lamp = await _create_product(client)
    variants = f"{BASE}/{lamp['id']}/variants"

    assert (await client.post(variants, json={"sku": "AB"})).status_code == 422
    assert (await client.post(variants, json={"sku": "LAMP-1", "price": -1})).status_code == 422
    r = await client.post(variants, json={"sku": "LAMP-1", "options": {"color": "red"}})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_variants_are_tenant_scoped(client):
    lamp = await _create_product(client)
    await client.post(f"{BASE}/{lamp['id']}/variants", json={"sku": "LAMP-1"})

    r = await client.get(f"{BASE}/{lamp['id']}/variants", headers={"X-Client-ID": "acme"})

    assert r.status_code == 404
