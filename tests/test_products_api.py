"""Integration tests for /api/v1/products: listing protocol and CRUD."""
import pytest

BASE = "/api/v1/products"


@pytest.mark.asyncio
async def test_default_listing_is_first_page_of_ten_most_recent_first(client, seed_products):
    await seed_products(45)

    r = await client.get(BASE)

    assert r.status_code == 200
    body = r.json()
    assert body["meta"] == {"total": 45, "page": 1, "pageSize": 10, "totalPages": 5}
    assert len(body["data"]) == 10
    assert body["data"][0]["name"] == "Product 45"
    assert body["data"][-1]["name"] == "Product 36"


@pytest.mark.asyncio
async def test_page_and_limit_translate_to_offset(client, seed_products):
    await seed_products(45)

    r = await client.get(BASE, params={"page": 2, "limit": 20})

    body = r.json()
    assert body["meta"] == {"total": 45, "page": 2, "pageSize": 20, "totalPages": 3}
    assert len(body["data"]) == 20
    # offset (2-1)*20 = 20 into the newest-first ordering
    assert body["data"][0]["name"] == "Product 25"


@pytest.mark.asyncio
async def test_last_page_is_partial(client, seed_products):
    await seed_products(45)

    r = await client.get(BASE, params={"page": 5, "limit": 10})

    assert len(r.json()["data"]) == 5


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(client, seed_products):
    await seed_products(3)

    r = await client.get(BASE, params={"page": 4})

    assert r.status_code == 200
    assert r.json()["data"] == []
    assert r.json()["meta"]["total"] == 3


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "order, first_name, first_price",
    [("asc", "Product 45", 55), ("desc", "Product 01", 99)],
)
async def test_sort_by_price(client, seed_products, order, first_name, first_price):
    await seed_products(45)

    r = await client.get(BASE, params={"sortBy": "price", "sortOrder": order})

    first = r.json()["data"][0]
    assert first["name"] == first_name
    assert first["price"] == first_price


@pytest.mark.asyncio
async def test_sort_order_defaults_to_ascending(client, seed_products):
    await seed_products(12)

    r = await client.get(BASE, params={"sortBy": "name"})

    names = [p["name"] for p in r.json()["data"]]
    assert names == sorted(names)
    assert names[0] == "Product 01"


@pytest.mark.asyncio
async def test_camel_case_sort_field_maps_to_column(client, seed_products):
    await seed_products(6)

    r = await client.get(BASE, params={"sortBy": "averageRating", "sortOrder": "desc"})

    assert r.status_code == 200
    ratings = [p["averageRating"] for p in r.json()["data"]]
    assert ratings == sorted(ratings, reverse=True)


@pytest.mark.asyncio
async def test_unknown_sort_field_is_rejected_with_400(client, seed_products):
    await seed_products(2)

    r = await client.get(BASE, params={"sortBy": "sku", "sortOrder": "asc"})

    assert r.status_code == 400
    error = r.json()["error"]
    assert error["code"] == "INVALID_SORT_FIELD"
    assert "id, name, price, isPublished, averageRating, createdAt" in error["message"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [{"sortOrder": "sideways"}, {"limit": 101}, {"limit": 0}, {"page": 0}, {"page": "abc"}],
)
async def test_out_of_range_query_params_are_422(client, params):
    r = await client.get(BASE, params=params)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_huge_page_number_is_422_not_a_server_error(client, seed_products):
    await seed_products(3)

    r = await client.get(BASE, params={"page": 10**20})
    assert r.status_code == 422

    r = await client.get(BASE, params={"page": 10**15, "limit": 100})
    assert r.status_code == 200
    assert r.json()["data"] == []


@pytest.mark.asyncio
async def test_filter_by_published(client, seed_products):
    await seed_products(45)

    r = await client.get(BASE, params={"isPublished": "true", "limit": 100})

    body = r.json()
    assert body["meta"]["total"] == 22
    assert all(p["isPublished"] for p in body["data"])


@pytest.mark.asyncio
async def test_product_crud_lifecycle(client):
    r = await client.post(BASE, json={"name": "Desk Lamp", "sku": "LAMP-001", "price": 24.5})
    assert r.status_code == 201
    product = r.json()["data"]
    assert product["isPublished"] is False
    assert product["quantity"] == 0

    r = await client.put(f"{BASE}/{product['id']}", json={"price": 19.99, "isPublished": True})
    assert r.status_code == 200
    assert r.json()["data"]["price"] == 19.99
    assert r.json()["data"]["isPublished"] is True
    assert r.json()["data"]["name"] == "Desk Lamp"

    r = await client.delete(f"{BASE}/{product['id']}")
    assert r.status_code == 204

    r = await client.get(f"{BASE}/{product['id']}")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"

    r = await client.get(BASE)
    assert r.json()["meta"]["total"] == 0


@pytest.mark.asyncio
async def test_duplicate_sku_conflicts(client):
    await client.post(BASE, json={"name": "Desk Lamp", "sku": "LAMP-001", "price": 24.5})

    r = await client.post(BASE, json={"name": "Floor Lamp", "sku": "LAMP-001", "price": 80})

    assert r.status_code == 409
    assert r.json()["error"]["code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_updated_product_moves_to_top_of_default_order(client, seed_products):
    products = await seed_products(5)

    await client.put(f"{BASE}/{products[0].id}", json={"brand": "Acme"})
    r = await client.get(BASE)

    assert r.json()["data"][0]["id"] == products[0].id


@pytest.mark.asyncio
async def test_unknown_category_is_404(client):
    r = await client.post(
        BASE, json={"name": "Desk Lamp", "sku": "LAMP-001", "price": 1, "categoryId": "missing"}
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_tenants_are_isolated(client, seed_products):
    await seed_products(4)
    acme = await seed_products(3, client_id="acme")

    r = await client.get(BASE, headers={"X-Client-ID": "acme"})
    assert r.json()["meta"]["total"] == 3

    r = await client.get(BASE)
    assert r.json()["meta"]["total"] == 4

    r = await client.get(f"{BASE}/{acme[0].id}")
    assert r.status_code == 404
