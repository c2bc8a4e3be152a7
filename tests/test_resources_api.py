"""Integration tests for the remaining v1 resources."""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from storefront.db.base import get_db
from storefront.main import app

API = "/api/v1"


async def _create_user(client, email="ada@example.com"):
    r = await client.post(
        f"{API}/users", json={"email": email, "firstName": "Ada", "lastName": "Lovelace"}
    )
    assert r.status_code == 201
    return r.json()["data"]


@pytest.mark.asyncio
async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert body["version"] == "1.0.0"


class _DownSession:
    rolled_back = False

    async def execute(self, statement):
        raise SQLAlchemyError("database is locked")

    async def rollback(self):
        self.rolled_back = True

    async def commit(self):
        pass


@pytest.mark.asyncio
async def test_health_reports_unreachable_database(client):
    session = _DownSession()

    async def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    r = await client.get("/health")

    assert r.status_code == 200
    assert r.json()["status"] == "degraded"
    assert r.json()["database"] == "unavailable"
    assert session.rolled_back is True


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    r = await client.get(f"{API}/nothing-here")
    assert r.status_code == 404
    assert r.json() == {"error": {"code": "NOT_FOUND", "message": "Resource not found"}}


@pytest.mark.asyncio
async def test_categories_sorted_by_name_and_unique(client):
    for name in ["Garden", "Books", "Electronics"]:
        r = await client.post(f"{API}/categories", json={"name": name})
        assert r.status_code == 201

    r = await client.get(f"{API}/categories", params={"sortBy": "name", "sortOrder": "asc"})
    assert [c["name"] for c in r.json()["data"]] == ["Books", "Electronics", "Garden"]

    r = await client.post(f"{API}/categories", json={"name": "Books"})
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_category_rejects_product_sort_field(client):
    r = await client.get(f"{API}/categories", params={"sortBy": "price"})
    assert r.status_code == 400
    assert r.json()["error"]["message"].endswith("Valid fields are: id, name, createdAt")


@pytest.mark.asyncio
async def test_roles_include_deleted(client):
    admin = (await client.post(f"{API}/roles", json={"name": "admin"})).json()["data"]
    await client.post(f"{API}/roles", json={"name": "editor"})

    r = await client.delete(f"{API}/roles/{admin['id']}")
    assert r.status_code == 204
    r = await client.delete(f"{API}/roles/{admin['id']}")
    assert r.status_code == 404

    r = await client.get(f"{API}/roles")
    assert r.json()["meta"]["total"] == 1

    r = await client.get(f"{API}/roles", params={"includeDeleted": "true"})
    body = r.json()
    assert body["meta"]["total"] == 2
    deleted = [role for role in body["data"] if role["id"] == admin["id"]]
    assert deleted[0]["deletedAt"] is not None


@pytest.mark.asyncio
async def test_users_sorted_by_camel_case_field(client):
    await _create_user(client, "zed@example.com")
    await client.post(
        f"{API}/users", json={"email": "amy@example.com", "firstName": "Amy", "lastName": "Zimmer"}
    )

    r = await client.get(f"{API}/users", params={"sortBy": "lastName", "sortOrder": "desc"})

    assert [u["lastName"] for u in r.json()["data"]] == ["Zimmer", "Lovelace"]


@pytest.mark.asyncio
async def test_duplicate_user_email_conflicts(client):
    await _create_user(client)
    r = await client.post(
        f"{API}/users", json={"email": "ada@example.com", "firstName": "A", "lastName": "L"}
    )
    assert r.status_code == 409


@pytest.mark.asyncio
async def test_user_addresses_listing(client):
    user = await _create_user(client)
    for city in ["Oslo", "Bergen"]:
        r = await client.post(
            f"{API}/addresses",
            json={
                "userId": user["id"],
                "addressLine1": "1 Main St",
                "city": city,
                "postalCode": "0150",
                "country": "Norway",
            },
        )
        assert r.status_code == 201

    r = await client.get(
        f"{API}/users/{user['id']}/addresses", params={"sortBy": "city", "sortOrder": "asc"}
    )

    body = r.json()
    assert body["meta"]["total"] == 2
    assert [a["city"] for a in body["data"]] == ["Bergen", "Oslo"]


@pytest.mark.asyncio
async def test_addresses_of_unknown_user_are_404(client):
    r = await client.get(f"{API}/users/missing/addresses")
    assert r.status_code == 404

    r = await client.post(
        f"{API}/addresses",
        json={
            "userId": "missing",
            "addressLine1": "1 Main St",
            "city": "Oslo",
            "postalCode": "0150",
            "country": "Norway",
        },
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_order_status_update_and_filter(client):
    user = await _create_user(client)
    first = (await client.post(f"{API}/orders", json={"userId": user["id"], "total": 42})).json()["data"]
    await client.post(f"{API}/orders", json={"userId": user["id"], "total": 10})
    assert first["status"] == "PENDING"

    r = await client.put(f"{API}/orders/{first['id']}", json={"status": "SHIPPED"})
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "SHIPPED"

    r = await client.put(f"{API}/orders/{first['id']}", json={"status": "LOST"})
    assert r.status_code == 422

    r = await client.get(f"{API}/orders", params={"status": "SHIPPED"})
    assert [o["id"] for o in r.json()["data"]] == [first["id"]]

    r = await client.get(f"{API}/orders", params={"sortBy": "total", "sortOrder": "desc"})
    assert [o["total"] for o in r.json()["data"]] == [42, 10]


@pytest.mark.asyncio
async def test_taxes_sorted_by_rate(client):
    for country, rate in [("IN", 0.18), ("DE", 0.19), ("US", 0.07)]:
        r = await client.post(f"{API}/taxes", json={"country": country, "rate": rate})
        assert r.status_code == 201

    r = await client.get(f"{API}/taxes", params={"sortBy": "rate", "sortOrder": "desc"})

    assert [t["country"] for t in r.json()["data"]] == ["DE", "IN", "US"]


@pytest.mark.asyncio
async def test_sellers_status_filter(client):
    seller = (await client.post(f"{API}/sellers", json={"businessName": "Nordic Goods"})).json()["data"]
    await client.post(f"{API}/sellers", json={"businessName": "Lamp House"})

    r = await client.put(f"{API}/sellers/{seller['id']}", json={"status": "APPROVED"})
    assert r.json()["data"]["status"] == "APPROVED"

    r = await client.get(f"{API}/sellers", params={"status": "PENDING"})
    assert [s["businessName"] for s in r.json()["data"]] == ["Lamp House"]
