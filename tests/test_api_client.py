"""Tests for ApiClient request building and error normalization."""
import httpx
import pytest

from storefront.client.api import ApiClient, ApiError
from storefront.client.query import ListQuery
from storefront.core.sorting import ProductSortField, SortDirection

BASE_URL = "http://api.test/api/v1"

LIST_BODY = {
    "data": [{"id": "p1", "name": "Desk Lamp"}],
    "meta": {"total": 1, "page": 1, "pageSize": 10, "totalPages": 1},
}


def _client(handler, **kwargs):
    return ApiClient(BASE_URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_fetch_page_sends_list_params_and_tenant_header():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["client_id"] = request.headers.get("X-Client-ID")
        return httpx.Response(200, json=LIST_BODY)

    query = ListQuery(
        page=1, page_size=20, sort_field=ProductSortField.PRICE, sort_direction=SortDirection.DESC
    )
    async with _client(handler, client_id="acme") as api:
        result = await api.fetch_page("/products", query)

    assert seen == {
        "path": "/api/v1/products",
        "params": {"page": "2", "limit": "20", "sortBy": "price", "sortOrder": "desc"},
        "client_id": "acme",
    }
    assert result.meta.total_pages == 1
    assert result.data[0]["name"] == "Desk Lamp"


@pytest.mark.asyncio
async def test_error_envelope_is_normalized():
    def handler(request):
        return httpx.Response(
            400,
            json={"error": {"code": "INVALID_SORT_FIELD", "message": "Invalid sort field 'sku'."}},
        )

    async with _client(handler) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.fetch_page("/products", ListQuery())

    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "INVALID_SORT_FIELD"
    assert exc_info.value.message == "Invalid sort field 'sku'."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, message",
    [({"error": "Seller not found"}, "Seller not found"), ({"detail": "Nope"}, "Nope")],
)
async def test_other_error_shapes(body, message):
    async with _client(lambda request: httpx.Response(404, json=body)) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.get("/sellers/x")

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == message
    assert exc_info.value.code is None


@pytest.mark.asyncio
async def test_unreachable_server_is_503():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.fetch_page("/products", ListQuery())

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "Network error - server unreachable"


@pytest.mark.asyncio
async def test_timeout_is_504():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    async with _client(handler) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.get("/products")

    assert exc_info.value.status_code == 504


@pytest.mark.asyncio
async def test_malformed_bodies_are_502():
    async with _client(lambda request: httpx.Response(200, text="<html>")) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.get("/products")
    assert exc_info.value.status_code == 502

    async with _client(lambda request: httpx.Response(200, json={"items": []})) as api:
        with pytest.raises(ApiError) as exc_info:
            await api.fetch_page("/products", ListQuery())
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_delete_returns_none_for_no_content():
    async with _client(lambda request: httpx.Response(204)) as api:
        assert await api.delete("/products/p1") is None
