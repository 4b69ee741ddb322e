"""Tests for the REST-backed stock and product repositories."""

import httpx
import pytest

from shopcart.domain.exceptions import LookupFailedError, ProductNotFoundError
from shopcart.domain.model.product import ProductData, Stock
from shopcart.infrastructure.http.api_client import ApiClient
from shopcart.infrastructure.http.http_product_repository import HttpProductRepository
from shopcart.infrastructure.http.http_stock_repository import HttpStockRepository

BASE_URL = "http://api.test"


def _api(routes: dict[str, httpx.Response]) -> ApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return routes.get(request.url.path, httpx.Response(404, json={}))

    return ApiClient(BASE_URL, transport=httpx.MockTransport(handler))


def _unreachable_api() -> ApiClient:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return ApiClient(BASE_URL, transport=httpx.MockTransport(handler))


class TestHttpStockRepository:

    @pytest.mark.asyncio
    async def test_returns_stock(self):
        repo = HttpStockRepository(_api({"/stock/1": httpx.Response(200, json={"id": 1, "amount": 3})}))
        assert await repo.get_by_product_id(1) == Stock(product_id=1, amount=3)

    @pytest.mark.asyncio
    async def test_missing_record(self):
        repo = HttpStockRepository(_api({}))
        with pytest.raises(LookupFailedError, match="No stock record"):
            await repo.get_by_product_id(1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"id": 1}, [1, 2], {"amount": "3"}, {"amount": -1}])
    async def test_malformed_body(self, body):
        repo = HttpStockRepository(_api({"/stock/1": httpx.Response(200, json=body)}))
        with pytest.raises(LookupFailedError, match="Malformed stock response"):
            await repo.get_by_product_id(1)

    @pytest.mark.asyncio
    async def test_server_error(self):
        repo = HttpStockRepository(_api({"/stock/1": httpx.Response(500, text="boom")}))
        with pytest.raises(LookupFailedError, match="HTTP 500"):
            await repo.get_by_product_id(1)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        repo = HttpStockRepository(_unreachable_api())
        with pytest.raises(LookupFailedError, match="failed"):
            await repo.get_by_product_id(1)


class TestHttpProductRepository:

    @pytest.mark.asyncio
    async def test_returns_payload_without_id(self):
        body = {"id": 1, "title": "Tênis", "price": 179.9, "image": "https://img.example/1.jpg"}
        repo = HttpProductRepository(_api({"/products/1": httpx.Response(200, json=body)}))

        product = await repo.get_by_id(1)

        assert product == ProductData(
            product_id=1,
            fields={"title": "Tênis", "price": 179.9, "image": "https://img.example/1.jpg"},
        )

    @pytest.mark.asyncio
    async def test_not_found(self):
        repo = HttpProductRepository(_api({}))
        with pytest.raises(ProductNotFoundError):
            await repo.get_by_id(1)

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        repo = HttpProductRepository(_api({"/products/1": httpx.Response(200, text="<html>")}))
        with pytest.raises(LookupFailedError, match="not JSON"):
            await repo.get_by_id(1)

    @pytest.mark.asyncio
    async def test_non_object_body(self):
        repo = HttpProductRepository(_api({"/products/1": httpx.Response(200, json=[1])}))
        with pytest.raises(LookupFailedError, match="Malformed product response"):
            await repo.get_by_id(1)


class TestApiClient:

    @pytest.mark.asyncio
    async def test_each_lookup_is_a_fresh_request_with_configured_timeout(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": 1, "amount": 3})

        api = ApiClient(BASE_URL, timeout=1.5, transport=httpx.MockTransport(handler))

        assert await api.get_json("/stock/1") == {"id": 1, "amount": 3}
        assert await api.get_json("/stock/1") == {"id": 1, "amount": 3}

        assert len(seen) == 2
        assert all(r.extensions["timeout"]["read"] == 1.5 for r in seen)
        assert all(r.headers["accept"] == "application/json" for r in seen)
