"""StockRepository over the REST API (``GET /stock/{id}``)."""

from __future__ import annotations

from shopcart.domain.exceptions import LookupFailedError, ValidationError
from shopcart.domain.model.product import Stock
from shopcart.domain.repository.stock_repository import StockRepository
from shopcart.infrastructure.http.api_client import ApiClient


class HttpStockRepository(StockRepository):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def get_by_product_id(self, product_id: int) -> Stock:
        data = await self._api.get_json(f"/stock/{product_id}")
        if data is None:
            raise LookupFailedError(f"No stock record for product {product_id}")
        if not isinstance(data, dict) or "amount" not in data:
            raise LookupFailedError(f"Malformed stock response for product {product_id}")
        try:
            return Stock(product_id=product_id, amount=data["amount"])
        except ValidationError as exc:
            raise LookupFailedError(
                f"Malformed stock response for product {product_id}: {exc}"
            ) from exc
