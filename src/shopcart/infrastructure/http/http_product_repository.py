"""ProductRepository over the REST API (``GET /products/{id}``)."""

from __future__ import annotations

from shopcart.domain.exceptions import LookupFailedError, ProductNotFoundError
from shopcart.domain.model.product import ProductData
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.infrastructure.http.api_client import ApiClient


class HttpProductRepository(ProductRepository):

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def get_by_id(self, product_id: int) -> ProductData:
        data = await self._api.get_json(f"/products/{product_id}")
        if data is None:
            raise ProductNotFoundError(f"Product {product_id} not found")
        if not isinstance(data, dict):
            raise LookupFailedError(f"Malformed product response for {product_id}")

        # The cart owns "id" and "amount"; everything else is opaque payload
        fields = {k: v for k, v in data.items() if k not in ("id", "amount")}
        return ProductData(product_id=product_id, fields=fields)
