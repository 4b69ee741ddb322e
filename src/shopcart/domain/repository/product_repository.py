"""Abstract repository for catalog product data."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import ProductData


class ProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: int) -> ProductData:
        """Return the base data of a product.

        Raises ProductNotFoundError for an unknown ID and
        LookupFailedError for any other lookup failure.
        """
