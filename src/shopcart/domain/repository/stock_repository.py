"""Abstract repository for product stock levels.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete implementation talks to the remote
stock API; tests use an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Stock


class StockRepository(ABC):

    @abstractmethod
    async def get_by_product_id(self, product_id: int) -> Stock:
        """Return the current stock for a product.

        Raises LookupFailedError when the stock cannot be determined.
        """
