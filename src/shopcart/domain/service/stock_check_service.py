"""Domain service: Stock Check.

Every quantity the cart is about to hold must be validated against the
remote stock level. Keeping the rule here means add and update share the
exact same comparison.
"""

from __future__ import annotations

from shopcart.domain.exceptions import InsufficientStockError
from shopcart.domain.model.product import Stock
from shopcart.domain.repository.stock_repository import StockRepository


class StockCheckService:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    async def current_stock(self, product_id: int) -> Stock:
        """Fetch the stock; lookup failures propagate unchanged."""
        return await self._stock_repo.get_by_product_id(product_id)

    @staticmethod
    def check(stock: Stock, requested: int) -> None:
        """Raise InsufficientStockError if ``requested`` units don't fit."""
        if not stock.allows(requested):
            raise InsufficientStockError(stock.product_id, requested, stock.amount)

    async def ensure_available(self, product_id: int, requested: int) -> Stock:
        """Look up the stock and check that ``requested`` units fit in it."""
        stock = await self.current_stock(product_id)
        self.check(stock, requested)
        return stock
