"""Application service: Add Product to Cart use case."""

from __future__ import annotations

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.repository.stock_repository import StockRepository
from shopcart.domain.service.stock_check_service import StockCheckService


class AddToCartHandler:

    def __init__(
        self,
        stock_repo: StockRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._stock_check = StockCheckService(stock_repo)
        self._product_repo = product_repo

    async def handle(self, cart: Cart, product_id: int) -> Cart:
        """Return ``cart`` with one more unit of ``product_id``.

        Steps:
        1. Fetch the stock (always, even for products not yet in the cart).
        2. Already in the cart -> increment, provided the new amount fits.
        3. Not in the cart -> fetch the catalog data and append at amount 1.

        Nothing is committed here; any failure simply propagates and the
        caller keeps its old cart.
        """
        stock = await self._stock_check.current_stock(product_id)

        existing = cart.find(product_id)
        if existing is not None:
            self._stock_check.check(stock, existing.amount + 1)
            return cart.replacing(existing.incremented())

        product = await self._product_repo.get_by_id(product_id)
        return cart.with_item(LineItem.from_product(product))
