"""Application service: Update Product Amount use case."""

from __future__ import annotations

from shopcart.domain.model.cart import Cart
from shopcart.domain.model.value_objects import require_int
from shopcart.domain.repository.stock_repository import StockRepository
from shopcart.domain.service.stock_check_service import StockCheckService


def _is_non_positive(amount: object) -> bool:
    return (
        isinstance(amount, (int, float))
        and not isinstance(amount, bool)
        and amount <= 0
    )


class UpdateCartAmountHandler:

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_check = StockCheckService(stock_repo)

    async def handle(self, cart: Cart, product_id: int, amount: int) -> Cart:
        """Set the absolute amount of a product already in the cart.

        Any non-positive number (``0``, ``-1``, ``0.0``...) returns ``cart``
        itself before anything else is checked: removal has its own use
        case and is never reached through here. Other non-integers are
        rejected. The presence check happens before the stock lookup so
        unknown products never hit the remote service.
        """
        if _is_non_positive(amount):
            return cart
        amount = require_int(amount, "Quantity")

        cart.get(product_id)
        await self._stock_check.ensure_available(product_id, amount)
        return cart.with_amount(product_id, amount)
