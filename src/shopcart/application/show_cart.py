"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO, CartLineDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.line_item import LineItem


class ShowCartHandler:

    def handle(self, cart: Cart) -> CartDTO:
        return CartDTO(
            items=[self._to_line(item) for item in cart],
            total_units=sum(item.amount for item in cart),
        )

    @staticmethod
    def _to_line(item: LineItem) -> CartLineDTO:
        # Catalogs name the product "title"; fall back to "name" for older payloads
        title = item.payload.get("title", item.payload.get("name", ""))
        return CartLineDTO(
            product_id=item.product_id,
            title=str(title),
            amount=item.amount,
        )
