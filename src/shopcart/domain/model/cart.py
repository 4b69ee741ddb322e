"""Cart aggregate: the ordered set of line items a shopper has selected.

The Cart is immutable: every mutation returns a *new* Cart and leaves the
original untouched, so a previously committed value can always be compared
against the current one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from shopcart.domain.exceptions import EntityNotFoundError, ValidationError
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - no two line items share a ``product_id``
    - every line item holds at least one unit (enforced by ``Quantity``)
    - items keep their insertion order
    """

    items: tuple[LineItem, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for item in self.items:
            if item.product_id in seen:
                raise ValidationError(
                    f"Duplicate line item for product {item.product_id}"
                )
            seen.add(item.product_id)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def empty() -> Cart:
        return Cart()

    @staticmethod
    def of(items: Iterable[LineItem]) -> Cart:
        return Cart(tuple(items))

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: int) -> LineItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def get(self, product_id: int) -> LineItem:
        item = self.find(product_id)
        if item is None:
            raise EntityNotFoundError(f"Product {product_id} is not in the cart")
        return item

    def __contains__(self, product_id: object) -> bool:
        return any(item.product_id == product_id for item in self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Transitions (each returns a new Cart) --------------------------------

    def with_item(self, item: LineItem) -> Cart:
        """Append a new line item at the end of the cart."""
        return Cart(self.items + (item,))

    def replacing(self, item: LineItem) -> Cart:
        """Swap the line item with the same product ID, keeping its position."""
        self.get(item.product_id)
        return Cart(
            tuple(item if i.product_id == item.product_id else i for i in self.items)
        )

    def with_amount(self, product_id: int, amount: int) -> Cart:
        return self.replacing(self.get(product_id).with_quantity(Quantity(amount)))

    def without(self, product_id: int) -> Cart:
        self.get(product_id)
        return Cart(tuple(i for i in self.items if i.product_id != product_id))
