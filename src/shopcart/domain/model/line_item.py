"""LineItem: one product in the cart together with its quantity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import ProductData
from shopcart.domain.model.value_objects import Quantity, require_int


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class LineItem:
    """A product entry in the cart.

    ``payload`` holds the catalog fields (title, price, image, ...) exactly
    as they were returned when the item was first added. It is never
    re-fetched: changing the quantity keeps the original snapshot.

    The payload is stored as a read-only copy (nested mappings become
    mapping proxies, lists become tuples), so a cart handed out to
    observers cannot be changed behind the manager's back.
    """

    product_id: int
    quantity: Quantity
    payload: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        require_int(self.product_id, "Product ID")
        if not isinstance(self.payload, Mapping):
            raise ValidationError(
                f"Line item payload must be a mapping, got {type(self.payload).__name__}"
            )
        if "id" in self.payload or "amount" in self.payload:
            raise ValidationError(
                "Line item payload must not carry 'id' or 'amount' fields"
            )
        object.__setattr__(self, "payload", _freeze(self.payload))

    @property
    def amount(self) -> int:
        return self.quantity.value

    def payload_dict(self) -> dict[str, Any]:
        """A mutable deep copy of the payload, with lists restored."""
        return _thaw(self.payload)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_product(product: ProductData) -> LineItem:
        """A freshly added product always starts at one unit."""
        return LineItem(
            product_id=product.product_id,
            quantity=Quantity(1),
            payload=product.fields,
        )

    # --- Copies ---------------------------------------------------------------

    def with_quantity(self, quantity: Quantity) -> LineItem:
        return replace(self, quantity=quantity)

    def incremented(self) -> LineItem:
        return self.with_quantity(self.quantity.increment())
