"""Domain-level exceptions.

Every failure the cart can run into is a subclass of DomainException so the
CartManager can catch them at its operation boundary, log the specific kind
and collapse them into a single user-facing notification.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(DomainException):
    """The requested quantity exceeds the available stock."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product {product_id} "
            f"(requested {requested}, have {available} available)"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class LookupFailedError(DomainException):
    """A remote stock or catalog lookup could not be completed."""


class ProductNotFoundError(LookupFailedError):
    """The catalog has no product with the requested ID."""


class MalformedCartError(DomainException):
    """A cart could not be converted to or from its stored form."""


class StorageError(DomainException):
    """The cart storage medium could not be read or written."""
