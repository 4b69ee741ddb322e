"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import functools

from shopcart.application.cart_manager import CartManager
from shopcart.infrastructure.click_notifier import ClickNotifier
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.http.api_client import ApiClient
from shopcart.infrastructure.http.http_product_repository import HttpProductRepository
from shopcart.infrastructure.http.http_stock_repository import HttpStockRepository
from shopcart.infrastructure.persistence.json_file_cart_storage import (
    JsonFileCartStorage,
)
from shopcart.infrastructure.persistence.stored_cart_repository import (
    StoredCartRepository,
)


def cart_repository(settings: Settings) -> StoredCartRepository:
    return StoredCartRepository(
        JsonFileCartStorage(settings.storage_path), settings.storage_key
    )


def api_client(settings: Settings) -> ApiClient:
    return ApiClient(settings.api_url, timeout=settings.request_timeout)


@functools.cache
def cart_manager(settings: Settings) -> CartManager:
    """The process-wide CartManager for ``settings``.

    Cached so every consumer shares the same cart instead of loading
    its own copy from storage.
    """
    api = api_client(settings)
    return CartManager(
        cart_repo=cart_repository(settings),
        stock_repo=HttpStockRepository(api),
        product_repo=HttpProductRepository(api),
        notifier=ClickNotifier(),
    )
