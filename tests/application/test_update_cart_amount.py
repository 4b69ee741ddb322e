"""Tests for setting quantities via UpdateCartAmount and CartManager.update_product_amount."""

import json

import pytest

from shopcart.application import messages
from shopcart.application.update_cart_amount import UpdateCartAmountHandler
from shopcart.domain.exceptions import EntityNotFoundError
from shopcart.domain.model.cart import Cart
from shopcart.infrastructure.persistence.stored_cart_repository import DEFAULT_CART_KEY
from tests.fakes import FakeStockRepository, RecordingCartStorage, build_manager


def _setup(amount: int = 3, stock: dict[int, int] | None = None):
    storage = RecordingCartStorage({
        DEFAULT_CART_KEY: json.dumps([{"id": 1, "title": "Tênis", "amount": amount}])
    })
    stock_repo = FakeStockRepository({1: 5} if stock is None else stock)
    manager, storage, notifier = build_manager(storage=storage, stock_repo=stock_repo)
    return manager, storage, notifier, stock_repo


class TestUpdateCartAmountHandler:

    @pytest.mark.asyncio
    async def test_non_positive_returns_same_cart(self):
        handler = UpdateCartAmountHandler(FakeStockRepository())
        cart = Cart.empty()
        assert await handler.handle(cart, 1, 0) is cart

    @pytest.mark.parametrize("amount", [0.0, -1.0])
    @pytest.mark.asyncio
    async def test_non_positive_float_returns_same_cart(self, amount):
        stock_repo = FakeStockRepository({1: 5})
        handler = UpdateCartAmountHandler(stock_repo)
        cart = Cart.empty()
        assert await handler.handle(cart, 1, amount) is cart
        assert stock_repo.calls == []

    @pytest.mark.asyncio
    async def test_missing_product_raises_before_lookup(self):
        stock_repo = FakeStockRepository({1: 5})
        handler = UpdateCartAmountHandler(stock_repo)
        with pytest.raises(EntityNotFoundError):
            await handler.handle(Cart.empty(), 1, 2)
        assert stock_repo.calls == []


class TestUpdateProductAmountHappyPath:

    @pytest.mark.asyncio
    async def test_sets_absolute_amount(self):
        manager, storage, notifier, _ = _setup(amount=3)

        await manager.update_product_amount(1, 1)

        assert [(i.product_id, i.amount) for i in manager.cart] == [(1, 1)]
        assert notifier.messages == []
        assert len(storage.saves) == 1

    @pytest.mark.asyncio
    async def test_amount_equal_to_stock_allowed(self):
        manager, _, notifier, _ = _setup(amount=1, stock={1: 5})

        await manager.update_product_amount(1, 5)

        assert manager.cart.get(1).amount == 5
        assert notifier.messages == []

    @pytest.mark.asyncio
    async def test_payload_kept_on_update(self):
        manager, _, _, _ = _setup()
        await manager.update_product_amount(1, 2)
        assert manager.cart.get(1).payload == {"title": "Tênis"}

    @pytest.mark.asyncio
    async def test_same_amount_does_not_write(self):
        manager, storage, notifier, _ = _setup(amount=3)

        await manager.update_product_amount(1, 3)

        assert manager.cart.get(1).amount == 3
        assert notifier.messages == []
        assert storage.saves == []


class TestUpdateProductAmountNoOps:

    @pytest.mark.parametrize("amount", [0, -1, -100, 0.0, -1.0, -0.5])
    @pytest.mark.asyncio
    async def test_non_positive_amount_is_ignored(self, amount):
        manager, storage, notifier, stock_repo = _setup(amount=3)
        before = manager.cart

        await manager.update_product_amount(1, amount)

        assert manager.cart is before
        assert notifier.messages == []
        assert storage.saves == []
        assert stock_repo.calls == []

    @pytest.mark.asyncio
    async def test_non_positive_amount_for_missing_product_is_ignored(self):
        manager, _, notifier, _ = _setup()
        await manager.update_product_amount(99, 0)
        assert notifier.messages == []


class TestUpdateProductAmountFailures:

    @pytest.mark.asyncio
    async def test_over_stock(self):
        manager, storage, notifier, _ = _setup(amount=3, stock={1: 4})

        await manager.update_product_amount(1, 5)

        assert manager.cart.get(1).amount == 3
        assert notifier.messages == [messages.OUT_OF_STOCK]
        assert storage.saves == []

    @pytest.mark.asyncio
    async def test_missing_product(self):
        manager, storage, notifier, stock_repo = _setup()

        await manager.update_product_amount(2, 1)

        assert notifier.messages == [messages.UPDATE_FAILED]
        assert storage.saves == []
        assert stock_repo.calls == []

    @pytest.mark.asyncio
    async def test_stock_lookup_failure(self):
        manager, storage, notifier, _ = _setup(stock={})

        await manager.update_product_amount(1, 2)

        assert manager.cart.get(1).amount == 3
        assert notifier.messages == [messages.UPDATE_FAILED]
        assert storage.saves == []

    @pytest.mark.parametrize("amount", ["2", 2.0, 1.5, None, False])
    @pytest.mark.asyncio
    async def test_malformed_amount(self, amount):
        manager, storage, notifier, _ = _setup()

        await manager.update_product_amount(1, amount)

        assert manager.cart.get(1).amount == 3
        assert notifier.messages == [messages.UPDATE_FAILED]
        assert storage.saves == []
