"""
Tests for CartStorage and the key-value backends
"""

import json
import pytest
from decimal import Decimal
from unittest.mock import Mock, patch

from core.cart import Cart, CartItem, CartStorage
from core.db import MemoryStore, StorageKeys


class TestMemoryStore:
    """Tests for the in-process key-value store."""

    def test_get_missing_key(self):
        assert MemoryStore().get("cart") is None

    def test_set_overwrites(self):
        kv = MemoryStore()
        kv.set("cart", "a")
        kv.set("cart", "b")

        assert kv.get("cart") == "b"

    def test_initial_contents(self):
        kv = MemoryStore({"cart": "[]"})

        assert kv.get("cart") == "[]"


class TestCartStorage:
    """Tests for save/load round trips."""

    def test_load_absent_key_is_empty(self, storage):
        cart = storage.load()

        assert cart.is_empty

    def test_save_writes_fixed_key(self, storage, memory_store):
        storage.save(Cart(items=[CartItem(2, "Smart Watch", Decimal("199.99"), "⌚", 1)]))

        assert StorageKeys.CART == "cart"
        assert json.loads(memory_store.get("cart")) == [
            {"id": 2, "name": "Smart Watch", "price": 199.99, "icon": "⌚", "quantity": 1}
        ]

    def test_round_trip(self, storage):
        cart = Cart(items=[
            CartItem(9, "Mechanical Keyboard", Decimal("129.99"), "⌨️", 3),
            CartItem(1, "Wireless Headphones", Decimal("79.99"), "🎧", 1),
            CartItem(6, "Portable Charger", Decimal("34.99"), "🔋", 12),
        ])

        storage.save(cart)
        loaded = storage.load()

        assert loaded == cart

    def test_load_existing_snapshot(self, memory_store, sample_snapshot):
        memory_store.set("cart", sample_snapshot)

        cart = CartStorage(memory_store).load()

        assert [item.product_id for item in cart.items] == [1, 4]
        assert cart.item_count == 3
        assert cart.subtotal == Decimal("189.97")

    @pytest.mark.parametrize("raw", [
        "not json",
        "{}",
        '"cart"',
        "[1, 2, 3]",
        '[{"id": 1}]',
        '[{"id": 1, "name": "X", "price": 1, "icon": "x", "quantity": 0}]',
        '[{"id": 1, "name": "X", "price": null, "icon": "x", "quantity": 1}]',
        '[{"id": 1, "name": "X", "price": "abc", "icon": "x", "quantity": 2}]',
        '[{"id": 1, "name": "X", "price": -50, "icon": "x", "quantity": 1}]',
        '[{"id": 1, "name": "X", "price": NaN, "icon": "x", "quantity": 1}]',
        '[{"id": 1, "name": "X", "price": Infinity, "icon": "x", "quantity": 1}]',
        '[{"id": 1, "name": "X", "price": "-Infinity", "icon": "x", "quantity": 1}]',
        '[{"id": 1, "name": 5, "price": 1, "icon": "x", "quantity": 1}]',
        '[{"id": 1, "name": "X", "price": 1, "icon": null, "quantity": 1}]',
    ])
    def test_malformed_snapshot_loads_empty(self, memory_store, raw):
        memory_store.set("cart", raw)

        with patch("core.cart.storage.logger") as mock_logger:
            cart = CartStorage(memory_store).load()

        assert cart.is_empty
        mock_logger.warning.assert_called_once()

    def test_save_failure_returns_false(self, failing_client):
        with patch("core.cart.storage.logger") as mock_logger:
            ok = CartStorage(failing_client).save(Cart())

        assert ok is False
        mock_logger.error.assert_called_once()

    def test_read_failure_loads_empty(self):
        client = Mock()
        client.get.side_effect = ConnectionError("unreachable")

        cart = CartStorage(client).load()

        assert cart.is_empty

    def test_lazy_client_from_configuration(self, memory_store):
        with patch("core.cart.storage.get_storage_client", return_value=memory_store) as factory:
            storage = CartStorage()
            storage.save(Cart())

        factory.assert_called_once()
        assert memory_store.get("cart") == "[]"


class TestStorageClient:
    """Tests for backend selection."""

    def test_redis_requires_credentials(self):
        import core.db as db

        with patch.object(db, "UPSTASH_REDIS_REST_URL", ""), \
                patch.object(db, "UPSTASH_REDIS_REST_TOKEN", ""), \
                patch.object(db, "_redis_client", None):
            with pytest.raises(ValueError):
                db.get_redis_sync()

    def test_redis_backend_selected(self):
        import core.db as db

        fake_redis = Mock()
        with patch.object(db, "CART_STORAGE", "redis"), \
                patch.object(db, "_storage_client", None), \
                patch.object(db, "get_redis_sync", return_value=fake_redis):
            assert db.get_storage_client() is fake_redis

    def test_memory_backend_default(self):
        import core.db as db

        with patch.object(db, "CART_STORAGE", "memory"), patch.object(db, "_storage_client", None):
            assert isinstance(db.get_storage_client(), MemoryStore)
