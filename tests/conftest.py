"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock

# Set test environment variables
os.environ.setdefault("CART_STORAGE", "memory")
os.environ.setdefault("CHECKOUT_REQUIRES_CONFIRMATION", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from core.cart import CartStore, CartStorage
from core.db import MemoryStore
from core.services.notifications import Notifier


@pytest.fixture
def memory_store():
    """Empty in-process key-value store"""
    return MemoryStore()


@pytest.fixture
def spy_store(memory_store):
    """Memory store wrapped so calls can be asserted"""
    return Mock(wraps=memory_store)


@pytest.fixture
def storage(spy_store):
    """Cart storage backed by the spied memory store"""
    return CartStorage(spy_store)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def store(storage, notifier):
    """Cart store with acknowledgement-only checkout"""
    return CartStore(storage=storage, notify=notifier, checkout_requires_confirmation=False)


@pytest.fixture
def confirming_store(storage, notifier):
    """Cart store whose checkout can be declined"""
    return CartStore(storage=storage, notify=notifier, checkout_requires_confirmation=True)


@pytest.fixture
def failing_client():
    """Key-value backend that rejects every write"""
    client = Mock()
    client.get.return_value = None
    client.set.side_effect = ConnectionError("quota exceeded")
    return client


@pytest.fixture
def sample_snapshot():
    """Stored cart as the browser shell would have written it"""
    return (
        '[{"id": 1, "name": "Wireless Headphones", "price": 79.99, "icon": "🎧", "quantity": 2},'
        ' {"id": 4, "name": "Wireless Mouse", "price": 29.99, "icon": "🖱️", "quantity": 1}]'
    )
