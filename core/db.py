"""
Storage Module - Key-value backends for cart persistence

Provides:
- Sync Upstash Redis client (durable storage)
- In-process memory store (local development and tests)

Both expose the same get/set surface so the cart storage
adapter does not care which one it talks to.
"""

import os
from typing import Optional, Protocol

from upstash_redis import Redis

from core.errors import ERROR_STORAGE_NOT_CONFIGURED
from core.logging import get_logger

logger = get_logger(__name__)


# Backend selection: "memory" or "redis"
CART_STORAGE = os.environ.get("CART_STORAGE", "memory").lower()

# Upstash Redis - standard env var names per docs
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")


class KeyValueStore(Protocol):
    """Minimal key-value surface shared by Redis and the memory store."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> object: ...


class MemoryStore:
    """Dict-backed key-value store. Contents are lost on restart."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> bool:
        self._data[key] = value
        return True


# Singleton instances
_redis_client: Optional[Redis] = None
_storage_client: Optional[KeyValueStore] = None


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Uses standard Upstash env var names:
    - UPSTASH_REDIS_REST_URL
    - UPSTASH_REDIS_REST_TOKEN
    """
    global _redis_client

    if _redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError(ERROR_STORAGE_NOT_CONFIGURED)
        _redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _redis_client


def get_storage_client() -> KeyValueStore:
    """Get the configured key-value backend (singleton)."""
    global _storage_client

    if _storage_client is None:
        if CART_STORAGE == "redis":
            _storage_client = get_redis_sync()
            logger.info("Cart storage: Upstash Redis")
        else:
            if CART_STORAGE != "memory":
                logger.warning(f"Unknown CART_STORAGE={CART_STORAGE!r}, falling back to memory")
            _storage_client = MemoryStore()
            logger.info("Cart storage: in-memory (cart will not survive restarts)")

    return _storage_client


class StorageKeys:
    """Keys used in the key-value store."""

    # Single-visitor demo: one cart under a fixed key
    CART = "cart"
