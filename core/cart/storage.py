"""Key-value persistence for the cart."""
import json
from decimal import InvalidOperation
from typing import Optional

from core.db import KeyValueStore, StorageKeys, get_storage_client
from core.logging import get_logger
from .models import Cart

logger = get_logger(__name__)


class CartStorage:
    """
    Saves and loads the cart snapshot under a single fixed key.

    Persistence is best-effort: write failures are logged and the in-memory
    cart stays authoritative for the rest of the session. Unreadable or
    malformed snapshots load as an empty cart.

    Calls are synchronous, including against Upstash; the async routers
    block on them instead of yielding mid-operation.
    """

    def __init__(self, client: Optional[KeyValueStore] = None, key: str = StorageKeys.CART):
        self._client = client
        self.key = key

    @property
    def client(self) -> KeyValueStore:
        """Get storage client (lazy initialization)."""
        if self._client is None:
            self._client = get_storage_client()
        return self._client

    def save(self, cart: Cart) -> bool:
        """Overwrite the stored snapshot. Returns False when the write failed."""
        try:
            self.client.set(self.key, json.dumps(cart.to_list(), ensure_ascii=False))
            return True
        except Exception as e:
            logger.error(f"Failed to save cart: {e}")
            return False

    def load(self) -> Cart:
        """Read the stored snapshot, or an empty cart if absent or unusable."""
        try:
            data = self.client.get(self.key)
        except Exception as e:
            logger.error(f"Failed to read cart: {e}")
            return Cart()

        if not data:
            return Cart()

        try:
            return Cart.from_list(json.loads(data))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, InvalidOperation) as e:
            # Corrupted data - start over with an empty cart
            logger.warning(f"Corrupted cart data under {self.key!r}, starting empty: {e}")
            return Cart()
