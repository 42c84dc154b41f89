"""Toast notifications emitted by the cart store."""
from collections import deque
from typing import List, Optional

from core.logging import get_logger, sanitize_string_for_logging

logger = get_logger(__name__)


class Notifier:
    """
    Collects user-facing notifications.

    Messages are plain strings with no severity. The view drains them after
    each operation and shows them as toasts.
    """

    def __init__(self):
        self._pending: deque[str] = deque()

    def __call__(self, message: str) -> None:
        self.push(message)

    def push(self, message: str) -> None:
        logger.info(f"Notify: {sanitize_string_for_logging(message, max_length=80)}")
        self._pending.append(message)

    def drain(self) -> List[str]:
        """Return and forget all pending messages, oldest first."""
        messages = list(self._pending)
        self._pending.clear()
        return messages


# Singleton instance
_notifier: Optional[Notifier] = None


def get_notifier() -> Notifier:
    """Get Notifier singleton."""
    global _notifier
    if _notifier is None:
        _notifier = Notifier()
    return _notifier
