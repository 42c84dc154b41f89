# Services Module
from .notifications import Notifier, get_notifier

__all__ = ["Notifier", "get_notifier"]
