"""Tests for the toast Notifier"""
from core.logging import get_logger, sanitize_string_for_logging
from core.services.notifications import Notifier, get_notifier


def test_drain_returns_messages_in_order():
    notifier = Notifier()
    notifier("first")
    notifier.push("second")

    assert notifier.drain() == ["first", "second"]
    assert notifier.drain() == []


def test_singleton():
    assert get_notifier() is get_notifier()


def test_log_sanitizing():
    assert sanitize_string_for_logging("line\nbreak") == "line\\nbreak"
    assert sanitize_string_for_logging(None) == "N/A"
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."


def test_get_logger_is_cached():
    assert get_logger("core.cart") is get_logger("core.cart")
    assert sanitize_string_for_logging("a\tb\x00") == "a\\tb"
