"""
Logging setup for TechShop.

The root logger gets one stdout handler on import. LOG_LEVEL sets the
level; PRODUCTION=1 drops timestamps because the host adds its own.

    from core.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_PRODUCTION = "%(levelname)s - %(name)s - %(message)s"


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    production = os.environ.get("PRODUCTION") == "1"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_PRODUCTION if production else LOG_FORMAT))
    root.addHandler(handler)

    # upstash_redis logs every REST request through httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """Escape line breaks and truncate user-visible text before it is logged."""
    if not value:
        return "N/A"
    safe_value = (
        str(value)
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."
