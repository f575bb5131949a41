"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

from vidresolve.infrastructure.site.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CATALOG_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "vidresolve",
    "environment": "dev",
    "site": {
        "base_url": DEFAULT_BASE_URL,
        "catalog_path": DEFAULT_CATALOG_PATH,
    },
    "http": {
        "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
        "user_agent": DEFAULT_USER_AGENT,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
