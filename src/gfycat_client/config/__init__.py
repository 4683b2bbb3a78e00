"""Configuration package for the Gfycat client.

Re-exports the most commonly used configuration symbols so that callers can
write::

    from gfycat_client.config import get_settings, DEFAULT_API_DOMAIN
"""

from __future__ import annotations

from gfycat_client.config.endpoints import (
    DEFAULT_API_DOMAIN,
    DEFAULT_API_VERSION,
    ITEM_ENVELOPE_KEY,
    ITEM_RESOURCE,
    REQUEST_HEADERS,
    USER_ENVELOPE_KEY,
    USER_RESOURCE,
)
from gfycat_client.config.settings import GfycatSettings, get_settings

__all__ = [
    # settings
    "GfycatSettings",
    "get_settings",
    # endpoints
    "DEFAULT_API_DOMAIN",
    "DEFAULT_API_VERSION",
    "ITEM_RESOURCE",
    "ITEM_ENVELOPE_KEY",
    "USER_RESOURCE",
    "USER_ENVELOPE_KEY",
    "REQUEST_HEADERS",
]
