"""Gfycat API endpoints and protocol constants.

All lookups are ``GET https://{domain}/v{version}/{resource}``.  Resource
templates below are filled with a URL-quoted path parameter before use.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_API_DOMAIN: str = "api.gfycat.com"
"""Production API host."""

DEFAULT_API_VERSION: int = 1
"""Current API version."""

API_URL_TEMPLATE: str = "https://{domain}/v{version}/{resource}"
"""Absolute URL of a resource for a given domain and version."""

# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

ITEM_RESOURCE: str = "gfycats/{gfy_id}"
"""Single content item lookup."""

ITEM_ENVELOPE_KEY: str = "gfyItem"
"""Key wrapping the item payload in a successful response."""

USER_RESOURCE: str = "users/{user_id}"
"""Public user profile lookup."""

USER_ENVELOPE_KEY: str | None = None
"""The user endpoint returns the profile object unwrapped."""

# ---------------------------------------------------------------------------
# Request headers
# ---------------------------------------------------------------------------

REQUEST_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Accept-Charset": "utf-8",
}
"""Headers sent with every lookup."""
