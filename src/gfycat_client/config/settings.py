"""Client settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.  Every
setting can be overridden through a ``GFYCAT_``-prefixed environment variable
or an optional ``.env`` file.

Usage::

    from gfycat_client.config.settings import get_settings

    settings = get_settings()
    domain = settings.api_domain
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gfycat_client.config.endpoints import DEFAULT_API_DOMAIN, DEFAULT_API_VERSION
from gfycat_client.core.logging_config import LogLevel


class GfycatSettings(BaseSettings):
    """Gfycat client configuration backed by environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GFYCAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Provider
    # ------------------------------------------------------------------

    api_domain: str = DEFAULT_API_DOMAIN
    """Host name of the API, without scheme (e.g. ``api.gfycat.com``)."""

    api_version: int = Field(default=DEFAULT_API_VERSION, ge=1)
    """API version, rendered as the ``v<version>`` path segment."""

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    timeout_seconds: float = Field(default=30.0, gt=0)
    """Timeout applied to a transport built by the client itself.  Ignored
    when an ``httpx.AsyncClient`` is injected."""

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    log_level: LogLevel = "INFO"
    """Logging verbosity.  One of: DEBUG, INFO, WARNING, ERROR, CRITICAL
    (case-insensitive)."""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_case_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> GfycatSettings:
    """Return the cached settings singleton.

    In tests, call ``get_settings.cache_clear()`` after patching environment
    variables.
    """
    return GfycatSettings()
