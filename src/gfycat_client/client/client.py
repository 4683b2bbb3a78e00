"""Async Gfycat API client.

Two read-only lookups are supported:

- :meth:`GfycatClient.get_item` — ``GET /v{version}/gfycats/{gfyId}``,
  payload wrapped as ``{"gfyItem": {...}}``.
- :meth:`GfycatClient.get_user` — ``GET /v{version}/users/{userId}``,
  payload returned unwrapped.

Both share :meth:`GfycatClient._lookup`: build the URL, send a GET through
the ``httpx.AsyncClient`` transport and hand the response to
:func:`~gfycat_client.client.interpreter.interpret_response`.

The client holds only immutable configuration and the transport handle, so
one instance can serve any number of concurrent lookups.  Nothing is retried;
timeouts and cancellation belong to the transport and the caller.

Usage::

    async with GfycatClient() as client:
        item = await client.get_item("enormousdescriptiveindri")
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from gfycat_client.client.interpreter import interpret_response
from gfycat_client.config.endpoints import (
    API_URL_TEMPLATE,
    DEFAULT_API_DOMAIN,
    DEFAULT_API_VERSION,
    ITEM_ENVELOPE_KEY,
    ITEM_RESOURCE,
    REQUEST_HEADERS,
    USER_ENVELOPE_KEY,
    USER_RESOURCE,
)
from gfycat_client.config.settings import GfycatSettings, get_settings
from gfycat_client.core.exceptions import ConnectError, InitError
from gfycat_client.core.logging_config import lookup_id_var
from gfycat_client.models.items import ContentItem
from gfycat_client.models.users import PublicUser

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class GfycatClient:
    """Typed client for the Gfycat REST API.

    Args:
        api_domain: API host.  Defaults to ``settings.api_domain``.
        api_version: API version.  Defaults to ``settings.api_version``.
        http_client: Optional injected ``httpx.AsyncClient``.  An injected
            client is never closed by this object.
        settings: Optional settings; :func:`get_settings` is used when omitted.

    Raises:
        InitError: If no ``http_client`` is given and the default transport
            cannot be built.
    """

    def __init__(
        self,
        api_domain: str | None = None,
        api_version: int | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: GfycatSettings | None = None,
    ) -> None:
        settings = settings if settings is not None else get_settings()
        self._api_domain = api_domain if api_domain is not None else settings.api_domain
        self._api_version = api_version if api_version is not None else settings.api_version
        if http_client is None:
            self._http_client = self.default_http_client(timeout=settings.timeout_seconds)
            self._owns_http_client = True
        else:
            self._http_client = http_client
            self._owns_http_client = False

    # ------------------------------------------------------------------
    # Defaults
    # ------------------------------------------------------------------

    @staticmethod
    def default_http_client(**kwargs: Any) -> httpx.AsyncClient:
        """Build the default transport.

        Keyword arguments are passed through to ``httpx.AsyncClient``.

        Raises:
            InitError: If the transport cannot be constructed (for example an
                unreadable CA bundle).
        """
        try:
            return httpx.AsyncClient(**kwargs)
        except (OSError, TypeError, ValueError) as exc:
            raise InitError(exc) from exc

    @staticmethod
    def default_api_domain() -> str:
        return DEFAULT_API_DOMAIN

    @staticmethod
    def default_api_version() -> int:
        return DEFAULT_API_VERSION

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def api_domain(self) -> str:
        return self._api_domain

    @property
    def api_version(self) -> int:
        return self._api_version

    def build_url(self, resource: str) -> str:
        """Return the absolute URL of ``resource`` (e.g. ``"gfycats/abc"``)."""
        return API_URL_TEMPLATE.format(
            domain=self._api_domain,
            version=self._api_version,
            resource=resource,
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    async def get_item(self, gfy_id: str) -> ContentItem:
        """Fetch a content item by its ``gfyId`` (or ``gfyName``).

        Raises:
            ClientError: On 4xx, e.g. 404 for an unknown id.
            ServerError: On 5xx.
            ParseError: When the body does not decode.
            ConnectError: When the exchange cannot be completed.
        """
        resource = ITEM_RESOURCE.format(gfy_id=quote(gfy_id, safe=""))
        return await self._lookup(resource, ContentItem, ITEM_ENVELOPE_KEY)

    async def get_user(self, user_id: str) -> PublicUser:
        """Fetch a public user profile by user id.

        Raises:
            ClientError: On 4xx, e.g. 404 for an unknown user.
            ServerError: On 5xx.
            ParseError: When the body does not decode.
            ConnectError: When the exchange cannot be completed.
        """
        resource = USER_RESOURCE.format(user_id=quote(user_id, safe=""))
        return await self._lookup(resource, PublicUser, USER_ENVELOPE_KEY)

    async def _lookup(
        self,
        resource: str,
        payload_model: type[M],
        envelope_key: str | None,
    ) -> M:
        url = self.build_url(resource)
        token = lookup_id_var.set(uuid.uuid4().hex)
        try:
            logger.debug("gfycat: GET %s", url)
            try:
                response = await self._http_client.get(url, headers=REQUEST_HEADERS)
            except httpx.RequestError as exc:
                logger.warning("gfycat: connection error for %s: %s", url, exc)
                raise ConnectError(exc, url=url) from exc
            return interpret_response(response, payload_model, envelope_key)
        finally:
            lookup_id_var.reset(token)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> GfycatClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"GfycatClient(api_domain={self._api_domain!r}, api_version={self._api_version!r})"
