"""Typed async client for the Gfycat REST API.

Example::

    from gfycat_client import GfycatClient

    async with GfycatClient() as client:
        item = await client.get_item("enormousdescriptiveindri")
        print(item.title, item.nsfw)
"""

from __future__ import annotations

from gfycat_client.client import GfycatClient
from gfycat_client.core.exceptions import (
    ClientError,
    CodecError,
    ConnectError,
    GfycatError,
    InitError,
    InvalidStatusError,
    ParseError,
    ServerError,
    UnsupportedStatusError,
)
from gfycat_client.models import (
    ContentItem,
    ContentSafety,
    ContentVariant,
    ErrorDetail,
    PublicationState,
    PublicUser,
    UserSummary,
)

__version__ = "0.1.0"

__all__ = [
    "GfycatClient",
    # errors
    "GfycatError",
    "InitError",
    "ConnectError",
    "ParseError",
    "ClientError",
    "ServerError",
    "CodecError",
    "UnsupportedStatusError",
    "InvalidStatusError",
    # records
    "ContentItem",
    "ContentVariant",
    "UserSummary",
    "PublicUser",
    "ErrorDetail",
    "ContentSafety",
    "PublicationState",
]
