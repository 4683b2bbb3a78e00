"""Decoded Gfycat records and their field codecs."""

from __future__ import annotations

from gfycat_client.models.enums import ContentSafety, PublicationState
from gfycat_client.models.errors import ErrorDetail
from gfycat_client.models.items import ContentItem, ContentVariant, UserSummary
from gfycat_client.models.users import PublicUser

__all__ = [
    "ContentItem",
    "ContentSafety",
    "ContentVariant",
    "ErrorDetail",
    "PublicUser",
    "PublicationState",
    "UserSummary",
]
