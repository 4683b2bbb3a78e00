"""Error body sent with 4xx responses."""

from __future__ import annotations

from gfycat_client.models.base import GfycatModel, Str


class ErrorDetail(GfycatModel):
    """``{"errorMessage": "..."}``"""

    error_message: Str
