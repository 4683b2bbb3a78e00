"""Gfycat API client and response interpretation."""

from __future__ import annotations

from gfycat_client.client.client import GfycatClient
from gfycat_client.client.interpreter import StatusClass, classify_status, interpret_response

__all__ = [
    "GfycatClient",
    "StatusClass",
    "classify_status",
    "interpret_response",
]
