"""Envelope unwrapping for successful responses.

Successful item lookups wrap the payload in a single-key object::

    {"gfyItem": {...}}

:func:`unwrap` is the one rule used for every endpoint: decode the body as
``{<key>: <payload model>}`` and return the inner payload.  Endpoints only
choose the payload model and the key.  A ``key`` of ``None`` means the payload
is the body itself.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, create_model

M = TypeVar("M", bound=BaseModel)


@lru_cache(maxsize=None)
def envelope_model(payload_model: type[BaseModel], key: str) -> type[BaseModel]:
    """Return (and cache) the envelope model wrapping ``payload_model`` under ``key``."""
    return create_model(
        f"{payload_model.__name__}Envelope",
        __config__=ConfigDict(frozen=True, extra="ignore"),
        payload=(payload_model, Field(alias=key)),
    )


@lru_cache(maxsize=None)
def _adapter(payload_model: type[BaseModel], key: str | None) -> TypeAdapter[Any]:
    if key is None:
        return TypeAdapter(payload_model)
    return TypeAdapter(envelope_model(payload_model, key))


def unwrap(body: bytes | str, payload_model: type[M], key: str | None) -> M:
    """Decode a JSON body and return the payload wrapped under ``key``.

    Args:
        body: Raw JSON response body.
        payload_model: Model class of the payload.
        key: Envelope key, or ``None`` if the body is not wrapped.

    Returns:
        The decoded payload.

    Raises:
        pydantic.ValidationError: If the body is not valid JSON, the key is
            missing, or the payload does not validate.
    """
    decoded = _adapter(payload_model, key).validate_json(body)
    if key is None:
        return decoded
    return decoded.payload
