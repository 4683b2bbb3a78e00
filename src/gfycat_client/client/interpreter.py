"""Response interpretation: turn a completed HTTP exchange into a result.

Every lookup funnels its ``httpx.Response`` through :func:`interpret_response`,
which classifies the status code and either returns the decoded payload or
raises a classified error:

=============  ==========================================================
Status class   Outcome
=============  ==========================================================
1xx            ``UnsupportedStatusError`` (aborts the lookup)
2xx            payload unwrapped from the envelope, or ``ParseError``
3xx            ``UnsupportedStatusError`` (aborts the lookup)
4xx            ``ClientError`` with the decoded ``ErrorDetail``, or
               ``ParseError`` when the error body itself is unparsable
5xx            ``ServerError``; the body is never read
other          ``InvalidStatusError`` (aborts the lookup)
=============  ==========================================================
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from gfycat_client.core.exceptions import (
    ClientError,
    InvalidStatusError,
    ParseError,
    ServerError,
    UnsupportedStatusError,
)
from gfycat_client.models.envelope import unwrap
from gfycat_client.models.errors import ErrorDetail

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


class StatusClass(Enum):
    """The five HTTP status classes, keyed by the status code's first digit."""

    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5


def classify_status(status_code: int) -> StatusClass:
    """Return the class of ``status_code``.

    Raises:
        InvalidStatusError: If ``status_code`` is outside 100-599.
    """
    if not 100 <= status_code <= 599:
        raise InvalidStatusError(status_code)
    return StatusClass(status_code // 100)


def interpret_response(
    response: httpx.Response,
    payload_model: type[M],
    envelope_key: str | None,
) -> M:
    """Classify ``response`` and decode its payload.

    Args:
        response: A completed response whose body has been read.
        payload_model: Model the success payload decodes into.
        envelope_key: Key wrapping the payload, or ``None`` for a bare body.

    Returns:
        The decoded payload on 2xx.

    Raises:
        ClientError: On 4xx with a decodable error body.
        ServerError: On 5xx.
        ParseError: When a 2xx or 4xx body does not decode.
        UnsupportedStatusError: On 1xx or 3xx.
        InvalidStatusError: On a status code outside 100-599.
    """
    status_code = response.status_code
    status_class = classify_status(status_code)

    # 1xx
    if status_class is StatusClass.INFORMATIONAL:
        raise UnsupportedStatusError(status_code)

    # 2xx
    if status_class is StatusClass.SUCCESS:
        payload = _decode_body(
            response, lambda body: unwrap(body, payload_model, envelope_key)
        )
        logger.debug(
            "gfycat: decoded %s from HTTP %d",
            payload_model.__name__,
            status_code,
        )
        return payload

    # 3xx
    if status_class is StatusClass.REDIRECTION:
        raise UnsupportedStatusError(status_code)

    # 4xx
    if status_class is StatusClass.CLIENT_ERROR:
        detail = _decode_body(response, lambda body: unwrap(body, ErrorDetail, None))
        logger.warning("gfycat: HTTP %d: %s", status_code, detail.error_message)
        raise ClientError(status_code, detail)

    # 5xx
    logger.warning("gfycat: HTTP %d server error", status_code)
    raise ServerError(status_code)


def _decode_body(response: httpx.Response, decode: Callable[[bytes], T]) -> T:
    """Run ``decode`` on the response body, wrapping failures in ``ParseError``."""
    content_type = response.headers.get("content-type")
    try:
        return decode(response.content)
    except ValidationError as exc:
        logger.warning(
            "gfycat: unparsable HTTP %d body (content-type=%s): %d error(s)",
            response.status_code,
            content_type,
            exc.error_count(),
        )
        raise ParseError(exc, content_type) from exc
