"""Exception taxonomy for the Gfycat client.

Every classified lookup outcome that is not a success is raised as one of the
exceptions below.  They all subclass ``GfycatError`` directly, so the taxonomy
is flat while callers can still catch the whole family with a single
``except`` clause::

    GfycatError
    ├── InitError         (cause)
    ├── ConnectError      (cause, url)
    ├── ParseError        (cause, content_type)
    ├── ClientError       (status_code, detail)
    ├── ServerError       (status_code)
    └── CodecError        (also a ValueError)

``UnsupportedStatusError`` and ``InvalidStatusError`` are deliberately *not*
part of the family: they signal a provider or HTTP-stack contract violation
and abort the lookup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gfycat_client.models.errors import ErrorDetail


class GfycatError(Exception):
    """Base class for all classified Gfycat client errors."""


class InitError(GfycatError):
    """Raised when the HTTP transport could not be constructed.

    Args:
        cause: The exception raised while building the transport.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Could not initialise HTTP transport: {cause}")
        self.cause = cause


class ConnectError(GfycatError):
    """Raised when the HTTP exchange could not be completed.

    Covers DNS, TCP, TLS and transport-level timeouts.  No retry is attempted.

    Args:
        cause: The transport exception (an ``httpx.RequestError``).
        url: The request URL, when known.
    """

    def __init__(self, cause: BaseException, url: str | None = None) -> None:
        msg = f"Request failed: {cause}"
        if url:
            msg = f"Request to {url} failed: {cause}"
        super().__init__(msg)
        self.cause = cause
        self.url = url


class ParseError(GfycatError):
    """Raised when a 2xx or 4xx body does not decode into the expected shape.

    Args:
        cause: The underlying decode failure (usually a pydantic
            ``ValidationError`` wrapping a ``CodecError``).
        content_type: The response's declared ``Content-Type``, if any.
    """

    def __init__(self, cause: BaseException, content_type: str | None = None) -> None:
        super().__init__(
            f"Unparsable response body (content-type: {content_type or 'unknown'}): {cause}"
        )
        self.cause = cause
        self.content_type = content_type


class ClientError(GfycatError):
    """Raised for a 4xx response whose error body decoded successfully.

    Args:
        status_code: The HTTP status code (400-499).
        detail: The decoded provider error body.
    """

    def __init__(self, status_code: int, detail: ErrorDetail) -> None:
        super().__init__(f"HTTP {status_code}: {detail.error_message}")
        self.status_code = status_code
        self.detail = detail

    @property
    def message(self) -> str:
        """The provider-supplied error message."""
        return self.detail.error_message


class ServerError(GfycatError):
    """Raised for any 5xx response.  The body is never read.

    Args:
        status_code: The HTTP status code (500-599).
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP {status_code}: server error")
        self.status_code = status_code


class CodecError(GfycatError, ValueError):
    """Raised by a field codec when a wire value cannot be decoded.

    Subclasses ``ValueError`` so that pydantic reports it as a validation
    error; it reaches callers only wrapped inside a ``ParseError``.
    """


# ---------------------------------------------------------------------------
# Contract violations (not classified outcomes)
# ---------------------------------------------------------------------------


class UnsupportedStatusError(NotImplementedError):
    """Raised for 1xx and 3xx responses, which no endpoint is known to send.

    Args:
        status_code: The offending HTTP status code.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unsupported HTTP status code: {status_code}")
        self.status_code = status_code


class InvalidStatusError(RuntimeError):
    """Raised when a status code falls outside the 100-599 range.

    Args:
        status_code: The offending HTTP status code.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Invalid HTTP status code: {status_code}")
        self.status_code = status_code
