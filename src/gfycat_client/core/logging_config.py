"""Structured JSON logging configuration using structlog.

Call ``configure_logging()`` once at program startup (the CLI does this).
Library modules log through the stdlib API, which is routed through
structlog's ``ProcessorFormatter``::

    import logging
    logger = logging.getLogger(__name__)
    logger.info("gfycat: lookup ok", extra={"status_code": 200})

A ``lookup_id`` context variable is set by ``GfycatClient`` for the duration
of each lookup and merged into every log record emitted while it is active,
so concurrent lookups can be told apart in the output.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Literal, get_args

import structlog
from structlog.types import EventDict, WrappedLogger

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


# ---------------------------------------------------------------------------
# Context variable — set by the client per lookup, read by the log processor
# ---------------------------------------------------------------------------

lookup_id_var: ContextVar[str | None] = ContextVar("lookup_id", default=None)
"""Per-lookup correlation ID.

Usage::

    from gfycat_client.core.logging_config import lookup_id_var
    token = lookup_id_var.set(uuid.uuid4().hex)
    try:
        ...
    finally:
        lookup_id_var.reset(token)
"""


# ---------------------------------------------------------------------------
# Custom processors
# ---------------------------------------------------------------------------


def _inject_lookup_id(
    logger: WrappedLogger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    """Inject the current lookup ID into the event dict if one is active."""
    lid = lookup_id_var.get()
    if lid is not None and "lookup_id" not in event_dict:
        event_dict["lookup_id"] = lid
    return event_dict


# ---------------------------------------------------------------------------
# Public configuration entry-point
# ---------------------------------------------------------------------------


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and the stdlib root logger.

    At ``"DEBUG"`` a coloured ``ConsoleRenderer`` is used; at every other
    level records are rendered as newline-delimited JSON with ``timestamp``,
    ``level``, ``logger``, ``event`` and (inside a lookup) ``lookup_id``.

    Calling this more than once replaces the previous configuration without
    duplicating handlers.

    Args:
        log_level: One of ``"DEBUG"``, ``"INFO"``, ``"WARNING"``,
            ``"ERROR"``, ``"CRITICAL"``.  Case-insensitive.

    Raises:
        ValueError: If *log_level* is not one of the names above.
    """
    level_upper = log_level.upper()
    if level_upper not in LOG_LEVELS:
        raise ValueError(
            f"unknown log level {log_level!r} (expected one of {', '.join(LOG_LEVELS)})"
        )
    numeric_level = getattr(logging, level_upper)
    is_development = level_upper == "DEBUG"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _inject_lookup_id,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_development:
        final_renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=True,
        )
    else:
        final_renderer = structlog.processors.JSONRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final_renderer,
        ],
    )

    # stderr keeps stdout free for the CLI's JSON output.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    if not is_development:
        for noisy_logger in ("httpx", "httpcore"):
            logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
