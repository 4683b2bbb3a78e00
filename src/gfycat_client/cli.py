"""Command-line lookups against the Gfycat API.

Usage::

    python -m gfycat_client item enormousdescriptiveindri
    python -m gfycat_client user gifmachina --log-level DEBUG

The decoded record is printed to stdout as indented JSON under the provider's
field names.  Logs go to stderr.

Exit codes:
    0 — Success.
    1 — The lookup failed with a classified error.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

from gfycat_client.client import GfycatClient
from gfycat_client.config.settings import get_settings
from gfycat_client.core.exceptions import GfycatError
from gfycat_client.core.logging_config import LOG_LEVELS, configure_logging
from gfycat_client.models.base import GfycatModel


async def _run(kind: str, key: str, api_domain: str | None, api_version: int | None) -> GfycatModel:
    async with GfycatClient(api_domain=api_domain, api_version=api_version) as client:
        if kind == "item":
            return await client.get_item(key)
        return await client.get_user(key)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="gfycat-client",
        description="Look up a Gfycat item or user and print it as JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("kind", choices=("item", "user"), help="What to look up.")
    parser.add_argument("key", help="gfyId for an item, user id for a user.")
    parser.add_argument(
        "--domain",
        default=None,
        help=f"API host (default: {settings.api_domain}).",
    )
    parser.add_argument(
        "--api-version",
        type=int,
        default=None,
        help=f"API version (default: {settings.api_version}).",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging verbosity (default: %(default)s).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``gfycat-client`` command."""
    args = _parse_args(argv)
    configure_logging(args.log_level)
    try:
        record = asyncio.run(_run(args.kind, args.key, args.domain, args.api_version))
    except GfycatError as exc:
        print(f"gfycat-client: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(record.to_wire(), indent=2, ensure_ascii=False))
    return 0
