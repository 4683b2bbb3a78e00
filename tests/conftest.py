"""Shared pytest fixtures for the Gfycat client tests.

Fixture summary
---------------
clean_settings   — (autouse) strips ``GFYCAT_*`` variables and clears the
                   cached settings so every test sees the defaults.
item_payload     — The recorded ``GET /v1/gfycats/{gfyId}`` body as a dict.
user_payload     — The recorded ``GET /v1/users/{userId}`` body as a dict.
not_found_payload — The recorded 404 error body as a dict.

No test in this suite touches the network: HTTP is mocked with respx.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from gfycat_client.config.settings import get_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "api_responses" / "gfycat"


def load_fixture(name: str) -> Any:
    """Load a recorded API response from the fixtures directory."""
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate every test from the caller's environment and any ``.env`` file."""
    for key in list(os.environ):
        if key.startswith("GFYCAT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def item_payload() -> dict[str, Any]:
    return load_fixture("item_response.json")


@pytest.fixture
def user_payload() -> dict[str, Any]:
    return load_fixture("user_response.json")


@pytest.fixture
def not_found_payload() -> dict[str, Any]:
    return load_fixture("not_found_response.json")
