"""Integration test fixtures.

Provides a fully wired AppState with in-memory SQLite and a real httpx
client; tests mock GitHub with respx. Plugin files come from
tests/conftest.py (plugin_dir, settings).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from plugindetails.state import AppState, open_app_state

if TYPE_CHECKING:
    from plugindetails.config import Settings

RELEASE_URL = "https://api.github.com/repos/guilamu/mini-plugin/releases/latest"


@pytest.fixture()
async def app_state(settings: Settings) -> AppState:
    async with open_app_state(settings) as state:
        yield state


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI configures structlog against the captured stderr; undo it after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def release_url() -> str:
    return RELEASE_URL
