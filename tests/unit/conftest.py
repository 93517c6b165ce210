"""Unit-specific fixtures (no I/O beyond in-memory SQLite and tmp files)."""

from __future__ import annotations

import aiosqlite
import pytest

from plugindetails.cache import Cache


@pytest.fixture()
async def cache():
    """In-memory SQLite cache for unit tests."""
    async with aiosqlite.connect(":memory:") as db:
        c = Cache(db)
        await c.init_db()
        yield c


class FakeReleaseSource:
    """Release source returning a fixed version, or raising a fixed error."""

    def __init__(self, version: str | None = None, error: Exception | None = None) -> None:
        self.version = version
        self.error = error
        self.calls = 0

    async def fetch_latest_version(self, owner: str, repo: str) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        assert self.version is not None
        return self.version


@pytest.fixture()
def release_source_factory():
    """Build a FakeReleaseSource: ``release_source_factory(version=..., error=...)``."""
    return FakeReleaseSource
