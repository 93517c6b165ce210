"""Application state: every long-lived component, wired once per process."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

import aiosqlite
import httpx

from plugindetails.cache import Cache
from plugindetails.config import Settings
from plugindetails.fetcher import ReleaseFetcher, build_http_client
from plugindetails.plugin_info import PluginDetails
from plugindetails.updater import UpdateChecker


@dataclass
class AppState:
    settings: Settings
    http_client: httpx.AsyncClient
    cache: Cache
    fetcher: ReleaseFetcher
    checker: UpdateChecker
    details: PluginDetails


@asynccontextmanager
async def open_app_state(settings: Settings) -> AsyncIterator[AppState]:
    """Open the cache database and HTTP client, and close both on exit."""
    db_path = settings.cache.db_path
    if db_path != ":memory:":
        db_path = str(Path(db_path).expanduser())
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as db, build_http_client(settings.github) as client:
        cache = Cache(db)
        await cache.init_db()
        await cache.cleanup_expired(settings.cache.cleanup_grace_days)

        fetcher = ReleaseFetcher(client, settings.github)
        checker = UpdateChecker(cache, fetcher, settings.plugin, settings.github)
        yield AppState(
            settings=settings,
            http_client=client,
            cache=cache,
            fetcher=fetcher,
            checker=checker,
            details=PluginDetails(settings, checker),
        )
