"""Activation and deactivation hooks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from plugindetails.config import PluginSettings
    from plugindetails.protocols import CacheProtocol
    from plugindetails.updater import UpdateChecker

log = structlog.get_logger()

ACTIVATION_NOTICE_TTL_SECONDS = 30


def _activation_key(plugin: PluginSettings) -> str:
    return f"{plugin.slug}_activated"


async def activate(cache: CacheProtocol, plugin: PluginSettings) -> None:
    """Flag a fresh activation so the next admin page shows a one-time notice."""
    await cache.set(_activation_key(plugin), "1", ACTIVATION_NOTICE_TTL_SECONDS)
    log.info("plugin_activated", slug=plugin.slug)


async def activation_notice(cache: CacheProtocol, plugin: PluginSettings) -> str | None:
    """Return the success notice once after activation, then ``None``."""
    key = _activation_key(plugin)
    if await cache.get(key) is None:
        return None
    await cache.delete(key)
    return f"{plugin.display_name} has been activated successfully!"


async def deactivate(checker: UpdateChecker, plugin: PluginSettings) -> None:
    await checker.clear()
    log.info("plugin_deactivated", slug=plugin.slug)
