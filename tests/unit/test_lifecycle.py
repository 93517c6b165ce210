"""Unit tests for plugindetails.lifecycle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plugindetails.config import GithubSettings, PluginSettings
from plugindetails.lifecycle import activate, activation_notice, deactivate
from plugindetails.updater import UpdateChecker

if TYPE_CHECKING:
    from plugindetails.cache import Cache


class TestActivationNotice:
    async def test_no_notice_without_activation(self, cache: Cache) -> None:
        assert await activation_notice(cache, PluginSettings()) is None

    async def test_notice_shown_once(self, cache: Cache) -> None:
        plugin = PluginSettings()
        await activate(cache, plugin)

        assert await activation_notice(cache, plugin) == (
            "Mini Plugin has been activated successfully!"
        )
        assert await activation_notice(cache, plugin) is None

    async def test_flag_expires_after_thirty_seconds(self, cache: Cache) -> None:
        await activate(cache, PluginSettings())
        entry = await cache.get_entry("miniplugin_activated")
        assert entry is not None
        assert (entry.expires_at - entry.fetched_at).total_seconds() == 30


class TestDeactivate:
    async def test_clears_cached_version(self, cache: Cache, release_source_factory) -> None:
        plugin = PluginSettings()
        source = release_source_factory(version="2.0")
        checker = UpdateChecker(cache, source, plugin, GithubSettings())
        await checker.get_remote_version()

        await deactivate(checker, plugin)

        assert await cache.get("miniplugin_github_version") is None
