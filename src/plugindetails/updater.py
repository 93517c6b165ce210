"""Update checks against the plugin's GitHub releases.

The remote version is cached under ``<slug>_github_version`` for
``ttl_hours``. Cache reads happen before any network call and there is no
locking: two concurrent misses both fetch and both write the same value.

Nothing here raises. A failed lookup is logged and reported as "no update
information", and the next uncached call tries again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from plugindetails.errors import PluginDetailsError
from plugindetails.models.plugin import UpdateOffer, UpdateTransient
from plugindetails.versioning import is_newer

if TYPE_CHECKING:
    from plugindetails.config import GithubSettings, PluginSettings
    from plugindetails.protocols import CacheProtocol, ReleaseSourceProtocol

log = structlog.get_logger()

_SECONDS_PER_HOUR = 3600


def package_url(owner: str, repo: str, version: str) -> str:
    """Download URL of the release asset for ``version``."""
    return f"https://github.com/{owner}/{repo}/releases/download/v{version}/{repo}.zip"


class UpdateChecker:
    def __init__(
        self,
        cache: CacheProtocol,
        fetcher: ReleaseSourceProtocol,
        plugin: PluginSettings,
        github: GithubSettings,
    ) -> None:
        self._cache = cache
        self._fetcher = fetcher
        self._plugin = plugin
        self._github = github

    @property
    def cache_key(self) -> str:
        return f"{self._plugin.slug}_github_version"

    async def get_remote_version(self) -> str | None:
        """Latest released version, from cache when fresh. ``None`` when unknown."""
        cached = await self._cache.get(self.cache_key)
        if cached is not None:
            log.debug("remote_version_cache_hit", key=self.cache_key, version=cached)
            return cached

        try:
            version = await self._fetcher.fetch_latest_version(
                self._github.owner, self._github.repo
            )
        except PluginDetailsError as exc:
            log.warning(
                "update_check_failed",
                code=exc.code.value,
                message=exc.message,
                suggestion=exc.suggestion,
                recoverable=exc.recoverable,
            )
            return None

        await self._cache.set(self.cache_key, version, self._github.ttl_hours * _SECONDS_PER_HOUR)
        return version

    def build_offer(self, version: str) -> UpdateOffer:
        return UpdateOffer(
            slug=self._plugin.slug,
            plugin=self._plugin.plugin_file,
            new_version=version,
            url=self._github.repo_url,
            package=package_url(self._github.owner, self._github.repo, version),
        )

    async def check(self, local_version: str) -> UpdateOffer | None:
        """Return an offer when the latest release is strictly newer than ``local_version``."""
        remote_version = await self.get_remote_version()
        if not remote_version:
            return None

        if not is_newer(local_version, remote_version):
            log.debug("plugin_up_to_date", local=local_version, remote=remote_version)
            return None

        log.info("update_available", local=local_version, remote=remote_version)
        return self.build_offer(remote_version)

    async def check_for_updates(
        self, transient: UpdateTransient, local_version: str
    ) -> UpdateTransient:
        """Add this plugin's offer to the host update transient when one exists.

        The transient is returned unchanged when the host has not recorded any
        checked versions yet.
        """
        if not transient.checked:
            return transient

        offer = await self.check(local_version)
        if offer is not None:
            transient.response[offer.plugin] = offer
        return transient

    async def clear(self) -> None:
        """Forget the cached remote version so the next check hits GitHub."""
        await self._cache.delete(self.cache_key)
