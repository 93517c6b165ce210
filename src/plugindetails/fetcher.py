"""GitHub latest-release lookup.

One GET per lookup, no retries. Every failure is raised as a
``PluginDetailsError``; the UpdateChecker decides what a failure means.
"""

from __future__ import annotations

import httpx
import structlog
from pydantic import ValidationError

from plugindetails import __version__
from plugindetails.config import GithubSettings
from plugindetails.errors import ErrorCode, PluginDetailsError
from plugindetails.models.github import GithubRelease

log = structlog.get_logger()

GITHUB_ACCEPT = "application/vnd.github.v3+json"


def build_http_client(settings: GithubSettings | None = None) -> httpx.AsyncClient:
    settings = settings or GithubSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds),
        headers={"User-Agent": f"plugindetails/{__version__}"},
        follow_redirects=True,
    )


def latest_release_url(owner: str, repo: str, api_base: str = "https://api.github.com") -> str:
    return f"{api_base.rstrip('/')}/repos/{owner}/{repo}/releases/latest"


def strip_tag_prefix(tag: str) -> str:
    """``v1.2.0`` → ``1.2.0``. All leading ``v`` characters are removed."""
    return tag.lstrip("v")


class ReleaseFetcher:
    def __init__(self, client: httpx.AsyncClient, settings: GithubSettings | None = None) -> None:
        self._client = client
        self._settings = settings or GithubSettings()

    async def fetch_latest_version(self, owner: str, repo: str) -> str:
        """Return the version of the latest published release, without a ``v`` prefix."""
        url = latest_release_url(owner, repo, self._settings.api_base)
        try:
            response = await self._client.get(
                url,
                headers={"Accept": GITHUB_ACCEPT},
                timeout=self._settings.timeout_seconds,
            )
        except httpx.HTTPError as exc:
            log.warning("release_fetch_network_error", url=url, error=str(exc))
            raise PluginDetailsError(
                code=ErrorCode.RELEASE_FETCH_FAILED,
                message=f"Network error fetching {url}: {exc}",
                suggestion="Check your network connection and try again.",
                recoverable=True,
            ) from exc

        if response.status_code == 404:
            raise PluginDetailsError(
                code=ErrorCode.RELEASE_NOT_FOUND,
                message=f"No published release found for {owner}/{repo}",
                suggestion="Publish a release on GitHub or check the repository name.",
                recoverable=False,
            )

        if response.status_code != 200:
            log.warning("release_fetch_http_error", url=url, status_code=response.status_code)
            raise PluginDetailsError(
                code=ErrorCode.RELEASE_FETCH_FAILED,
                message=f"HTTP {response.status_code} fetching {url}",
                suggestion="GitHub may be rate limiting requests. Try again later.",
                recoverable=True,
            )

        try:
            release = GithubRelease.model_validate_json(response.content)
        except ValidationError as exc:
            raise PluginDetailsError(
                code=ErrorCode.INVALID_RELEASE,
                message=f"Release payload from {url} has no usable tag_name",
                recoverable=False,
            ) from exc

        version = strip_tag_prefix(release.tag_name)
        if not version:
            raise PluginDetailsError(
                code=ErrorCode.INVALID_RELEASE,
                message=f"Release tag {release.tag_name!r} carries no version",
                recoverable=False,
            )
        log.info("release_fetched", owner=owner, repo=repo, version=version)
        return version
