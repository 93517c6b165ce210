"""Host-facing entry points: the information payload, row links and update check.

Each method follows the host's filter convention: it receives the value the
host is about to use and returns it unchanged unless the request concerns this
plugin.
"""

from __future__ import annotations

import html
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import structlog

from plugindetails.headers import read_plugin_headers
from plugindetails.markdown import parse_readme
from plugindetails.models.plugin import PluginApiArgs, PluginHeaders, PluginInfo, UpdateTransient

if TYPE_CHECKING:
    from plugindetails.config import Settings
    from plugindetails.updater import UpdateChecker

log = structlog.get_logger()

PLUGIN_INFORMATION_ACTION = "plugin_information"


def latest_download_url(owner: str, repo: str) -> str:
    return f"https://github.com/{owner}/{repo}/releases/latest/download/{repo}.zip"


class PluginDetails:
    def __init__(
        self,
        settings: Settings,
        checker: UpdateChecker,
        is_active: Callable[[str], bool] | None = None,
    ) -> None:
        self._settings = settings
        self._checker = checker
        self._is_active = is_active
        self._headers: PluginHeaders | None = None

    @property
    def headers(self) -> PluginHeaders:
        """Main-file headers, read once per instance."""
        if self._headers is None:
            self._headers = read_plugin_headers(self._settings.plugin.main_file_path)
        return self._headers

    def plugin_info(self, result: Any, action: str, args: PluginApiArgs | None) -> Any:
        """Answer a ``plugin_information`` request for this plugin's slug.

        Any other action or slug gets ``result`` back untouched.
        """
        plugin = self._settings.plugin
        if action != PLUGIN_INFORMATION_ACTION:
            return result
        if args is None or args.slug != plugin.slug:
            return result

        headers = self.headers
        readme = parse_readme(plugin.readme_path)

        if not readme.description:
            readme.description = f"<p>{html.escape(headers.description)}</p>"

        github = self._settings.github
        info = PluginInfo(
            name=headers.name,
            slug=plugin.slug,
            version=headers.version,
            author=headers.author,
            author_profile=headers.author_uri,
            requires=headers.requires_wp,
            tested=plugin.host_version,
            requires_php=headers.requires_php,
            homepage=headers.plugin_uri,
            sections=readme.non_empty(),
            download_link=latest_download_url(github.owner, github.repo),
            last_updated=datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S"),
        )

        if self._is_active is not None:
            info.installed = True
            info.active = self._is_active(plugin.plugin_file)

        log.debug("plugin_info_served", slug=plugin.slug, sections=list(info.sections))
        return info

    def details_url(self) -> str:
        plugin = self._settings.plugin
        query = urlencode(
            {
                "tab": "plugin-information",
                "plugin": plugin.slug,
                "TB_iframe": "true",
                "width": 600,
                "height": 550,
            }
        )
        return f"{plugin.admin_url.rstrip('/')}/plugin-install.php?{query}"

    def plugin_row_meta(self, links: list[str], file: str) -> list[str]:
        """Append "View details", "GitHub" and "Support" links to this plugin's row."""
        plugin = self._settings.plugin
        if file != plugin.plugin_file:
            return links

        name = html.escape(plugin.display_name, quote=True)
        details_link = (
            f'<a href="{html.escape(self.details_url(), quote=True)}" '
            f'class="thickbox open-plugin-details-modal" '
            f'aria-label="More information about {name}" data-title="{name}">View details</a>'
        )
        repo_url = html.escape(self._settings.github.repo_url, quote=True)
        custom_links = [
            details_link,
            f'<a href="{repo_url}" target="_blank">GitHub</a>',
            f'<a href="{repo_url}/issues" target="_blank">Support</a>',
        ]
        return [*links, *custom_links]

    async def check_for_updates(self, transient: UpdateTransient) -> UpdateTransient:
        return await self._checker.check_for_updates(transient, self.headers.version)
