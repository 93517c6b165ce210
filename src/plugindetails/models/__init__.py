from __future__ import annotations

from plugindetails.models.cache import TransientEntry
from plugindetails.models.github import GithubRelease
from plugindetails.models.plugin import (
    PluginApiArgs,
    PluginHeaders,
    PluginInfo,
    UpdateOffer,
    UpdateTransient,
)
from plugindetails.models.readme import SECTION_HEADINGS, ReadmeSections

__all__ = [
    # readme
    "SECTION_HEADINGS",
    "ReadmeSections",
    # plugin
    "PluginHeaders",
    "PluginApiArgs",
    "PluginInfo",
    "UpdateOffer",
    "UpdateTransient",
    # github
    "GithubRelease",
    # cache
    "TransientEntry",
]
