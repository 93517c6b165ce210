from __future__ import annotations

from pydantic import BaseModel, Field


class PluginHeaders(BaseModel):
    """Fields read from the main plugin file's header block.

    Missing headers are left as ``""``; nothing here is validated.
    """

    name: str = ""
    plugin_uri: str = ""
    version: str = ""
    description: str = ""
    author: str = ""
    author_uri: str = ""
    requires_wp: str = ""
    requires_php: str = ""
    text_domain: str = ""
    update_uri: str = ""


class PluginApiArgs(BaseModel):
    """Arguments of a plugin information request. Only ``slug`` is consumed."""

    slug: str | None = None


class PluginInfo(BaseModel):
    """Payload answering a ``plugin_information`` request."""

    name: str
    slug: str
    version: str
    author: str
    author_profile: str
    requires: str
    tested: str
    requires_php: str
    homepage: str
    sections: dict[str, str]
    download_link: str
    banners: dict[str, str] = Field(default_factory=lambda: {"low": "", "high": ""})
    icons: dict[str, str] = Field(default_factory=lambda: {"1x": "", "2x": ""})
    last_updated: str  # "YYYY-MM-DD HH:MM:SS", UTC
    active_installs: int = 0
    external: bool = True
    installed: bool | None = None
    active: bool | None = None


class UpdateOffer(BaseModel):
    """Entry added to the update transient when a newer release exists."""

    slug: str
    plugin: str
    new_version: str
    url: str
    package: str
    icons: dict[str, str] = Field(default_factory=dict)
    banners: dict[str, str] = Field(default_factory=dict)
    banners_rtl: dict[str, str] = Field(default_factory=dict)


class UpdateTransient(BaseModel):
    """Host update transient: versions checked and offers keyed by plugin file."""

    checked: dict[str, str] = Field(default_factory=dict)
    response: dict[str, UpdateOffer] = Field(default_factory=dict)
