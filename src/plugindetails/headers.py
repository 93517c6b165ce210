"""Local plugin metadata read from the main file's header comment block."""

from __future__ import annotations

import re
from pathlib import Path

import structlog

from plugindetails.markdown import normalize_line_endings
from plugindetails.models.plugin import PluginHeaders

log = structlog.get_logger()

# Only the start of the file is scanned for headers.
_HEADER_READ_BYTES = 8 * 1024

# Header label → PluginHeaders field
HEADER_FIELDS: dict[str, str] = {
    "Plugin Name": "name",
    "Plugin URI": "plugin_uri",
    "Version": "version",
    "Description": "description",
    "Author": "author",
    "Author URI": "author_uri",
    "Requires at least": "requires_wp",
    "Requires PHP": "requires_php",
    "Text Domain": "text_domain",
    "Update URI": "update_uri",
}

_COMMENT_CLOSE_RE = re.compile(r"\s*(?:\*/|\?>).*")


def _header_pattern(label: str) -> re.Pattern[str]:
    return re.compile(
        r"^(?:[ \t]*<\?php)?[ \t/*#@]*" + re.escape(label) + r":(.*)$",
        re.MULTILINE | re.IGNORECASE,
    )


_HEADER_PATTERNS = {label: _header_pattern(label) for label in HEADER_FIELDS}


def _cleanup_header_value(value: str) -> str:
    return _COMMENT_CLOSE_RE.sub("", value).strip()


def parse_plugin_headers(text: str) -> PluginHeaders:
    values: dict[str, str] = {}
    for label, field in HEADER_FIELDS.items():
        match = _HEADER_PATTERNS[label].search(text)
        values[field] = _cleanup_header_value(match.group(1)) if match else ""
    return PluginHeaders(**values)


def read_plugin_headers(path: str | Path) -> PluginHeaders:
    """Parse headers from the first 8 KiB of ``path``. A missing file yields empty headers."""
    path = Path(path)
    try:
        with path.open("rb") as fh:
            head = fh.read(_HEADER_READ_BYTES)
    except OSError:
        log.warning("plugin_headers_unreadable", path=str(path), exc_info=True)
        return PluginHeaders()

    return parse_plugin_headers(normalize_line_endings(head.decode("utf-8", errors="replace")))
