"""Shared fixtures: a plugin directory on disk and settings pointing at it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from plugindetails.config import Settings

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_MAIN_FILE = """<?php

/**
 * Plugin Name: Mini Plugin
 * Plugin URI: https://github.com/guilamu/mini-plugin
 * Description: A minimal plugin with <details> from GitHub.
 * Version: 1.0.0
 * Requires at least: 5.0
 * Requires PHP: 7.4
 * Author: Guilamu
 * Author URI: https://github.com/guilamu
 * Text Domain: miniplugin
 * Update URI: https://github.com/guilamu/mini-plugin
 */
"""

SAMPLE_README = """# Mini Plugin

A tagline that sits above every section.

## Description

Mini Plugin shows **proper** details for *GitHub-hosted* plugins.
It reads `README.md` at request time.

## Installation

1. Upload the plugin folder.
2. Activate it.

## Frequently Asked Questions

### Does it phone home?

Only to [GitHub](https://github.com).

## Changelog

### 1.0.0

- Initial release
- Added details panel
"""


@pytest.fixture()
def plugin_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "mini-plugin"
    directory.mkdir()
    (directory / "miniplugin.php").write_text(SAMPLE_MAIN_FILE, encoding="utf-8")
    (directory / "README.md").write_text(SAMPLE_README, encoding="utf-8")
    return directory


@pytest.fixture()
def settings(plugin_dir: Path) -> Settings:
    return Settings(
        plugin={"plugin_dir": str(plugin_dir), "host_version": "6.6"},
        cache={"db_path": ":memory:"},
    )
