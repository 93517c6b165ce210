"""Plugin details panel and update checks for GitHub-hosted plugins."""

from __future__ import annotations

__version__ = "1.0.0"
