"""Error codes and the single exception type raised inside plugindetails.

``PluginDetailsError`` is raised by the release fetcher and caught at the
UpdateChecker boundary, where every failure degrades to "no update
information". It never reaches the host.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    RELEASE_NOT_FOUND = "RELEASE_NOT_FOUND"
    RELEASE_FETCH_FAILED = "RELEASE_FETCH_FAILED"
    INVALID_RELEASE = "INVALID_RELEASE"


class PluginDetailsError(Exception):
    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str = "",
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable
