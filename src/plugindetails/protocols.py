"""Interfaces the UpdateChecker and lifecycle hooks depend on."""

from __future__ import annotations

from typing import Protocol


class CacheProtocol(Protocol):
    """Key-value transient store with expiry.

    ``get`` returns ``None`` for a missing or expired key. Implementations
    must not raise from any method.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str, ttl_seconds: int) -> None: ...

    async def delete(self, key: str) -> None: ...


class ReleaseSourceProtocol(Protocol):
    async def fetch_latest_version(self, owner: str, repo: str) -> str: ...
