"""SQLite transient store.

All cache operations catch ``aiosqlite.Error`` internally and degrade
gracefully: read failures return ``None`` (treated as a cache miss by
callers), write and delete failures are logged and ignored. Infrastructure
errors never cross the Cache class boundary, so a broken cache only costs an
extra release lookup. Errors are still logged with ``exc_info=True``.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import aiosqlite
import structlog

if TYPE_CHECKING:
    from plugindetails.models.cache import TransientEntry

log = structlog.get_logger()

_CREATE_TRANSIENTS_TABLE = """
CREATE TABLE IF NOT EXISTS transients (
    key         TEXT PRIMARY KEY,
    value       TEXT NOT NULL,
    fetched_at  TEXT NOT NULL,
    expires_at  TEXT NOT NULL
)
"""

_CREATE_TRANSIENTS_INDEX = (
    "CREATE INDEX IF NOT EXISTS idx_transients_expires ON transients(expires_at)"
)


class Cache:
    """SQLite-backed transient store implementing CacheProtocol."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def init_db(self) -> None:
        """Create tables and set WAL mode. Called once at startup."""
        await self._db.execute("PRAGMA journal_mode = WAL")
        await self._db.execute(_CREATE_TRANSIENTS_TABLE)
        await self._db.execute(_CREATE_TRANSIENTS_INDEX)
        await self._db.commit()

    # ------------------------------------------------------------------
    # Transients
    # ------------------------------------------------------------------

    async def get_entry(self, key: str) -> TransientEntry | None:
        """Read an entry, expired or not. Returns ``None`` on miss or read failure."""
        try:
            cursor = await self._db.execute(
                "SELECT key, value, fetched_at, expires_at FROM transients WHERE key = ?",
                (key,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None

            from plugindetails.models.cache import TransientEntry

            fetched_at = datetime.fromisoformat(row[2])
            expires_at = datetime.fromisoformat(row[3])
            stale = datetime.now(UTC) >= expires_at

            return TransientEntry(
                key=row[0],
                value=row[1],
                fetched_at=fetched_at,
                expires_at=expires_at,
                stale=stale,
            )
        except aiosqlite.Error:
            log.warning("cache_read_error", key=key, exc_info=True)
            return None

    async def get(self, key: str) -> str | None:
        """Return the cached value, or ``None`` when missing, expired or unreadable."""
        entry = await self.get_entry(key)
        if entry is None or entry.stale:
            return None
        return entry.value

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Write an entry that expires ``ttl_seconds`` from now. Non-fatal on failure."""
        try:
            now = datetime.now(UTC)
            expires_at = now + timedelta(seconds=ttl_seconds)
            await self._db.execute(
                "INSERT OR REPLACE INTO transients (key, value, fetched_at, expires_at) "
                "VALUES (?, ?, ?, ?)",
                (key, value, now.isoformat(), expires_at.isoformat()),
            )
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("cache_write_error", key=key, exc_info=True)

    async def delete(self, key: str) -> None:
        """Remove an entry. Non-fatal on failure."""
        try:
            await self._db.execute("DELETE FROM transients WHERE key = ?", (key,))
            await self._db.commit()
        except aiosqlite.Error:
            log.warning("cache_delete_error", key=key, exc_info=True)

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    async def cleanup_expired(self, grace_days: int = 7) -> None:
        """Delete entries expired more than ``grace_days`` ago. Non-fatal on failure."""
        try:
            cutoff = (datetime.now(UTC) - timedelta(days=grace_days)).isoformat()
            cursor = await self._db.execute(
                "DELETE FROM transients WHERE expires_at < ?", (cutoff,)
            )
            deleted = cursor.rowcount
            await self._db.commit()
            log.info("cache_cleanup_complete", deleted=deleted)
        except aiosqlite.Error:
            log.warning("cache_cleanup_error", exc_info=True)
