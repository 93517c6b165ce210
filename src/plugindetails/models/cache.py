from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class TransientEntry(BaseModel):
    """A cached value with its expiry."""

    key: str
    value: str
    fetched_at: datetime
    expires_at: datetime
    stale: bool = False
