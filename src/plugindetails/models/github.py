"""Pydantic model for the GitHub "latest release" response.

Only ``tag_name`` is consumed; every other field of the payload is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class GithubRelease(BaseModel):
    tag_name: str

    @field_validator("tag_name")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        if not v:
            raise ValueError("tag_name must not be empty")
        return v
