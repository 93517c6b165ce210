from __future__ import annotations

from pydantic import BaseModel

# README heading for each section, in display order.
SECTION_HEADINGS: dict[str, str] = {
    "description": "Description",
    "installation": "Installation",
    "changelog": "Changelog",
    "faq": "Frequently Asked Questions",
}


class ReadmeSections(BaseModel):
    """HTML fragments extracted from the README. Missing sections are ``""``."""

    description: str = ""
    installation: str = ""
    changelog: str = ""
    faq: str = ""

    def non_empty(self) -> dict[str, str]:
        """Sections with content, keyed by section name, in display order."""
        return {name: getattr(self, name) for name in SECTION_HEADINGS if getattr(self, name)}
