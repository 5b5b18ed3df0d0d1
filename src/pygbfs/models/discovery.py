"""Auto-discovery (``gbfs.json``) document model."""

from __future__ import annotations

from pydantic import field_validator

from pygbfs.models._base import GbfsBaseModel, GbfsFeed


class FeedRef(GbfsBaseModel):
    """A named child feed advertised for one language."""

    name: str
    url: str = ""


class LanguageEntry(GbfsBaseModel):
    """Ordered list of child feeds available in one language."""

    feeds: tuple[FeedRef, ...] = ()

    def find_url(self, feed_name: str) -> str:
        """Return the URL of the last feed named *feed_name*, or ``""``."""
        url = ""
        for feed in self.feeds:
            if feed.name == feed_name:
                url = feed.url
        return url


class AutoDiscoveryDocument(GbfsFeed):
    """Root document mapping language codes to their child feeds."""

    data: dict[str, LanguageEntry]

    @field_validator("data")
    @classmethod
    def _reject_empty_language(cls, value: dict[str, LanguageEntry]) -> dict[str, LanguageEntry]:
        if any(not language for language in value):
            raise ValueError("language codes must be non-empty")
        return value

    @property
    def languages(self) -> frozenset[str]:
        return frozenset(self.data)
