"""High-level async client for GBFS feeds."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, TypeVar

import aiohttp

from pygbfs._api._common import fetch_feed, find_feed_url
from pygbfs._cache import ExpiringCache
from pygbfs._constants import (
    AUTO_DISCOVERY_LABEL,
    COMPLETE_LABEL,
    LANGUAGES_LABEL,
    STATION_INFORMATION_LABEL,
    STATION_STATUS_LABEL,
    SYSTEM_INFORMATION_LABEL,
)
from pygbfs._transport import HttpTransport, Transport
from pygbfs.config import GbfsConfig
from pygbfs.exceptions import GbfsError
from pygbfs.models._base import GbfsFeed
from pygbfs.models.complete import CompleteGbfsSnapshot
from pygbfs.models.discovery import AutoDiscoveryDocument
from pygbfs.models.station_information import StationInformationDocument
from pygbfs.models.station_status import StationStatusDocument
from pygbfs.models.system_information import SystemInformationDocument

_logger = logging.getLogger(__name__)

FeedT = TypeVar("FeedT", bound=GbfsFeed)


class GbfsClient:
    """Async client for a GBFS feed rooted at one auto-discovery URL.

    Every document is cached in memory for the TTL the feed itself
    declares.  Child-feed slots are keyed by topic only unless
    ``config.language_scoped_cache`` is set, so by default a document
    fetched for one language is returned for every language until it
    expires.

    Usage::

        async with GbfsClient(GbfsConfig(feed_url=url)) as client:
            status = await client.get_station_status("en")
    """

    def __init__(
        self,
        config: GbfsConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        cache: ExpiringCache | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        self._cache = cache if cache is not None else ExpiringCache(cleanup_interval=config.cleanup_interval)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GbfsClient:
        if not self._external_transport:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise GbfsError("Client not initialized. Use 'async with GbfsClient(...) as client:'")
        return self._transport

    def _cache_key(self, label: str, language: str) -> str:
        if self._config.language_scoped_cache:
            return f"{label}:{language}"
        return label

    def _cached(self, key: str) -> Any | None:
        value, found = self._cache.get(key)
        if found:
            _logger.debug("Cache hit for %s", key)
            return value
        _logger.debug("Cache miss for %s", key)
        return None

    def _store(self, key: str, value: Any, ttl: timedelta | float) -> None:
        self._cache.set(key, value, ttl)
        seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else ttl
        if seconds <= 0:
            _logger.debug("Not caching %s (ttl=%s)", key, ttl)
            return
        _logger.debug("Cached %s for %s", key, ttl)

    def clear_cache(self) -> None:
        """Drop every cached document so the next call refetches."""
        self._cache.clear()

    # ------------------------------------------------------------------
    # Auto-discovery
    # ------------------------------------------------------------------

    async def get_auto_discovery(self) -> AutoDiscoveryDocument:
        """Return the root auto-discovery document."""
        cached = self._cached(AUTO_DISCOVERY_LABEL)
        if cached is not None:
            return cached

        transport = self._require_transport()
        document = await fetch_feed(transport, self._config.feed_url, AutoDiscoveryDocument)
        self._store(AUTO_DISCOVERY_LABEL, document, document.ttl)
        return document

    async def get_supported_languages(self) -> frozenset[str]:
        """Return the language codes advertised by the auto-discovery data."""
        cached = self._cached(LANGUAGES_LABEL)
        if cached is not None:
            return cached

        document = await self.get_auto_discovery()
        languages = document.languages
        self._store(LANGUAGES_LABEL, languages, document.ttl)
        return languages

    async def resolve_feed_url(self, language: str, feed_name: str) -> str:
        """Locate the URL of child feed *feed_name* for *language*.

        Raises
        ------
        LanguageNotFoundError
            The language is not advertised.
        FeedNotFoundError
            The language has no feed with that name (or its URL is empty).
        """
        document = await self.get_auto_discovery()
        return find_feed_url(document, language, feed_name)

    # ------------------------------------------------------------------
    # Child feeds
    # ------------------------------------------------------------------

    async def get_feed(self, language: str, feed_name: str, model: type[FeedT]) -> FeedT:
        """Fetch any child feed by name and decode it into *model*.

        The result is cached under *feed_name* for the document's own TTL.
        """
        key = self._cache_key(feed_name, language)
        cached = self._cached(key)
        if cached is not None:
            return cached

        url = await self.resolve_feed_url(language, feed_name)
        document = await fetch_feed(self._require_transport(), url, model)
        self._store(key, document, document.ttl)
        return document

    async def get_station_status(self, language: str) -> StationStatusDocument:
        """Return the status of all stations using *language*."""
        return await self.get_feed(language, STATION_STATUS_LABEL, StationStatusDocument)

    async def get_station_information(self, language: str) -> StationInformationDocument:
        """Return descriptive information for all stations using *language*."""
        return await self.get_feed(language, STATION_INFORMATION_LABEL, StationInformationDocument)

    async def get_system_information(self, language: str) -> SystemInformationDocument:
        """Return operator and system details using *language*."""
        return await self.get_feed(language, SYSTEM_INFORMATION_LABEL, SystemInformationDocument)

    # ------------------------------------------------------------------
    # Composite
    # ------------------------------------------------------------------

    async def get_complete_gbfs_message(self, language: str) -> CompleteGbfsSnapshot:
        """Return discovery, station status and station information together.

        Any failing step aborts the whole call with that step's error;
        a partial snapshot is never returned or cached.
        """
        key = self._cache_key(COMPLETE_LABEL, language)
        cached = self._cached(key)
        if cached is not None:
            return cached

        snapshot = CompleteGbfsSnapshot(
            auto_discovery=await self.get_auto_discovery(),
            station_status=await self.get_station_status(language),
            station_information=await self.get_station_information(language),
        )
        self._store(key, snapshot, self._config.complete_ttl)
        return snapshot
