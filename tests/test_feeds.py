"""Tests for the shared fetch/decode helpers and feed URL lookup."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta

import pytest

from pygbfs._api._common import decode_feed, fetch_feed, find_feed_url
from pygbfs.exceptions import FeedNotFoundError, GbfsDecodeError, GbfsTransportError, LanguageNotFoundError
from pygbfs.models import AutoDiscoveryDocument, StationStatusDocument
from pygbfs.models._base import MAX_EPOCH_SECONDS

_DISCOVERY = AutoDiscoveryDocument.model_validate(
    {
        "last_updated": 1,
        "ttl": 60,
        "data": {
            "en": {
                "feeds": [
                    {"name": "station_status", "url": "http://x/status_v1"},
                    {"name": "station_information", "url": "http://x/info"},
                    {"name": "station_status", "url": "http://x/status_v2"},
                ]
            },
        },
    }
)


class _StaticTransport:
    def __init__(self, body: bytes | Exception) -> None:
        self._body = body

    async def fetch(self, url: str) -> bytes:
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class TestFindFeedUrl:
    def test_last_duplicate_wins(self) -> None:
        assert find_feed_url(_DISCOVERY, "en", "station_status") == "http://x/status_v2"

    def test_single_match(self) -> None:
        assert find_feed_url(_DISCOVERY, "en", "station_information") == "http://x/info"

    def test_missing_language(self) -> None:
        with pytest.raises(LanguageNotFoundError, match="nl"):
            find_feed_url(_DISCOVERY, "nl", "station_status")

    def test_missing_feed(self) -> None:
        with pytest.raises(FeedNotFoundError, match="free_bike_status"):
            find_feed_url(_DISCOVERY, "en", "free_bike_status")


class TestDecodeFeed:
    def test_non_utf8_body(self) -> None:
        with pytest.raises(GbfsDecodeError):
            decode_feed("http://x", b"\x80abc", StationStatusDocument)

    def test_top_level_list_rejected(self) -> None:
        with pytest.raises(GbfsDecodeError, match="StationStatusDocument"):
            decode_feed("http://x", b"[]", StationStatusDocument)

    def test_decode_error_chains_cause(self) -> None:
        with pytest.raises(GbfsDecodeError) as exc_info:
            decode_feed("http://x", b"{not json", StationStatusDocument)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    @pytest.mark.parametrize(
        "payload",
        [
            {"last_updated": 10**20, "ttl": 60, "data": {"stations": []}},
            {"last_updated": 1, "ttl": 10**14, "data": {"stations": []}},
            {"last_updated": 1, "ttl": 60, "data": {"stations": [{"last_reported": 10**20}]}},
        ],
    )
    def test_out_of_range_times_rejected(self, payload: dict[str, object]) -> None:
        with pytest.raises(GbfsDecodeError):
            decode_feed("http://x", json.dumps(payload).encode(), StationStatusDocument)

    def test_latest_representable_timestamp(self) -> None:
        body = json.dumps({"last_updated": MAX_EPOCH_SECONDS, "ttl": 0, "data": {"stations": []}}).encode()
        doc = decode_feed("http://x", body, StationStatusDocument)
        assert doc.last_updated_timestamp == datetime(9999, 12, 31, 23, 59, 59, tzinfo=UTC)


@pytest.mark.asyncio
async def test_fetch_feed_annotates_station_records() -> None:
    body = json.dumps(
        {"last_updated": 2000, "ttl": 60, "data": {"stations": [{"last_reported": 1000}]}},
    ).encode()
    doc = await fetch_feed(_StaticTransport(body), "http://x/status", StationStatusDocument)

    epoch = datetime(1970, 1, 1, tzinfo=UTC)
    assert doc.data.stations[0].last_reported_timestamp == epoch + timedelta(seconds=1000)
    assert doc.last_updated_timestamp == epoch + timedelta(seconds=2000)
    assert doc.ttl_duration == timedelta(seconds=60)


@pytest.mark.asyncio
async def test_fetch_feed_propagates_transport_error() -> None:
    error = GbfsTransportError("boom", url="http://x/status")
    with pytest.raises(GbfsTransportError) as exc_info:
        await fetch_feed(_StaticTransport(error), "http://x/status", StationStatusDocument)
    assert exc_info.value is error
