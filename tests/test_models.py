"""Tests for GBFS document parsing and derived fields."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from pygbfs.models import (
    AutoDiscoveryDocument,
    StationInformationDocument,
    StationStatusDocument,
    SystemInformationDocument,
    parse_epoch_seconds,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


# ------------------------------------------------------------------
# Header fields
# ------------------------------------------------------------------


class TestHeaderFields:
    @pytest.mark.parametrize(("last_updated", "ttl"), [(0, 0), (1, 1), (1_700_000_000, 3600)])
    def test_derived_fields_match_raw_integers(self, last_updated: int, ttl: int) -> None:
        doc = AutoDiscoveryDocument.model_validate({"last_updated": last_updated, "ttl": ttl, "data": {}})
        assert doc.last_updated_timestamp == _EPOCH + timedelta(seconds=last_updated)
        assert doc.ttl_duration == timedelta(seconds=ttl)

    def test_negative_ttl_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AutoDiscoveryDocument.model_validate({"last_updated": 1, "ttl": -1, "data": {}})

    def test_missing_header_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StationStatusDocument.model_validate({"data": {"stations": []}})

    def test_documents_are_frozen(self) -> None:
        doc = AutoDiscoveryDocument.model_validate({"last_updated": 1, "ttl": 1, "data": {}})
        with pytest.raises(ValidationError):
            doc.ttl = 5  # type: ignore[misc]

    def test_raw_payload_kept(self) -> None:
        payload = {"last_updated": 10, "ttl": 5, "data": {}, "version": "2.3"}
        doc = AutoDiscoveryDocument.model_validate(payload)
        assert doc.raw == payload

    def test_payload_raw_key_does_not_clash(self) -> None:
        payload = {"last_updated": 10, "ttl": 5, "data": {}, "raw": "vendor-extension"}
        doc = AutoDiscoveryDocument.model_validate(payload)
        assert doc.raw == payload
        assert doc.raw["raw"] == "vendor-extension"

    def test_parse_epoch_seconds_none(self) -> None:
        assert parse_epoch_seconds(None) is None


# ------------------------------------------------------------------
# Auto-discovery
# ------------------------------------------------------------------


class TestAutoDiscovery:
    def test_languages_and_feed_order(self) -> None:
        doc = AutoDiscoveryDocument.model_validate(
            {
                "last_updated": 1,
                "ttl": 60,
                "data": {
                    "en": {
                        "feeds": [
                            {"name": "station_status", "url": "http://x/status_v1"},
                            {"name": "station_status", "url": "http://x/status_v2"},
                        ]
                    },
                    "fr": {"feeds": []},
                },
            }
        )
        assert doc.languages == frozenset({"en", "fr"})
        assert [feed.url for feed in doc.data["en"].feeds] == ["http://x/status_v1", "http://x/status_v2"]
        assert doc.data["en"].find_url("station_status") == "http://x/status_v2"
        assert doc.data["fr"].find_url("station_status") == ""

    def test_empty_language_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AutoDiscoveryDocument.model_validate({"last_updated": 1, "ttl": 1, "data": {"": {"feeds": []}}})


# ------------------------------------------------------------------
# Station feeds
# ------------------------------------------------------------------


class TestStationStatus:
    def test_last_reported_derived_per_station(self) -> None:
        doc = StationStatusDocument.model_validate(
            {"last_updated": 2000, "ttl": 60, "data": {"stations": [{"last_reported": 1000}]}}
        )
        (station,) = doc.data.stations
        assert station.last_reported_timestamp == _EPOCH + timedelta(seconds=1000)
        assert doc.last_updated_timestamp == _EPOCH + timedelta(seconds=2000)
        assert doc.ttl_duration == timedelta(seconds=60)

    def test_station_fields(self) -> None:
        doc = StationStatusDocument.model_validate(
            {
                "last_updated": 1,
                "ttl": 10,
                "data": {
                    "stations": [
                        {
                            "station_id": "72",
                            "num_bikes_available": 3,
                            "num_docks_available": 12,
                            "is_installed": 1,
                            "is_renting": True,
                            "is_returning": 0,
                            "last_reported": 1_600_000_000,
                        }
                    ]
                },
            }
        )
        station = doc.data.stations[0]
        assert station.station_id == "72"
        assert station.num_bikes_available == 3
        assert station.is_installed is True
        assert station.is_returning is False
        assert station.num_bikes_disabled is None

    def test_missing_last_reported(self) -> None:
        doc = StationStatusDocument.model_validate(
            {"last_updated": 1, "ttl": 1, "data": {"stations": [{"station_id": "a"}]}}
        )
        assert doc.data.stations[0].last_reported_timestamp is None


class TestStationInformation:
    def test_parses_station(self) -> None:
        doc = StationInformationDocument.model_validate(
            {
                "last_updated": 1,
                "ttl": 10,
                "data": {
                    "stations": [
                        {
                            "station_id": "72",
                            "name": "W 52 St & 11 Ave",
                            "lat": 40.76727216,
                            "lon": -73.99392888,
                            "capacity": 39,
                            "rental_methods": ["KEY", "CREDITCARD"],
                        }
                    ]
                },
            }
        )
        station = doc.data.stations[0]
        assert station.name == "W 52 St & 11 Ave"
        assert station.capacity == 39
        assert station.rental_methods == ("KEY", "CREDITCARD")
        assert station.address is None


def test_system_information() -> None:
    doc = SystemInformationDocument.model_validate(
        {
            "last_updated": 1,
            "ttl": 86400,
            "data": {"system_id": "citibike", "language": "en", "name": "Citi Bike", "timezone": "America/New_York"},
        }
    )
    assert doc.data.name == "Citi Bike"
    assert doc.ttl_duration == timedelta(days=1)
