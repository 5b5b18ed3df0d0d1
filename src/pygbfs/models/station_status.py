"""Station status (``station_status.json``) document model."""

from __future__ import annotations

from datetime import datetime

from pydantic import model_validator

from pygbfs.models._base import EpochSeconds, GbfsBaseModel, GbfsFeed, parse_epoch_seconds


class StationStatus(GbfsBaseModel):
    """Live availability for one station.

    ``last_reported_timestamp`` is derived from ``last_reported`` the
    same way the document header derives ``last_updated_timestamp``.
    """

    station_id: str | None = None
    num_bikes_available: int | None = None
    num_bikes_disabled: int | None = None
    num_docks_available: int | None = None
    num_docks_disabled: int | None = None
    is_installed: bool | None = None
    is_renting: bool | None = None
    is_returning: bool | None = None
    last_reported: EpochSeconds | None = None
    last_reported_timestamp: datetime | None = None

    @model_validator(mode="after")
    def _derive_last_reported(self) -> StationStatus:
        object.__setattr__(self, "last_reported_timestamp", parse_epoch_seconds(self.last_reported))
        return self


class StationStatusData(GbfsBaseModel):
    stations: tuple[StationStatus, ...] = ()


class StationStatusDocument(GbfsFeed):
    data: StationStatusData
