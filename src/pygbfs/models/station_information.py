"""Station information (``station_information.json``) document model."""

from __future__ import annotations

from pygbfs.models._base import GbfsBaseModel, GbfsFeed


class StationInformation(GbfsBaseModel):
    """Static description of one station."""

    station_id: str | None = None
    name: str | None = None
    short_name: str | None = None
    lat: float | None = None
    lon: float | None = None
    address: str | None = None
    post_code: str | None = None
    capacity: int | None = None
    region_id: str | None = None
    rental_methods: tuple[str, ...] = ()


class StationInformationData(GbfsBaseModel):
    stations: tuple[StationInformation, ...] = ()


class StationInformationDocument(GbfsFeed):
    data: StationInformationData
