"""Aggregate snapshot of the core GBFS documents for one language."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pygbfs.models.discovery import AutoDiscoveryDocument
from pygbfs.models.station_information import StationInformationDocument
from pygbfs.models.station_status import StationStatusDocument


class CompleteGbfsSnapshot(BaseModel):
    """Discovery, station status and station information bundled together."""

    model_config = ConfigDict(frozen=True)

    auto_discovery: AutoDiscoveryDocument
    station_status: StationStatusDocument
    station_information: StationInformationDocument
