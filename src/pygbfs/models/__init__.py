"""Data models for GBFS feed documents."""

from pygbfs.models._base import GbfsBaseModel, GbfsFeed, parse_epoch_seconds
from pygbfs.models.complete import CompleteGbfsSnapshot
from pygbfs.models.discovery import AutoDiscoveryDocument, FeedRef, LanguageEntry
from pygbfs.models.station_information import (
    StationInformation,
    StationInformationData,
    StationInformationDocument,
)
from pygbfs.models.station_status import StationStatus, StationStatusData, StationStatusDocument
from pygbfs.models.system_information import SystemInformation, SystemInformationDocument

__all__ = [
    "AutoDiscoveryDocument",
    "CompleteGbfsSnapshot",
    "FeedRef",
    "GbfsBaseModel",
    "GbfsFeed",
    "LanguageEntry",
    "StationInformation",
    "StationInformationData",
    "StationInformationDocument",
    "StationStatus",
    "StationStatusData",
    "StationStatusDocument",
    "SystemInformation",
    "SystemInformationDocument",
    "parse_epoch_seconds",
]
