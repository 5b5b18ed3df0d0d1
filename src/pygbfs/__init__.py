"""pygbfs - Async Python client for GBFS bike/scooter-share feeds."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pygbfs")
except PackageNotFoundError:
    __version__ = "0+local"
from pygbfs._cache import ExpiringCache
from pygbfs._transport import HttpTransport, Transport
from pygbfs.client import GbfsClient
from pygbfs.config import GbfsConfig
from pygbfs.exceptions import (
    FeedNotFoundError,
    GbfsConfigError,
    GbfsDecodeError,
    GbfsError,
    GbfsTransportError,
    LanguageNotFoundError,
)
from pygbfs.models import (
    AutoDiscoveryDocument,
    CompleteGbfsSnapshot,
    FeedRef,
    LanguageEntry,
    StationInformation,
    StationInformationDocument,
    StationStatus,
    StationStatusDocument,
    SystemInformation,
    SystemInformationDocument,
)

__all__ = [
    "__version__",
    "AutoDiscoveryDocument",
    "CompleteGbfsSnapshot",
    "ExpiringCache",
    "FeedNotFoundError",
    "FeedRef",
    "GbfsClient",
    "GbfsConfig",
    "GbfsConfigError",
    "GbfsDecodeError",
    "GbfsError",
    "GbfsTransportError",
    "HttpTransport",
    "LanguageEntry",
    "LanguageNotFoundError",
    "StationInformation",
    "StationInformationDocument",
    "StationStatus",
    "StationStatusDocument",
    "SystemInformation",
    "SystemInformationDocument",
    "Transport",
]
