"""Internal constants shared across the library."""

USER_AGENT = "pygbfs"

DEFAULT_REQUEST_TIMEOUT: float = 10.0
DEFAULT_COMPLETE_TTL: float = 10.0
DEFAULT_CLEANUP_INTERVAL: float = 10 * 60.0

# ------------------------------------------------------------------
# Cache slots.  Child feed slots double as the GBFS feed names used to
# look them up in the auto-discovery document.
# ------------------------------------------------------------------

COMPLETE_LABEL = "complete"
LANGUAGES_LABEL = "languages"
AUTO_DISCOVERY_LABEL = "autodiscovery"
STATION_STATUS_LABEL = "station_status"
STATION_INFORMATION_LABEL = "station_information"
SYSTEM_INFORMATION_LABEL = "system_information"
