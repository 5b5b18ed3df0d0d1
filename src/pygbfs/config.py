"""Client configuration for pygbfs."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pygbfs._constants import (
    DEFAULT_CLEANUP_INTERVAL,
    DEFAULT_COMPLETE_TTL,
    DEFAULT_REQUEST_TIMEOUT,
    USER_AGENT,
)
from pygbfs.exceptions import GbfsConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise GbfsConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class GbfsConfig:
    """Client configuration.

    Parameters
    ----------
    feed_url : str
        URL of the root auto-discovery document (``gbfs.json``).
    request_timeout : float
        Total timeout in seconds for a single feed request.
    complete_ttl : float
        Seconds a complete snapshot stays cached.  The snapshot is
        cached as one bundle, independently of the TTLs declared by
        the documents it contains.
    cleanup_interval : float
        Minimum seconds between sweeps that purge expired cache
        entries.
    language_scoped_cache : bool
        Include the language in cache keys.  When ``False`` (the
        default) each feed topic has a single cache slot shared by
        every language, so a document fetched for one language is
        served to callers asking for another until its TTL elapses.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    feed_url: str
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    complete_ttl: float = DEFAULT_COMPLETE_TTL
    cleanup_interval: float = DEFAULT_CLEANUP_INTERVAL
    language_scoped_cache: bool = False
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.feed_url or not self.feed_url.strip():
            raise GbfsConfigError("feed_url must not be empty")
        if self.request_timeout <= 0:
            raise GbfsConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> GbfsConfig:
        """Create configuration from environment variables.

        Reads ``GBFS_FEED_URL`` and the optional ``GBFS_*`` variables.
        Explicit keyword arguments override environment values.

        Raises
        ------
        GbfsConfigError
            If a numeric variable cannot be parsed or no feed URL is set.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        feed_url = env.get("GBFS_FEED_URL")
        if feed_url is not None:
            config_kwargs["feed_url"] = feed_url
        user_agent = env.get("GBFS_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        _ENV_FLOAT_MAP = {
            "GBFS_REQUEST_TIMEOUT": "request_timeout",
            "GBFS_COMPLETE_TTL": "complete_ttl",
            "GBFS_CLEANUP_INTERVAL": "cleanup_interval",
        }
        for env_key, field_name in _ENV_FLOAT_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_float(env_key, val)

        if "language_scoped_cache" not in overrides:
            config_kwargs["language_scoped_cache"] = _env_bool(
                env.get("GBFS_LANGUAGE_SCOPED_CACHE"),
                False,
            )

        config_kwargs.update(overrides)
        if "feed_url" not in config_kwargs:
            raise GbfsConfigError("GBFS_FEED_URL is not set")

        return cls(**config_kwargs)
