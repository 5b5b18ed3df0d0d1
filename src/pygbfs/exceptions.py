"""Custom exception hierarchy for pygbfs."""

from __future__ import annotations


class GbfsError(Exception):
    """Base exception for all pygbfs errors."""


class GbfsConfigError(GbfsError):
    """Invalid or missing configuration."""


class GbfsTransportError(GbfsError):
    """HTTP-level failure (network, timeout, non-2xx status)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class GbfsDecodeError(GbfsError):
    """Response body is not JSON or does not match the expected document."""

    def __init__(self, message: str, *, url: str = "") -> None:
        self.url = url
        super().__init__(message)


class LanguageNotFoundError(GbfsError):
    """Requested language is not advertised by the auto-discovery document.

    Callers can pick another entry from
    :meth:`~pygbfs.client.GbfsClient.get_supported_languages` and retry.
    """

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Language not found in auto-discovery response: {language}")


class FeedNotFoundError(GbfsError):
    """No child feed with the requested name exists for the language."""

    def __init__(self, feed_name: str, *, language: str = "") -> None:
        self.feed_name = feed_name
        self.language = language
        super().__init__(f"Feed URL not found for feed name: {feed_name}")
