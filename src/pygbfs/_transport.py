"""HTTP transport for fetching raw feed documents."""

from __future__ import annotations

import logging
from typing import Protocol

import aiohttp

from pygbfs.config import GbfsConfig
from pygbfs.exceptions import GbfsTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the feed fetcher.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def fetch(self, url: str) -> bytes:
        ...


class HttpTransport:
    """GET feed documents over an :class:`aiohttp.ClientSession`."""

    def __init__(self, config: GbfsConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def fetch(self, url: str) -> bytes:
        """Return the response body for *url*.

        Raises :class:`GbfsTransportError` on connection failures, on
        timeouts and on any non-2xx status.
        """
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                body = await resp.read()
                if not 200 <= resp.status < 300:
                    text = body[:200].decode("utf-8", errors="replace")
                    raise GbfsTransportError(
                        f"HTTP {resp.status} from {url}: {text}",
                        status_code=resp.status,
                        url=url,
                    )
        except GbfsTransportError:
            raise
        except TimeoutError as exc:
            raise GbfsTransportError(
                f"Request to {url} timed out after {self._config.request_timeout}s",
                url=url,
            ) from exc
        except aiohttp.ClientError as exc:
            raise GbfsTransportError(
                f"Request to {url} failed: {exc}",
                url=url,
            ) from exc

        return body
