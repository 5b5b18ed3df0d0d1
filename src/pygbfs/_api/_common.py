"""Shared helpers for fetching GBFS documents.

This module centralizes the fetch, decode and annotate sequence used for
every feed type.  Annotation (the derived timestamp and duration fields)
happens inside model validation, so a document returned from here is
always fully normalized.

It is internal to pygbfs and may change at any time.
"""

from __future__ import annotations

import json
import logging
from typing import TypeVar

from pydantic import ValidationError

from pygbfs._transport import Transport
from pygbfs.exceptions import FeedNotFoundError, GbfsDecodeError, LanguageNotFoundError
from pygbfs.models._base import GbfsFeed
from pygbfs.models.discovery import AutoDiscoveryDocument

_logger = logging.getLogger(__name__)

FeedT = TypeVar("FeedT", bound=GbfsFeed)


def decode_feed(url: str, body: bytes, model: type[FeedT]) -> FeedT:
    """Parse *body* as JSON and validate it into *model*."""
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise GbfsDecodeError(
            f"Invalid JSON from {url}: {body[:64]!r}",
            url=url,
        ) from exc

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise GbfsDecodeError(
            f"Response from {url} is not a valid {model.__name__}: {exc.error_count()} error(s)",
            url=url,
        ) from exc


async def fetch_feed(transport: Transport, url: str, model: type[FeedT]) -> FeedT:
    """Download *url* and return it as a normalized *model* instance."""
    body = await transport.fetch(url)
    document = decode_feed(url, body, model)
    _logger.debug(
        "Fetched %s from %s (last_updated=%d ttl=%d)",
        model.__name__,
        url,
        document.last_updated,
        document.ttl,
    )
    return document


def find_feed_url(document: AutoDiscoveryDocument, language: str, feed_name: str) -> str:
    """Locate a child-feed URL in *document* for *language*.

    When a language lists the same feed name more than once, the last
    entry wins.
    """
    entry = document.data.get(language)
    if entry is None:
        raise LanguageNotFoundError(language)
    url = entry.find_url(feed_name)
    if not url:
        raise FeedNotFoundError(feed_name, language=language)
    return url
