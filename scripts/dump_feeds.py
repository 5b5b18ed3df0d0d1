#!/usr/bin/env python3
"""Dump every document the pygbfs library can fetch for one feed.

Resolves the auto-discovery document, then fetches system information,
station information and station status for the chosen language, printing
a summary of the parsed model **and** the raw JSON so you can spot
fields that aren't parsed yet.

Usage
-----
Pass the auto-discovery URL or set it in the environment::

    export GBFS_FEED_URL="https://gbfs.example.com/gbfs.json"
    python scripts/dump_feeds.py --language en

Options::

    --feed-url URL       Auto-discovery URL (default: $GBFS_FEED_URL)
    --language CODE      Language to query (default: first advertised)
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --skip-system        Skip system_information
    --skip-information   Skip station_information
    --skip-status        Skip station_status
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pygbfs import GbfsClient, GbfsConfig, GbfsError  # noqa: E402
from pygbfs.models import GbfsFeed  # noqa: E402

# ── helpers ──────────────────────────────────────────────────


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


def _print_document(name: str, document: GbfsFeed, out: list[str]) -> dict[str, Any]:
    """Summarize a feed document and return its JSON-friendly form."""
    out.append(_section(name))
    out.append(f"  last_updated : {document.last_updated_timestamp} ({document.last_updated})")
    out.append(f"  ttl          : {document.ttl_duration} ({document.ttl})")
    stations = getattr(document.data, "stations", None)
    if stations is not None:
        out.append(f"  stations     : {len(stations)}")
    out.append(f"\n  ── {name} (raw JSON) ──")
    out.append(json.dumps(document.raw, indent=2, default=str, ensure_ascii=False))
    return {"parsed": document.model_dump(mode="json", exclude={"raw"}), "raw": document.raw}


# ── main ─────────────────────────────────────────────────────


async def dump_language(
    client: GbfsClient,
    language: str,
    *,
    skip: set[str],
    json_mode: bool,
) -> dict[str, Any]:
    """Fetch and dump every child feed for a single language."""
    out: list[str] = []
    language_data: dict[str, Any] = {"language": language}

    fetchers = {
        "system_information": client.get_system_information,
        "station_information": client.get_station_information,
        "station_status": client.get_station_status,
    }
    for feed_name, fetch in fetchers.items():
        if feed_name in skip:
            continue
        try:
            document = await fetch(language)
            language_data[feed_name] = _print_document(f"{feed_name.upper()}  lang={language}", document, out)
        except GbfsError as exc:
            out.append(_section(f"{feed_name.upper()}  lang={language}"))
            out.append(f"  !! {feed_name} failed: {exc}")
            language_data[feed_name] = {"error": str(exc), "type": type(exc).__name__}

    if not json_mode:
        print("\n".join(out))

    return language_data


async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Dump all data pygbfs can fetch for debugging / development.",
    )
    parser.add_argument("--feed-url", help="Auto-discovery URL (default: $GBFS_FEED_URL)")
    parser.add_argument("--language", help="Language to query (default: first advertised)")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--skip-system", action="store_true", help="Skip system_information")
    parser.add_argument("--skip-information", action="store_true", help="Skip station_information")
    parser.add_argument("--skip-status", action="store_true", help="Skip station_status")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    skip: set[str] = set()
    if args.skip_system:
        skip.add("system_information")
    if args.skip_information:
        skip.add("station_information")
    if args.skip_status:
        skip.add("station_status")

    overrides: dict[str, Any] = {}
    if args.feed_url:
        overrides["feed_url"] = args.feed_url
    config = GbfsConfig.from_env(**overrides)

    result: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(),
        "feed_url": config.feed_url,
    }

    async with GbfsClient(config) as client:
        discovery = await client.get_auto_discovery()
        languages = sorted(await client.get_supported_languages())

        out: list[str] = []
        out.append(_section("pygbfs dump_feeds"))
        out.append(f"  time      : {result['timestamp']}")
        out.append(f"  feed_url  : {config.feed_url}")
        out.append(f"  languages : {', '.join(languages) or '-'}")
        result["auto_discovery"] = _print_document("AUTO-DISCOVERY", discovery, out)
        result["languages"] = languages

        if not args.json_mode:
            print("\n".join(out))

        language = args.language or (languages[0] if languages else None)
        if language is None:
            print("No languages advertised by the auto-discovery document", file=sys.stderr)
        else:
            result["feeds"] = await dump_language(client, language, skip=skip, json_mode=args.json_mode)

    # ── Output ──
    payload = json.dumps(result, indent=2, default=str, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"JSON written to {args.output}", file=sys.stderr)
    elif args.json_mode:
        print(payload)


if __name__ == "__main__":
    asyncio.run(main())
