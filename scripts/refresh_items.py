#!/usr/bin/env python3
"""
Refresh Item Previews

Re-fetches product previews for wishlist items stored in a JSON document
and writes the document back. Only items whose preview is at least 24 hours
old are refreshed unless --force is given.

Document format:
    {"items": [{"id": 1, "name": "Lamp", "link": "https://...", ...}, ...]}

Usage:
    python3 scripts/refresh_items.py --items data/items.json
    python3 scripts/refresh_items.py --items data/items.json --force --delay 2
    python3 scripts/refresh_items.py --items data/items.json --dry-run
"""

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from giftlist.common import load_fetch_settings, setup_logging
from giftlist.common.settings import FetchSettings
from giftlist.extraction import MetadataService
from giftlist.items import ItemRefresher, should_refresh_metadata
from giftlist.models import WishlistItem

logger = logging.getLogger(__name__)


def load_items(path: str) -> list:
    """Load items from a JSON document."""
    with open(path, 'r', encoding='utf-8') as f:
        document = json.load(f)
    return [WishlistItem.from_dict(entry) for entry in document.get("items", [])]


def save_items(path: str, items: list) -> None:
    """Write items back, keeping any other top-level keys."""
    with open(path, 'r', encoding='utf-8') as f:
        document = json.load(f)
    document["items"] = [item.to_dict() for item in items]

    tmp_path = f"{path}.tmp"
    with open(tmp_path, 'w', encoding='utf-8') as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
    os.replace(tmp_path, path)


def main():
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Refresh stale product previews in a wishlist items document"
    )
    parser.add_argument("--items", required=True, help="Items JSON document")
    parser.add_argument("--force", action="store_true", help="Refresh every item with a link")
    parser.add_argument("--delay", type=float, default=1.0, help="Delay between requests (seconds)")
    parser.add_argument("--dry-run", action="store_true", help="List items due for refresh and exit")
    parser.add_argument("--config", help="Fetch settings YAML (default: config/fetch_settings.yaml)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    items = load_items(args.items)

    if args.dry_run:
        due = [item for item in items
               if (bool(item.link) if args.force else should_refresh_metadata(item))]
        print(f"{len(due)} of {len(items)} items due for refresh:")
        for item in due:
            print(f"  {item.id}: {item.link}")
        return

    try:
        settings = load_fetch_settings(args.config)
    except FileNotFoundError:
        if args.config:
            raise
        settings = FetchSettings()

    refresher = ItemRefresher(MetadataService(settings), delay=args.delay)
    report = refresher.refresh(items, force=args.force)
    save_items(args.items, report.items)

    print(f"Refreshed: {report.refreshed}, failed: {report.failed}, skipped: {report.skipped}")


if __name__ == "__main__":
    main()
