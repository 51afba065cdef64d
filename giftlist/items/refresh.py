"""
Item Metadata Refresh

Caller-side helpers for wishlist items that carry a product link:
- Staleness check deciding when a stored preview is due for a re-fetch
- Copying a ProductMetadata result onto a stored item
- ItemRefresher for refreshing a batch of stored items

Features:
- Failed lookups keep the previous preview and record the reason
- Delay between requests for respectful crawling
- Progress counters for reporting
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..common.constants import METADATA_MAX_AGE_HOURS
from ..models import ProductMetadata, WishlistItem

logger = logging.getLogger(__name__)

MAX_METADATA_AGE = timedelta(hours=METADATA_MAX_AGE_HOURS)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_metadata_stale(last_fetched_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """
    Check whether previously fetched metadata is outdated.

    Args:
        last_fetched_at: When metadata was last fetched (None if never)
        now: Reference time (default: current UTC time)

    Returns:
        True if never fetched or at least 24 hours old
    """
    if last_fetched_at is None:
        return True

    now = now or _utcnow()
    if last_fetched_at.tzinfo is None:
        last_fetched_at = last_fetched_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return now - last_fetched_at >= MAX_METADATA_AGE


def should_refresh_metadata(item: WishlistItem, now: Optional[datetime] = None) -> bool:
    """True if the item has a link and its preview is stale."""
    if not item.link:
        return False
    return is_metadata_stale(item.last_fetched_at, now)


def apply_metadata(
    item: WishlistItem,
    metadata: ProductMetadata,
    fetched_at: Optional[datetime] = None,
) -> WishlistItem:
    """
    Copy a lookup result onto an item.

    On success the fetched fields are replaced and any previous error is
    cleared. On failure the previous preview is kept and the reason stored.

    Args:
        item: Stored item
        metadata: Result of MetadataService.fetch_metadata
        fetched_at: Lookup time (default: current UTC time)

    Returns:
        New WishlistItem; the input is not modified
    """
    fetched_at = fetched_at or _utcnow()
    tracking = dict(
        retailer=metadata.retailer,
        last_fetched_at=fetched_at,
        snapshot_date=fetched_at.date(),
    )

    if metadata.success:
        return replace(
            item,
            fetched_name=metadata.name,
            fetched_price=metadata.price,
            image_url=metadata.image_url,
            fetch_error=None,
            **tracking,
        )

    return replace(item, fetch_error=metadata.error, **tracking)


@dataclass
class RefreshReport:
    """Outcome of an ItemRefresher run."""
    items: List[WishlistItem] = field(default_factory=list)
    refreshed: int = 0
    failed: int = 0
    skipped: int = 0


class ItemRefresher:
    """Refreshes product previews for a batch of stored items."""

    def __init__(self, service, delay: float = 1.0):
        """
        Initialize the refresher.

        Args:
            service: Object with fetch_metadata(url) -> ProductMetadata
            delay: Delay between requests in seconds
        """
        self.service = service
        self.delay = delay

    def refresh(
        self,
        items: List[WishlistItem],
        force: bool = False,
        now: Optional[datetime] = None,
    ) -> RefreshReport:
        """
        Refresh every item that is due.

        Args:
            items: Stored items (returned in the same order)
            force: Refresh every item with a link, stale or not
            now: Reference time for the staleness check

        Returns:
            RefreshReport with the updated items and counters
        """
        report = RefreshReport()
        fetched_any = False

        for idx, item in enumerate(items, 1):
            due = bool(item.link) if force else should_refresh_metadata(item, now)
            if not due:
                report.skipped += 1
                report.items.append(item)
                continue

            if fetched_any and self.delay > 0:
                time.sleep(self.delay)
            fetched_any = True

            logger.info("[%d/%d] Refreshing item %s: %s", idx, len(items), item.id, item.link)
            metadata = self.service.fetch_metadata(item.link)
            report.items.append(apply_metadata(item, metadata))

            if metadata.success:
                report.refreshed += 1
            else:
                report.failed += 1
                logger.warning("Item %s: %s", item.id, metadata.error)

        logger.info(
            "Refresh complete: %d refreshed, %d failed, %d skipped",
            report.refreshed, report.failed, report.skipped,
        )
        return report
