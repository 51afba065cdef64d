"""
Wishlist item model.

The stored item as the wishlist backend keeps it, including the fields
populated from product metadata lookups.
"""

from dataclasses import dataclass, fields
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional


@dataclass
class WishlistItem:
    """
    A wishlist entry with its cached product preview.

    Field Groups:
    - User fields: name, link, price as entered by the owner
    - Fetched fields: values copied from the last successful lookup
    - Fetch tracking: when the last lookup ran and why it failed
    """

    # User fields
    id: int
    name: str
    link: Optional[str] = None
    price: Optional[float] = None

    # Fetched fields
    retailer: Optional[str] = None
    image_url: Optional[str] = None
    fetched_name: Optional[str] = None
    fetched_price: Optional[float] = None

    # Fetch tracking
    last_fetched_at: Optional[datetime] = None
    fetch_error: Optional[str] = None
    snapshot_date: Optional[date] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Item name is required")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WishlistItem":
        """Build an item from its JSON document form (unknown keys ignored)."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}

        # Empty strings from hand-edited documents mean "never fetched"
        if 'last_fetched_at' in values:
            value = values['last_fetched_at']
            values['last_fetched_at'] = _parse_timestamp(value) if value else None
        if 'snapshot_date' in values:
            value = values['snapshot_date']
            if not value:
                values['snapshot_date'] = None
            elif isinstance(value, str):
                values['snapshot_date'] = date.fromisoformat(value[:10])

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """JSON document form with ISO-8601 timestamps."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if self.last_fetched_at is not None:
            data['last_fetched_at'] = self.last_fetched_at.isoformat()
        if self.snapshot_date is not None:
            data['snapshot_date'] = self.snapshot_date.isoformat()
        return data


def _parse_timestamp(value) -> datetime:
    """Parse an ISO timestamp; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
