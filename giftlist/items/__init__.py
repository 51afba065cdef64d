"""
Wishlist item helpers built on the metadata service.

Modules:
    refresh - staleness check, apply_metadata, ItemRefresher
"""

from .refresh import (
    ItemRefresher,
    RefreshReport,
    apply_metadata,
    is_metadata_stale,
    should_refresh_metadata,
)

__all__ = [
    'ItemRefresher',
    'RefreshReport',
    'apply_metadata',
    'is_metadata_stale',
    'should_refresh_metadata',
]
