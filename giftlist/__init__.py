"""
Wishlist Product Preview Tool

Modules:
    models      - Data models (ProductMetadata, Retailer, WishlistItem)
    common      - Shared utilities (config loader, settings, logging, text utils)
    extraction  - URL normalization, page fetching and retailer parsers
    items       - Caller-side helpers (staleness, refreshing stored items)
"""
