"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Failure reasons surfaced in ProductMetadata.error
INVALID_URL = "Invalid URL"
REQUEST_TIMEOUT = "Request timeout"
BOT_DETECTED = "Access blocked - bot detection triggered"
ACCESS_BLOCKED = "Access blocked by retailer"
PRODUCT_NOT_FOUND = "Product not found"
FETCH_FAILED = "Failed to fetch product data"
NO_METADATA_FOUND = "No product metadata found"
PARSE_FAILED_TEMPLATE = "Unable to parse {retailer} product data"

# HTTP statuses with a dedicated failure reason
BLOCKED_STATUS_CODES = frozenset({403, 429})
NOT_FOUND_STATUS_CODES = frozenset({404})

# Hostname fragment -> retailer name, checked in order (first match wins)
RETAILER_DOMAINS = (
    ("amazon.", "Amazon"),
    ("target.", "Target"),
    ("walmart.", "Walmart"),
    ("bestbuy.", "Best Buy"),
    ("etsy.", "Etsy"),
    ("ebay.", "eBay"),
)

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp", ".gif")

# Retailer image CDNs that serve images without a file extension
IMAGE_CDN_HOSTS = frozenset({
    "images-amazon.com",
    "media-amazon.com",
    "ssl-images-amazon.com",
    "target.scene7.com",
    "i5.walmartimages.com",
    "pisces.bbystatic.com",
    "i.etsystatic.com",
    "i.ebayimg.com",
})

# Previously fetched metadata older than this is refreshed
METADATA_MAX_AGE_HOURS = 24
