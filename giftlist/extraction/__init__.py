"""
Product metadata extraction.

Modules:
    url_utils - URL normalization, retailer detection, image URL checks
    fetcher - ProductPageFetcher for browser-like page requests
    metadata_service - MetadataService / fetch_metadata pipeline entry point
    parsers - Retailer-specific and generic page parsers
"""

from .fetcher import FetchError, ProductPageFetcher
from .metadata_service import MetadataService, fetch_metadata
from .parsers import PARSERS, get_parser
from .url_utils import detect_retailer, is_valid_image_url, normalize_url

__all__ = [
    # Pipeline
    'MetadataService',
    'fetch_metadata',
    # Fetching
    'ProductPageFetcher',
    'FetchError',
    # URL helpers
    'normalize_url',
    'detect_retailer',
    'is_valid_image_url',
    # Parser dispatch
    'PARSERS',
    'get_parser',
]
