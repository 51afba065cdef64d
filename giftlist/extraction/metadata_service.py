"""
Product Metadata Service

Entry point used by the wishlist item handlers: normalize the link, detect
the retailer, fetch the page and run the matching parser. Every anticipated
failure comes back as a ProductMetadata with success=False; nothing is
raised to the caller for bad links or unreachable pages.
"""

from __future__ import annotations

import logging

import requests

from ..common.constants import INVALID_URL
from ..common.settings import FetchSettings
from ..models import ProductMetadata, Retailer
from .fetcher import FetchError, ProductPageFetcher
from .parsers import get_parser
from .url_utils import detect_retailer, normalize_url

logger = logging.getLogger(__name__)


class MetadataService:
    """
    Fetches product previews for wishlist links.

    Usage:
        service = MetadataService()
        metadata = service.fetch_metadata("amazon.com/dp/B0XXX")
        if metadata.success:
            print(metadata.name, metadata.price)
    """

    def __init__(
        self,
        settings: FetchSettings | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize the service.

        Args:
            settings: Request configuration (defaults to FetchSettings())
            session: Optional requests session shared by the fetcher
        """
        self.settings = settings or FetchSettings()
        self.fetcher = ProductPageFetcher(self.settings, session=session)

    def fetch_metadata(self, url: str) -> ProductMetadata:
        """
        Fetch and parse product metadata for a link.

        Args:
            url: Link as entered by the user (scheme optional)

        Returns:
            ProductMetadata; success=False with an error reason on failure
        """
        normalized_url = normalize_url(url)
        if not normalized_url:
            logger.info("Rejected invalid product link: %r", url)
            return ProductMetadata.failure(INVALID_URL, Retailer.UNKNOWN)

        retailer = detect_retailer(normalized_url)

        try:
            html = self.fetcher.fetch(normalized_url, retailer)
        except FetchError as e:
            return ProductMetadata.failure(e.reason, retailer)

        parser = get_parser(retailer)
        logger.debug("Parsing %s with %s", normalized_url, parser.__name__)
        metadata = parser(html, normalized_url)

        if not metadata.success:
            logger.info("No product data found at %s: %s", normalized_url, metadata.error)
        return metadata


def fetch_metadata(url: str, settings: FetchSettings | None = None) -> ProductMetadata:
    """Fetch product metadata for a link with a one-off MetadataService."""
    return MetadataService(settings).fetch_metadata(url)
