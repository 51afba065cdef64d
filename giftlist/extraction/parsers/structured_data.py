"""
Structured Data Parser

Extracts product information from JSON-LD structured data (schema.org).
Retailers embed it for search engines, so when present it is the most
reliable source for a product's name, price and image.

Handles a single object, a top-level array, and @graph containers.
"""

import json
import logging
from typing import Any, Dict, Iterator, List, Optional

from bs4 import BeautifulSoup

from ...common.text_utils import clean_text, parse_price

logger = logging.getLogger(__name__)


class StructuredDataParser:
    """
    Parses JSON-LD Product objects from HTML pages.

    JSON-LD is embedded in <script type="application/ld+json"> tags.

    Usage:
        parser = StructuredDataParser()
        products = parser.parse(soup)
        name = parser.extract_name(products[0])
        price = parser.extract_price(products[0])
    """

    SUPPORTED_TYPES = ['Product']

    def parse(self, soup: BeautifulSoup) -> List[Dict[str, Any]]:
        """
        Extract every JSON-LD Product object from the page.

        Args:
            soup: BeautifulSoup object of the page

        Returns:
            Product objects in document order (empty list if none)
        """
        products = []

        for script in soup.find_all('script', type='application/ld+json'):
            text = script.string or script.get_text()
            if not text or not text.strip():
                continue
            try:
                data = json.loads(text)
            except json.JSONDecodeError:
                logger.debug("Skipping invalid JSON-LD block")
                continue
            products.extend(self._find_products(data))

        return products

    def _find_products(self, data: Any) -> Iterator[Dict[str, Any]]:
        """Yield Product objects from a decoded JSON-LD value."""
        if isinstance(data, list):
            for item in data:
                yield from self._find_products(item)
        elif isinstance(data, dict):
            if self._is_supported(data.get('@type')):
                yield data
            elif isinstance(data.get('@graph'), list):
                yield from self._find_products(data['@graph'])

    def _is_supported(self, schema_type: Any) -> bool:
        if isinstance(schema_type, list):
            return any(t in self.SUPPORTED_TYPES for t in schema_type)
        return schema_type in self.SUPPORTED_TYPES

    def extract_name(self, data: Dict[str, Any]) -> str:
        """
        Extract product name from structured data.

        Returns:
            Name or empty string
        """
        if not data:
            return ""

        name = data.get('name')
        return clean_text(name) if isinstance(name, str) else ""

    def extract_price(self, data: Dict[str, Any]) -> Optional[float]:
        """
        Extract current price from the first offer.

        Understands Offer.price and AggregateOffer.lowPrice.

        Args:
            data: Parsed JSON-LD Product

        Returns:
            Positive price or None
        """
        if not data:
            return None

        offers = data.get('offers', [])
        if isinstance(offers, dict):
            offers = [offers]
        if not isinstance(offers, list) or not offers or not isinstance(offers[0], dict):
            return None

        offer = offers[0]
        price = offer.get('price')
        if price is None:
            price = offer.get('lowPrice')
        return parse_price(price)

    def extract_image(self, data: Dict[str, Any]) -> str:
        """
        Extract main image URL from structured data.

        Args:
            data: Parsed JSON-LD Product

        Returns:
            Image URL or empty string
        """
        if not data:
            return ""

        image = data.get('image')
        if isinstance(image, list):
            image = image[0] if image else None
        if isinstance(image, dict):
            image = image.get('url') or image.get('contentUrl')
        return image.strip() if isinstance(image, str) else ""

