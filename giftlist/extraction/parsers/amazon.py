"""
Amazon Product Parser

Amazon pages often carry a JSON-LD Product block; values found there take
precedence and DOM scraping only fills the fields it left empty. DOM
selectors cover the regular product page and Luxury Stores ("bond") pages.
"""

import re
from itertools import chain
from typing import Optional

from ...common.constants import PARSE_FAILED_TEMPLATE
from ...common.text_utils import clean_text
from ...models import ProductMetadata, Retailer
from ..url_utils import is_valid_image_url, resolve_url
from .html_parser import HTMLContentParser
from .structured_data import StructuredDataParser

NAME_SELECTORS = [
    '#productTitle',
    '#title',
    # Amazon Luxury Stores
    'span#bond-title-desktop',
    '#bond-title-block',
    'h1',
]

PRICE_SELECTORS = [
    '.a-price .a-offscreen',
    '.priceToPay .a-offscreen',
    '.apexPriceToPay .a-offscreen',
    '#priceblock_ourprice',
    '#priceblock_dealprice',
    '[data-a-color="price"]',
]

IMAGE_SELECTORS = [
    ('#landingImage', 'data-old-hires'),
    ('#landingImage', 'src'),
    ('#imgBlkFront', 'src'),
    ('#main-image', 'src'),
    ('.a-dynamic-image', 'src'),
]

_TITLE_PREFIX = re.compile(r'^Amazon\.com\s*:\s*', re.IGNORECASE)


def _clean_page_title(title: str) -> str:
    """Strip "Amazon.com: " and the trailing ": Category" part of <title>."""
    title = _TITLE_PREFIX.sub('', title)
    return title.split(':', 1)[0].strip()


def parse_amazon(html: str, url: str) -> ProductMetadata:
    """
    Extract product metadata from an Amazon product page.

    Args:
        html: Page HTML
        url: Normalized page URL

    Returns:
        ProductMetadata for Amazon
    """
    parser = HTMLContentParser(html, url)
    structured = StructuredDataParser()

    name = ""
    price: Optional[float] = None
    image_url: Optional[str] = None

    for product in structured.parse(parser.soup):
        if not name:
            name = structured.extract_name(product)
        if price is None:
            price = structured.extract_price(product)
        if image_url is None:
            candidate = resolve_url(url, structured.extract_image(product))
            if is_valid_image_url(candidate):
                image_url = candidate

    if not name:
        name = (
            parser.first_text(NAME_SELECTORS)
            or _clean_page_title(parser.page_title())
            or parser.meta_content('og:title')
        )

    if price is None:
        price = parser.first_price(chain(
            parser.texts(PRICE_SELECTORS),
            [parser.meta_content('og:price:amount')],
        ))

    if image_url is None:
        image_url = parser.first_image(chain(
            parser.attrs(IMAGE_SELECTORS),
            [parser.meta_content('og:image')],
        ))

    return ProductMetadata.from_fields(
        retailer=Retailer.AMAZON,
        name=clean_text(name),
        price=price,
        image_url=image_url,
        error=PARSE_FAILED_TEMPLATE.format(retailer=Retailer.AMAZON.value),
    )
